"""Declarative page configuration package."""

from html_index.config.loader import clear_cache, load_config
from html_index.config.models import PageConfig, ScriptEntry, StyleEntry

__all__ = ["PageConfig", "ScriptEntry", "StyleEntry", "clear_cache", "load_config"]
