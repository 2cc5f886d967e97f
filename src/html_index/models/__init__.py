"""Loading-strategy enums."""

from html_index.models.enums import ScriptLoading, StyleLoading

__all__ = ["ScriptLoading", "StyleLoading"]
