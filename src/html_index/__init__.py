"""html-index — assemble a complete HTML document from head fragments."""

from html_index.builder import Builder, new
from html_index.errors import BuilderFinalizedError, ConfigurationError, HtmlIndexError
from html_index.models.enums import ScriptLoading, StyleLoading

__all__ = [
    "Builder",
    "BuilderFinalizedError",
    "ConfigurationError",
    "HtmlIndexError",
    "ScriptLoading",
    "StyleLoading",
    "new",
]
