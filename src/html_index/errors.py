"""Errors — custom exceptions for html-index.

Raised by the builder and the config loader, caught by the CLI.
"""


class HtmlIndexError(Exception):
    """Base exception for all html-index errors."""


class BuilderFinalizedError(HtmlIndexError):
    """Raised when a builder is used after ``finalize()`` consumed it."""


class ConfigurationError(HtmlIndexError):
    """Raised when a page configuration file is missing or invalid."""
