"""Enumerations for fragment loading strategies."""

from enum import Enum


class ScriptLoading(str, Enum):
    """How a script fragment is loaded by the browser."""

    DEFER = "defer"  # <script src defer>
    BLOCKING = "blocking"  # <script src>, blocks rendering
    INLINE = "inline"  # literal script text
    PREFETCH = "prefetch"  # <link rel="prefetch">, not executed


class StyleLoading(str, Enum):
    """How a stylesheet fragment is loaded by the browser."""

    ASYNC = "async"  # rel=preload, flipped to stylesheet on load
    BLOCKING = "blocking"  # plain rel=stylesheet
    INLINE = "inline"  # literal <style> block
