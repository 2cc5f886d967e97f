"""Document assembler — accumulates fragments and serializes one HTML page.

The builder is a mutable fluent object: every configuration method mutates
the builder in place and returns it, so calls can be chained::

    html = (
        Builder()
        .raw_body("<body>hello world</body>")
        .script("/bundle.js")
        .style("/bundle.css")
        .finalize()
    )

.. warning::
   Values are interpolated into the markup verbatim. Nothing is escaped or
   validated, so callers must escape untrusted content themselves before
   passing it in. Unescaped user input produces unsafe HTML.
"""

from __future__ import annotations

import logging
from typing import Optional

from html_index import templates
from html_index.errors import BuilderFinalizedError
from html_index.models.enums import ScriptLoading, StyleLoading

logger = logging.getLogger(__name__)


class Builder:
    """Collect head/body fragments and assemble them into a single document.

    A builder is consumed by :meth:`finalize`. Any further call on it,
    including a second ``finalize()``, raises :class:`BuilderFinalizedError`.
    Builders are not thread-safe; use one per concurrent task.
    """

    def __init__(self) -> None:
        self._lang: str = templates.DEFAULT_LANG
        self._title: Optional[str] = None
        self._description: Optional[str] = None
        self._theme_color: Optional[str] = None
        self._favicon: Optional[str] = None
        self._manifest: Optional[str] = None
        self._body: Optional[str] = None
        self._scripts: list[str] = []
        self._styles: list[str] = []
        self._fonts: list[str] = []
        self._has_async_style = False
        self._finalized = False

    def __repr__(self) -> str:
        state = "finalized" if self._finalized else "open"
        return (
            f"Builder(lang={self._lang!r}, scripts={len(self._scripts)}, "
            f"styles={len(self._styles)}, fonts={len(self._fonts)}, {state})"
        )

    @property
    def is_finalized(self) -> bool:
        """Whether :meth:`finalize` has already consumed this builder."""
        return self._finalized

    # ------------------------------------------------------------------
    # Singleton fields
    # ------------------------------------------------------------------

    def lang(self, tag: str) -> Builder:
        """Set the ``lang`` attribute of the root element (default ``en-US``)."""
        self._ensure_open()
        self._lang = tag
        return self

    def title(self, text: str) -> Builder:
        """Set the document title. *text* is not escaped."""
        self._ensure_open()
        self._title = templates.TITLE.format(text)
        return self

    def description(self, text: str) -> Builder:
        """Set the description meta tag. *text* is not escaped."""
        self._ensure_open()
        self._description = templates.DESCRIPTION.format(text)
        return self

    def theme_color(self, color: str) -> Builder:
        self._ensure_open()
        self._theme_color = templates.THEME_COLOR.format(color)
        return self

    def favicon(self, path: str) -> Builder:
        self._ensure_open()
        self._favicon = templates.FAVICON.format(path)
        return self

    def manifest(self, path: str) -> Builder:
        """Link a web app manifest."""
        self._ensure_open()
        self._manifest = templates.MANIFEST.format(path)
        return self

    def raw_body(self, fragment: str) -> Builder:
        """Set the body, including its ``<body></body>`` tags.

        The fragment is inserted as-is after ``</head>``. When no body is
        set, none is synthesized.
        """
        self._ensure_open()
        self._body = fragment
        return self

    # ------------------------------------------------------------------
    # Scripts
    # ------------------------------------------------------------------

    def script(self, src: str) -> Builder:
        """Add a deferred script, executed after the document is parsed."""
        self._ensure_open()
        self._scripts.append(templates.SCRIPT_DEFER.format(src))
        return self

    def blocking_script(self, src: str) -> Builder:
        """Add a script that blocks rendering until it is loaded."""
        self._ensure_open()
        self._scripts.append(templates.SCRIPT_BLOCKING.format(src))
        return self

    def inline_script(self, text: str) -> Builder:
        """Add a ``<script>`` block containing *text* verbatim."""
        self._ensure_open()
        self._scripts.append(templates.SCRIPT_INLINE.format(text))
        return self

    def lazy_script(self, src: str) -> Builder:
        """Hint the browser to prefetch *src* in the background.

        This emits a ``<link rel="prefetch">``; the script is not executed.
        """
        self._ensure_open()
        self._scripts.append(templates.SCRIPT_PREFETCH.format(src))
        return self

    def add_script(self, src: str, loading: ScriptLoading = ScriptLoading.DEFER) -> Builder:
        """Add a script using the given loading strategy.

        Args:
            src: Script URL, or the script text for ``ScriptLoading.INLINE``.
            loading: One of :class:`ScriptLoading`.

        Returns:
            The builder, for chaining.
        """
        loading = ScriptLoading(loading)
        if loading is ScriptLoading.BLOCKING:
            return self.blocking_script(src)
        if loading is ScriptLoading.INLINE:
            return self.inline_script(src)
        if loading is ScriptLoading.PREFETCH:
            return self.lazy_script(src)
        return self.script(src)

    # ------------------------------------------------------------------
    # Styles & fonts
    # ------------------------------------------------------------------

    def style(self, src: str) -> Builder:
        """Add a stylesheet that loads without blocking rendering.

        The link is preloaded and switched to ``rel="stylesheet"`` once
        fetched. The first call also appends a small inline polyfill script
        for browsers without preload support; later calls do not repeat it.
        """
        self._ensure_open()
        if not self._has_async_style:
            self._scripts.append(templates.SCRIPT_INLINE.format(templates.ASYNC_STYLE_POLYFILL))
            self._has_async_style = True
            logger.debug("Injected async-style polyfill at script slot %d", len(self._scripts) - 1)
        self._styles.append(templates.STYLE_ASYNC.format(src))
        return self

    def inline_style(self, text: str) -> Builder:
        """Add a ``<style>`` block containing *text* verbatim."""
        self._ensure_open()
        self._styles.append(templates.STYLE_INLINE.format(text))
        return self

    def blocking_style(self, src: str) -> Builder:
        """Add a regular render-blocking stylesheet link."""
        self._ensure_open()
        self._styles.append(templates.STYLE_BLOCKING.format(src))
        return self

    def add_style(self, src: str, loading: StyleLoading = StyleLoading.ASYNC) -> Builder:
        """Add a stylesheet using the given loading strategy.

        For ``StyleLoading.INLINE`` *src* holds the CSS text.
        """
        loading = StyleLoading(loading)
        if loading is StyleLoading.BLOCKING:
            return self.blocking_style(src)
        if loading is StyleLoading.INLINE:
            return self.inline_style(src)
        return self.style(src)

    def font(self, src: str) -> Builder:
        """Preload a font file (fetched with CORS, as browsers require)."""
        self._ensure_open()
        self._fonts.append(templates.FONT_PRELOAD.format(src))
        return self

    # ------------------------------------------------------------------
    # Finalize
    # ------------------------------------------------------------------

    def finalize(self) -> str:
        """Assemble the document and consume the builder.

        Returns:
            The complete document as a single string, without separators
            between fragments and without a trailing newline.

        Raises:
            BuilderFinalizedError: If the builder was already finalized.
        """
        self._ensure_open()
        parts: list[str] = [
            templates.DOCTYPE,
            templates.HTML_OPEN.format(self._lang),
            templates.HEAD_OPEN,
            templates.CHARSET,
            templates.VIEWPORT,
        ]
        if self._title is not None:
            parts.append(self._title)
        if self._description is not None:
            parts.append(self._description)
        parts.extend(self._scripts)
        parts.extend(self._styles)
        parts.extend(self._fonts)
        for slot in (self._manifest, self._theme_color, self._favicon):
            if slot is not None:
                parts.append(slot)
        parts.append(templates.HEAD_CLOSE)
        if self._body is not None:
            parts.append(self._body)
        parts.append(templates.HTML_CLOSE)

        html = "".join(parts)
        self._consume()
        logger.debug("Finalized document (%d chars)", len(html))
        return html

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _ensure_open(self) -> None:
        if self._finalized:
            raise BuilderFinalizedError("Builder has already been finalized; create a new one.")

    def _consume(self) -> None:
        self._finalized = True
        self._scripts = []
        self._styles = []
        self._fonts = []
        self._body = None


def new() -> Builder:
    """Create an empty builder with the default language applied."""
    return Builder()
