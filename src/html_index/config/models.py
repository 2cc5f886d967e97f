"""Pydantic models describing a page declaratively.

A ``PageConfig`` is the JSON-friendly counterpart of a :class:`Builder`
call chain. Like the builder, it performs no escaping: string values end up
in the markup verbatim.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from html_index.builder import Builder
from html_index.models.enums import ScriptLoading, StyleLoading
from html_index.templates import DEFAULT_LANG


# ---------------------------------------------------------------------------
# Fragment entries
# ---------------------------------------------------------------------------


class ScriptEntry(BaseModel):
    """A script and its loading strategy.

    For ``inline`` scripts, ``src`` holds the script text itself.
    """

    model_config = ConfigDict(extra="forbid")

    src: str
    loading: ScriptLoading = ScriptLoading.DEFER


class StyleEntry(BaseModel):
    """A stylesheet and its loading strategy (``inline``: ``src`` is CSS)."""

    model_config = ConfigDict(extra="forbid")

    src: str
    loading: StyleLoading = StyleLoading.ASYNC


# ---------------------------------------------------------------------------
# Root model
# ---------------------------------------------------------------------------


class PageConfig(BaseModel):
    """Complete declarative description of one document."""

    model_config = ConfigDict(extra="forbid")

    lang: str = DEFAULT_LANG
    title: Optional[str] = None
    description: Optional[str] = None
    theme_color: Optional[str] = None
    favicon: Optional[str] = None
    manifest: Optional[str] = None
    body: Optional[str] = None
    scripts: list[ScriptEntry] = Field(default_factory=list)
    styles: list[StyleEntry] = Field(default_factory=list)
    fonts: list[str] = Field(default_factory=list)

    def to_builder(self) -> Builder:
        """Replay this configuration onto a fresh :class:`Builder`."""
        builder = Builder().lang(self.lang)
        if self.title is not None:
            builder.title(self.title)
        if self.description is not None:
            builder.description(self.description)
        if self.theme_color is not None:
            builder.theme_color(self.theme_color)
        if self.favicon is not None:
            builder.favicon(self.favicon)
        if self.manifest is not None:
            builder.manifest(self.manifest)
        for script in self.scripts:
            builder.add_script(script.src, script.loading)
        for style in self.styles:
            builder.add_style(style.src, style.loading)
        for font in self.fonts:
            builder.font(font)
        if self.body is not None:
            builder.raw_body(self.body)
        return builder

    def render(self) -> str:
        """Assemble the document described by this configuration."""
        return self.to_builder().finalize()
