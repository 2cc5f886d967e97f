"""Adapter from a builder to an HTTP response (requires the ``http`` extra)."""

from __future__ import annotations

from fastapi.responses import HTMLResponse

from html_index.builder import Builder


def into_response(builder: Builder) -> HTMLResponse:
    """Finalize *builder* and wrap the document in a 200 ``text/html`` response."""
    return HTMLResponse(content=builder.finalize(), status_code=200)
