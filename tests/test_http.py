"""Tests for the HTTP response adapter."""

from __future__ import annotations

import pytest

from fastapi import FastAPI
from fastapi.testclient import TestClient

from html_index.builder import Builder
from html_index.errors import BuilderFinalizedError
from html_index.http import into_response


def _page() -> Builder:
    return Builder().title("Hi").raw_body("<body>hello world</body>")


class TestIntoResponse:
    def test_status_and_content_type(self):
        response = into_response(_page())
        assert response.status_code == 200
        assert response.media_type == "text/html"

    def test_body_is_document(self):
        expected = _page().finalize()
        response = into_response(_page())
        assert response.body.decode("utf-8") == expected

    def test_consumes_builder(self):
        builder = _page()
        into_response(builder)
        with pytest.raises(BuilderFinalizedError):
            builder.finalize()

    def test_served_by_fastapi(self):
        app = FastAPI()

        @app.get("/")
        def index():
            return into_response(_page())

        client = TestClient(app)
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")
        assert resp.text.startswith("<!DOCTYPE html>")
        assert resp.text.endswith("<body>hello world</body></html>")
