"""Tests for the html-index command line."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from html_index.cli import app
from html_index.config.loader import clear_cache
from html_index.templates import ASYNC_STYLE_POLYFILL

runner = CliRunner()


@pytest.fixture(autouse=True)
def _fresh_cache():
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def page_file(tmp_path: Path) -> Path:
    path = tmp_path / "page.json"
    path.write_text(
        json.dumps({"title": "From file", "scripts": [{"src": "/file.js"}]}),
        encoding="utf-8",
    )
    return path


# ---------------------------------------------------------------------------
# html-index build
# ---------------------------------------------------------------------------


class TestBuild:
    def test_empty_document(self):
        result = runner.invoke(app, ["build"])
        assert result.exit_code == 0
        assert result.stdout == (
            "<!DOCTYPE html>"
            '<html lang="en-US">'
            "<head>"
            '<meta charset="utf-8">'
            '<meta name="viewport" content="width=device-width, initial-scale=1.0">'
            "</head></html>"
        )

    def test_options(self):
        result = runner.invoke(
            app,
            [
                "build",
                "--title", "Hi",
                "--script", "/a.js",
                "--script", "/b.js",
                "--style", "/a.css",
                "--font", "/f.woff2",
                "--body", "<body>x</body>",
            ],
        )
        assert result.exit_code == 0
        html = result.stdout
        assert "<title>Hi</title>" in html
        assert html.index('src="/a.js"') < html.index('src="/b.js"')
        assert html.count(ASYNC_STYLE_POLYFILL) == 1
        assert html.endswith("</head><body>x</body></html>")

    def test_config_then_options(self, page_file):
        result = runner.invoke(
            app, ["build", "--config", str(page_file), "--title", "Override", "-s", "/cli.js"]
        )
        assert result.exit_code == 0
        html = result.stdout
        assert "<title>Override</title>" in html
        assert "From file" not in html
        assert html.index('src="/file.js"') < html.index('src="/cli.js"')

    def test_output_file(self, tmp_path):
        dest = tmp_path / "index.html"
        result = runner.invoke(app, ["build", "--title", "Saved", "--output", str(dest)])
        assert result.exit_code == 0
        assert "<title>Saved</title>" in dest.read_text(encoding="utf-8")

    def test_missing_config(self, tmp_path):
        result = runner.invoke(app, ["build", "--config", str(tmp_path / "nope.json")])
        assert result.exit_code == 1


# ---------------------------------------------------------------------------
# html-index config
# ---------------------------------------------------------------------------


class TestConfigCommands:
    def test_show_defaults(self):
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "en-US" in result.stdout

    def test_validate_ok(self, page_file):
        result = runner.invoke(app, ["config", "validate", str(page_file)])
        assert result.exit_code == 0
        assert "Valid configuration" in result.stdout

    def test_validate_bad(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"scripts": [{"loading": "defer"}]}), encoding="utf-8")
        result = runner.invoke(app, ["config", "validate", str(path)])
        assert result.exit_code == 1
        assert "Validation Failed" in result.stdout

    def test_validate_unreadable(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"title": "\xff"}')
        result = runner.invoke(app, ["config", "validate", str(path)])
        assert result.exit_code == 1
        assert "Validation Failed" in result.stdout

    def test_build_with_directory_config(self, tmp_path):
        result = runner.invoke(app, ["build", "--config", str(tmp_path)])
        assert result.exit_code == 1
        assert not isinstance(result.exception, OSError)
