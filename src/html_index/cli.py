"""CLI interface for html-index."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Callable, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax

from html_index.builder import Builder
from html_index.config import load_config
from html_index.errors import ConfigurationError

app = typer.Typer(
    name="html-index",
    help="📄 Assemble a complete HTML document from scripts, styles, fonts and metadata",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Sub-app for config commands
config_app = typer.Typer(
    name="config",
    help="⚙️  Inspect and validate page configuration files",
    rich_markup_mode="rich",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")

console = Console()
err_console = Console(stderr=True)

ConfigOption = Annotated[
    Optional[str], typer.Option("--config", "-c", help="Path to a JSON page configuration")
]


# ---------------------------------------------------------------------------
# html-index build
# ---------------------------------------------------------------------------


@app.command()
def build(
    config: ConfigOption = None,
    lang: Annotated[Optional[str], typer.Option("--lang", help="Root element language")] = None,
    title: Annotated[Optional[str], typer.Option("--title", "-t", help="Document title")] = None,
    description: Annotated[
        Optional[str], typer.Option("--description", help="Description meta tag")
    ] = None,
    theme_color: Annotated[
        Optional[str], typer.Option("--theme-color", help="Theme color meta tag")
    ] = None,
    favicon: Annotated[Optional[str], typer.Option("--favicon", help="Favicon path")] = None,
    manifest: Annotated[
        Optional[str], typer.Option("--manifest", help="Web app manifest path")
    ] = None,
    body: Annotated[
        Optional[str], typer.Option("--body", help="Raw body fragment, including <body> tags")
    ] = None,
    script: Annotated[
        Optional[list[str]], typer.Option("--script", "-s", help="Deferred script")
    ] = None,
    blocking_script: Annotated[
        Optional[list[str]], typer.Option("--blocking-script", help="Render-blocking script")
    ] = None,
    inline_script: Annotated[
        Optional[list[str]], typer.Option("--inline-script", help="Inline script text")
    ] = None,
    lazy_script: Annotated[
        Optional[list[str]], typer.Option("--lazy-script", help="Prefetched script")
    ] = None,
    style: Annotated[
        Optional[list[str]], typer.Option("--style", help="Asynchronously loaded stylesheet")
    ] = None,
    blocking_style: Annotated[
        Optional[list[str]], typer.Option("--blocking-style", help="Render-blocking stylesheet")
    ] = None,
    inline_style: Annotated[
        Optional[list[str]], typer.Option("--inline-style", help="Inline CSS text")
    ] = None,
    font: Annotated[Optional[list[str]], typer.Option("--font", help="Preloaded font")] = None,
    output: Annotated[
        Optional[str], typer.Option("--output", "-o", help="Write the document to this file")
    ] = None,
) -> None:
    """Build an HTML document and print it (or write it with --output).

    Values are inserted verbatim, without escaping.
    """
    try:
        builder = load_config(Path(config)).to_builder() if config else Builder()
    except ConfigurationError as e:
        err_console.print(f"[bold red]❌ {escape(str(e))}[/]")
        raise typer.Exit(code=1)

    if lang is not None:
        builder.lang(lang)
    if title is not None:
        builder.title(title)
    if description is not None:
        builder.description(description)
    if theme_color is not None:
        builder.theme_color(theme_color)
    if favicon is not None:
        builder.favicon(favicon)
    if manifest is not None:
        builder.manifest(manifest)
    if body is not None:
        builder.raw_body(body)

    _apply_each(builder.script, script)
    _apply_each(builder.blocking_script, blocking_script)
    _apply_each(builder.inline_script, inline_script)
    _apply_each(builder.lazy_script, lazy_script)
    _apply_each(builder.style, style)
    _apply_each(builder.blocking_style, blocking_style)
    _apply_each(builder.inline_style, inline_style)
    _apply_each(builder.font, font)

    html = builder.finalize()

    if output:
        dest = Path(output)
        dest.write_text(html, encoding="utf-8")
        err_console.print(f"✅ Document written to: [bold green]{dest}[/]")
    else:
        typer.echo(html, nl=False)


# ---------------------------------------------------------------------------
# html-index config show / validate
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show(config: ConfigOption = None) -> None:
    """Show a page configuration (defaults when no file is given)."""
    try:
        cfg = load_config(Path(config) if config else None)
    except ConfigurationError as e:
        err_console.print(f"[bold red]❌ {escape(str(e))}[/]")
        raise typer.Exit(code=1)

    console.print(
        Panel(
            Syntax(cfg.model_dump_json(indent=2), "json", theme="monokai", line_numbers=True),
            title="⚙️  Page Configuration",
            border_style="blue",
        )
    )


@config_app.command("validate")
def config_validate(
    config_file: Annotated[str, typer.Argument(help="JSON page configuration to validate")],
) -> None:
    """Validate a JSON page configuration file."""
    try:
        cfg = load_config(Path(config_file))
    except ConfigurationError as e:
        console.print(
            Panel(
                f"[bold red]❌ Validation error:[/]\n\n{escape(str(e))}",
                title="❌ Validation Failed",
                border_style="red",
            )
        )
        raise typer.Exit(code=1)

    console.print(
        Panel(
            f"✅ Valid configuration\n\n"
            f"  Language: [cyan]{cfg.lang}[/]\n"
            f"  Scripts: [cyan]{len(cfg.scripts)}[/]\n"
            f"  Styles: [cyan]{len(cfg.styles)}[/]\n"
            f"  Fonts: [cyan]{len(cfg.fonts)}[/]",
            title="✅ Validation",
            border_style="green",
        )
    )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _apply_each(add: Callable[[str], Builder], values: Optional[list[str]]) -> None:
    for value in values or []:
        add(value)


if __name__ == "__main__":
    app()
