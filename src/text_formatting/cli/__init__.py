from __future__ import annotations

import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from ..config import dump_config, load_config
from ..core import FormattingError, FormattingService
from ..tools import list_tools

console = Console()

app = typer.Typer(help="Plain text, slug and HTML-to-Markdown formatting tools")


def _read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _print_warnings(warnings: list[str]) -> None:
    for warning in warnings:
        console.print(f"[yellow]Warning[/yellow]: {warning}", highlight=False)


@app.command()
def html(
    source: str = typer.Argument(..., help="Text file to convert, or - for stdin"),
    config: Path | None = typer.Option(None, "--config", help="Path to config.toml"),
) -> None:
    """Convert plain text to HTML."""
    service = FormattingService(load_config(config))
    result = service.format_for_html(_read_source(source))
    typer.echo(result.text)


@app.command()
def slug(title: str) -> None:
    """Print the URL-friendly slug for TITLE."""
    typer.echo(FormattingService().slugify_title(title).text)


@app.command()
def markdown(
    source: str = typer.Argument(..., help="HTML file to convert, or - for stdin"),
    title: str = typer.Option(..., "--title", help="Title used to name the output file"),
    config: Path | None = typer.Option(None, "--config", help="Path to config.toml"),
) -> None:
    """Convert HTML to Markdown and save it as <slug>.md."""
    service = FormattingService(load_config(config))
    try:
        document = service.html_to_markdown(_read_source(source), title)
    except FormattingError as exc:
        console.print(f"[red]Conversion failed[/red]: {exc.code} - {exc}", highlight=False)
        raise typer.Exit(1) from exc
    console.print(f"[green]Success[/green]: wrote {document.path}", highlight=False)
    _print_warnings(document.warnings)


@app.command()
def tools() -> None:
    """List the available operations."""
    table = Table(title="Operations")
    table.add_column("Name")
    table.add_column("Arguments")
    table.add_column("Description")
    for descriptor in list_tools():
        arguments = ", ".join(descriptor.input_schema.get("properties", {}))
        table.add_row(descriptor.name, arguments, descriptor.description)
    console.print(table)


@app.command("config")
def show_config(
    config: Path | None = typer.Option(None, "--config", help="Path to config.toml"),
) -> None:
    """Print the effective configuration as JSON."""
    typer.echo(dump_config(load_config(config)))


@app.command()
def serve(
    config: Path | None = typer.Option(None, "--config", help="Path to config.toml"),
) -> None:
    """Serve the operations over HTTP."""
    import uvicorn

    from ..api import create_app

    cfg = load_config(config)
    try:
        api = create_app(config)
    except RuntimeError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from exc
    uvicorn.run(api, host=cfg.api.host, port=cfg.api.port)


if __name__ == "__main__":
    app()
