"""Qwsite CLI Entry Point

Usage:
    qwsite render index.html                 # Render to stdout
    qwsite render index.html -o out.html     # Render to file
    qwsite render about.html --lang de       # Render with a locale
    qwsite render index.html --no-layout     # Skip the layout
    qwsite resolve index.html --engine jinja # Print the template path
    qwsite --version                         # Show version
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Optional

import typer

from qwsite._version import __version__
from qwsite.app import Application
from qwsite.config import find_config_file
from qwsite.errors import exit_with_error, handle_error
from qwsite.logs import setup_logging

log = logging.getLogger(__name__)

typer_app = typer.Typer(help="Resolve and render site templates.")


def _load_app(config: Optional[Path]) -> Application:
    """Application from --config, the nearest qwsite.yaml, or defaults."""
    config_path = config or find_config_file() or Path.cwd() / "qwsite.yaml"
    if config is not None and not config.exists():
        exit_with_error(f"File not found: {config}")
    return Application.from_config_file(config_path)


def parse_locals(pairs: Optional[List[str]]) -> dict[str, str]:
    """Parse KEY=VALUE pairs into a dict."""
    result: dict[str, str] = {}
    for pair in pairs or []:
        if "=" not in pair:
            raise typer.BadParameter(f"Expected KEY=VALUE, got: {pair}")
        key, value = pair.split("=", 1)
        result[key.strip()] = value
    return result


@typer_app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "-V", "--version", help="Show version and exit."
    ),
) -> None:
    if version:
        typer.echo(f"qwsite {__version__}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


@typer_app.command()
def render(
    path: str = typer.Argument(..., help="Logical output path, e.g. index.html"),
    config: Optional[Path] = typer.Option(
        None, "-c", "--config", help="Path to qwsite.yaml."
    ),
    lang: Optional[str] = typer.Option(None, "--lang", help="Locale to render in."),
    layout: Optional[str] = typer.Option(None, "--layout", help="Layout name."),
    no_layout: bool = typer.Option(False, "--no-layout", help="Render without layout."),
    local: Optional[List[str]] = typer.Option(
        None, "-l", "--local", help="Template variable as KEY=VALUE (repeatable)."
    ),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output", help="Write output to file instead of stdout."
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging."),
) -> None:
    """Render a page through its engines and layout."""
    setup_logging(verbose)
    variables = parse_locals(local)

    options: dict[str, Any] = {}
    if lang:
        options["lang"] = lang
    if no_layout:
        options["layout"] = False
    elif layout:
        options["layout"] = layout

    try:
        site = _load_app(config)
        content = site.render(path, variables, options)
    except Exception as exc:
        handle_error(exc)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(content, encoding="utf-8")
        log.info(f"Wrote {path} to {output}")
    else:
        typer.echo(content, nl=False)


@typer_app.command()
def resolve(
    path: str = typer.Argument(..., help="Logical path to resolve."),
    config: Optional[Path] = typer.Option(
        None, "-c", "--config", help="Path to qwsite.yaml."
    ),
    engine: Optional[str] = typer.Option(
        None, "-e", "--engine", help="Engine (or extension) to try first."
    ),
    static: bool = typer.Option(
        False, "--static", help="Also accept files without an engine extension."
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging."),
) -> None:
    """Print the template file a logical path resolves to."""
    setup_logging(verbose)

    options: dict[str, Any] = {}
    if engine:
        options["preferred_engine"] = engine
    if static:
        options["try_static"] = True

    site = _load_app(config)
    found = site.resolve(path, options)
    if found is None:
        exit_with_error(f"No template found for {path}")
    typer.echo(found)


def app(argv: Optional[List[str]] = None) -> None:
    """Entry point for the installed `qwsite` script."""
    typer_app(args=argv)


if __name__ == "__main__":
    app()
