"""CLI command implementations"""

import sys
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdrender.config import Settings, load_config
from mdrender.core.pipeline import render, run_render
from mdrender.core.utils.log import configure_logging


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None, verbose: bool = False) -> Settings:
    """Load config with standard CLI error handling and set up logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    configure_logging("DEBUG" if verbose else settings.log_level)
    return settings


def render_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file or directory to render")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    ext: Annotated[Optional[str], typer.Option("--ext", help="Output extension: html or htm")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log every stage")] = False,
    ):
    """Render markdown file(s) to HTML fragments."""
    settings = _settings(overrides={"output_dir": out, "output_ext": ext}, verbose=verbose)
    output_dir = Path(settings.output_dir)
    try:
        results = run_render(path, output_dir, settings.render_options(), settings.output_ext)
    except RuntimeError as e:
        _fail(str(e))
    if not results:
        typer.echo(f"No markdown files found at: {path}")
        raise typer.Exit(1)
    for src, out_file in results:
        typer.echo(f"  {src} -> {out_file}")
    typer.echo(f"Rendered {len(results)} document(s) to {output_dir}/")


def convert_cmd(
    text: Annotated[Optional[str], typer.Argument(help="Markdown text; read from stdin when omitted")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log every stage")] = False,
    ):
    """Print the HTML fragment for TEXT (or stdin)."""
    settings = _settings(verbose=verbose)
    source = text if text is not None else sys.stdin.read()
    typer.echo(render(source, settings.render_options()))
