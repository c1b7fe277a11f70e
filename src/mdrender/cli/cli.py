"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdrender.cli.commands import convert_cmd, render_cmd


app = typer.Typer(name="mdrender", no_args_is_help=True, help="Markdown to HTML fragment renderer")

app.command(name="render")(render_cmd)
app.command(name="convert")(convert_cmd)
