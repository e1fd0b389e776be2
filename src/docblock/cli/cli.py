"""CLI entrypoint: Typer app definition and command registration"""

import typer

from docblock.cli.commands import compile_cmd, show_cmd


app = typer.Typer(name="docblock", no_args_is_help=True, help="Compile documentation blocks into tags and HTML")

app.command(name="compile")(compile_cmd)
app.command(name="show")(show_cmd)
