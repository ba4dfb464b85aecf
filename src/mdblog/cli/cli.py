"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdblog.cli.commands import list_cmd, show_cmd


app = typer.Typer(name="mdblog", no_args_is_help=True, help="Browse the bundled markdown blog posts")

app.command(name="list")(list_cmd)
app.command(name="show")(show_cmd)
