# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from pnch.logger import setup_logging
from pnch.terminal import configuration, entry
from pnch.terminal.custom_typer import AliasedTyperGroup
from pnch.view import state as view_state

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="pnch - Punch in and out of your work from the CLI",
    no_args_is_help=True,
)
app.command(name="in")(entry.punch_in)
app.command(name="out")(entry.punch_out)
app.command(name="edit, e")(entry.edit)
app.command(name="ls, l")(entry.ls)
app.command(name="config, c")(configuration.config)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log debug output to stderr",
        ),
    ] = False,
    no_color: Annotated[
        bool,
        typer.Option(
            "--no-color",
            "-nc",
            help="Print without colors, overriding the print-color setting",
        ),
    ] = False,
) -> None:
    """
    pnch - Punch in and out of your work from the CLI

    Global options that apply to all commands.
    """
    setup_logging(verbose)
    if no_color:
        view_state.set_print_color(False)


def run() -> None:
    app()
