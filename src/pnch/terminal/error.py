# SPDX-License-Identifier: MIT

import logging
from contextlib import contextmanager
from typing import Iterator

import typer
from rich.markup import escape

from pnch.error import PnchError
from pnch.view.state import get_console

logger = logging.getLogger(__name__)


def print_error(error: PnchError) -> None:
    console = get_console(stderr=True)
    console.print(f"[bold red]{escape('[ERROR]')}[/bold red] {escape(error.message)}")
    if error.hint is not None:
        console.print(f"[yellow]{escape('[HINT]')}[/yellow] {escape(error.hint)}")


@contextmanager
def report_errors() -> Iterator[None]:
    """
    Turn a PnchError raised inside the block into a message on stderr and
    exit code 1.
    """
    try:
        yield
    except PnchError as e:
        logger.debug("command failed", exc_info=True)
        print_error(e)
        raise typer.Exit(1) from e
