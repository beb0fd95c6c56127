# SPDX-License-Identifier: MIT

from typing import Optional

from rich.padding import Padding

from pnch.view.state import get_console


def header(sub_header: Optional[str] = None) -> None:
    """Print the application banner, optionally followed by a sub header.

    Args:
        sub_header: Optional sub-header text to display
    """
    console = get_console()
    console.print(Padding("[dark_orange]pnch[/dark_orange]", (1, 0, 0, 1)))
    if sub_header is not None:
        console.print(Padding(f"[sandy_brown]{sub_header}[/sandy_brown]", (0, 1)))
