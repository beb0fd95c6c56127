"""Rendering state shared by the views for the duration of one invocation."""

# SPDX-License-Identifier: MIT

from contextvars import ContextVar

from rich.console import Console

# Context variable for controlling colored output
# Default is True (print with color)
_print_color_var: ContextVar[bool] = ContextVar("print_color", default=True)


def set_print_color(value: bool) -> None:
    """Set whether views should print with color.

    Args:
        value: True to print with color, False for plain output
    """
    _print_color_var.set(value)


def get_print_color() -> bool:
    return _print_color_var.get()


def get_console(stderr: bool = False) -> Console:
    """A console honoring the color setting, bound to the current streams."""
    return Console(
        stderr=stderr,
        no_color=not get_print_color(),
        highlight=get_print_color(),
    )
