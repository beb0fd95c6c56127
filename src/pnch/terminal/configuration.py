# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.table import Table

from pnch import configuration
from pnch.error import InvalidConfigKeyError
from pnch.repository.configuration import CONFIG_KEYS, CONFIGURATION_REPO
from pnch.terminal.error import report_errors
from pnch.view.state import get_console


def config(
    key: Annotated[
        Optional[str], typer.Argument(help=f"one of {', '.join(CONFIG_KEYS)}")
    ] = None,
    value: Annotated[Optional[str], typer.Argument(help="new value for the key")] = None,
) -> None:
    """
    display the settings, or set one with KEY VALUE
    """
    with report_errors():
        if key is not None and key not in CONFIG_KEYS:
            raise InvalidConfigKeyError(key, CONFIG_KEYS)
        if key is not None and value is not None:
            CONFIGURATION_REPO.try_set(key, value)
            CONFIGURATION_REPO.flush()
        settings = __settings()

    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")
    for setting_key, setting_value in settings.items():
        if key is None or setting_key == key:
            table.add_row(setting_key, setting_value)

    get_console().print(table)


def __settings() -> dict[str, str]:
    config = CONFIGURATION_REPO.get_config()
    data_path = (
        config["data_path"]
        if config["data_path"] is not None
        else str(configuration.DATA_PATH)
    )
    return {
        "ls-default-period": config["ls_default_period"],
        "print-color": "✓ Enabled" if config["print_color"] else "✗ Disabled",
        "data-path": data_path,
    }
