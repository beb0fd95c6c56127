# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

from pnch.error import StoreIOError

APP_NAME = "pnch"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_ENTRIES_PATH: Path = DATA_PATH / "entries.yaml"

DEFAULT_LS_DEFAULT_PERIOD = "2 weeks"
DEFAULT_PRINT_COLOR = True


class Configuration(TypedDict):
    ls_default_period: str
    print_color: bool
    data_path: Optional[str]


def get_default_configuration() -> Configuration:
    return {
        "ls_default_period": DEFAULT_LS_DEFAULT_PERIOD,
        "print_color": DEFAULT_PRINT_COLOR,
        "data_path": None,
    }


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called before the entry repository first loads its data.
    """
    global DATA_PATH, DATA_ENTRIES_PATH

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    try:
        config: Optional[Configuration] = load(
            APP_CONFIG_PATH.read_text(), Loader=Loader
        )
    except (OSError, YAMLError) as e:
        raise StoreIOError("load", "config", str(e)) from e
    if config is None:
        return
    data_path_setting = config.get("data_path")

    if data_path_setting is not None:
        DATA_PATH = Path(data_path_setting).expanduser()
        DATA_ENTRIES_PATH = DATA_PATH / "entries.yaml"
