# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from pathlib import Path
from typing import Optional

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from pnch import configuration
from pnch.error import (
    InvalidConfigKeyError,
    InvalidConfigValueError,
    InvalidPeriodFormatError,
    StoreIOError,
)
from pnch.model.period import Period
from pnch.time import PERIOD_FORMAT_HINT, period_from_str, period_to_str

logger = logging.getLogger(__name__)

CONFIG_KEYS = ["ls-default-period", "print-color", "data-path"]

_TRUE_VALUES = ("true", "yes", "on", "1")
_FALSE_VALUES = ("false", "no", "off", "0")


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        path = configuration.APP_CONFIG_PATH
        if not path.is_file():
            logger.debug("no config file at %s, using defaults", path)
            self._config = configuration.get_default_configuration()
            return

        try:
            loaded = load(path.read_text(), Loader=Loader)
        except (OSError, YAMLError) as e:
            raise StoreIOError("load", "config", str(e)) from e

        if loaded is not None and not isinstance(loaded, dict):
            raise StoreIOError("load", "config", "expected a mapping of settings")

        self._config = configuration.get_default_configuration()
        if loaded is not None:
            # Missing keys keep their defaults
            self._config.update(loaded)

    def __save_data(self, config: configuration.Configuration) -> None:
        path = configuration.APP_CONFIG_PATH
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(dump(dict(config), Dumper=Dumper))
        except OSError as e:
            raise StoreIOError("save", "config", str(e)) from e
        logger.debug("saved config to %s", path)

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def unload(self) -> None:
        """Forget the cached config so the next access reads the file again."""
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def get_default_period(self) -> Period:
        try:
            return period_from_str(self.config["ls_default_period"])
        except InvalidPeriodFormatError as e:
            raise InvalidConfigValueError(
                "ls-default-period", self.config["ls_default_period"], PERIOD_FORMAT_HINT
            ) from e

    def update_config(
        self,
        ls_default_period: Optional[Period] = None,
        print_color: Optional[bool] = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
    ) -> None:
        self.is_dirty = True

        if ls_default_period is not None:
            self.config["ls_default_period"] = period_to_str(ls_default_period)
        if print_color is not None:
            self.config["print_color"] = print_color
        if data_path is not None:
            self.config["data_path"] = str(Path(data_path).expanduser())
        if remove_data_path:
            self.config["data_path"] = None

    def try_set(self, key: str, value: str) -> None:
        """
        Set one configuration value from its user facing key and string value.

        Raises:
            InvalidConfigKeyError: if the key is unknown
            InvalidConfigValueError: if the value cannot be parsed for that key
        """
        match key:
            case "ls-default-period":
                try:
                    period = period_from_str(value)
                except InvalidPeriodFormatError as e:
                    raise InvalidConfigValueError(
                        key, value, PERIOD_FORMAT_HINT
                    ) from e
                self.update_config(ls_default_period=period)
            case "print-color":
                lowered = value.strip().lower()
                if lowered in _TRUE_VALUES:
                    self.update_config(print_color=True)
                elif lowered in _FALSE_VALUES:
                    self.update_config(print_color=False)
                else:
                    raise InvalidConfigValueError(
                        key, value, "one of `true` or `false`"
                    )
            case "data-path":
                if value.strip() in ("", "none", "default"):
                    self.update_config(remove_data_path=True)
                else:
                    self.update_config(data_path=value.strip())
            case _:
                raise InvalidConfigKeyError(key, CONFIG_KEYS)


CONFIGURATION_REPO = ConfigurationRepository()
