# SPDX-License-Identifier: MIT

import pytest
from yaml import safe_load

from pnch import configuration
from pnch.error import InvalidConfigKeyError, InvalidConfigValueError, StoreIOError
from pnch.model.period import PeriodUnit
from pnch.repository.configuration import CONFIGURATION_REPO


def test_defaults_without_config_file():
    config = CONFIGURATION_REPO.get_config()

    assert config == configuration.get_default_configuration()
    assert CONFIGURATION_REPO.get_default_period() == {
        "count": 2,
        "unit": PeriodUnit.WEEKS,
    }


def test_missing_keys_keep_their_defaults():
    configuration.APP_CONFIG_PATH.parent.mkdir(parents=True)
    configuration.APP_CONFIG_PATH.write_text("print_color: false\n")

    config = CONFIGURATION_REPO.get_config()

    assert config["print_color"] is False
    assert config["ls_default_period"] == configuration.DEFAULT_LS_DEFAULT_PERIOD


def test_try_set_and_flush():
    CONFIGURATION_REPO.try_set("ls-default-period", "28 days")
    CONFIGURATION_REPO.try_set("print-color", "off")
    CONFIGURATION_REPO.flush()

    saved = safe_load(configuration.APP_CONFIG_PATH.read_text())
    assert saved["ls_default_period"] == "28 days"
    assert saved["print_color"] is False

    CONFIGURATION_REPO.unload()
    assert CONFIGURATION_REPO.get_default_period() == {
        "count": 28,
        "unit": PeriodUnit.DAYS,
    }


def test_data_path_can_be_set_and_removed(tmp_path):
    CONFIGURATION_REPO.try_set("data-path", str(tmp_path / "elsewhere"))
    assert CONFIGURATION_REPO.get_config()["data_path"] == str(tmp_path / "elsewhere")

    CONFIGURATION_REPO.try_set("data-path", "default")
    assert CONFIGURATION_REPO.get_config()["data_path"] is None


def test_data_path_redirects_the_entries_file(tmp_path):
    CONFIGURATION_REPO.try_set("data-path", str(tmp_path / "elsewhere"))
    CONFIGURATION_REPO.flush()

    configuration.load_data_path_configuration()

    assert configuration.DATA_ENTRIES_PATH == tmp_path / "elsewhere" / "entries.yaml"


@pytest.mark.parametrize(
    "key, value",
    [
        ("ls-default-period", "fortnight"),
        ("print-color", "maybe"),
    ],
)
def test_try_set_rejects_bad_values(key, value):
    with pytest.raises(InvalidConfigValueError):
        CONFIGURATION_REPO.try_set(key, value)


def test_try_set_rejects_unknown_keys():
    with pytest.raises(InvalidConfigKeyError):
        CONFIGURATION_REPO.try_set("colour", "true")


def test_bad_default_period_in_file_is_reported():
    configuration.APP_CONFIG_PATH.parent.mkdir(parents=True)
    configuration.APP_CONFIG_PATH.write_text("ls_default_period: forever\n")

    with pytest.raises(InvalidConfigValueError):
        CONFIGURATION_REPO.get_default_period()


def test_unreadable_config_is_reported():
    configuration.APP_CONFIG_PATH.parent.mkdir(parents=True)
    configuration.APP_CONFIG_PATH.write_text("- just\n- a list\n")

    with pytest.raises(StoreIOError):
        CONFIGURATION_REPO.get_config()
