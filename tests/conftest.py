# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Callable, Iterator, Optional, TypeAlias

import pytest

from pnch import configuration
from pnch.model.entry import Entry
from pnch.repository.configuration import CONFIGURATION_REPO
from pnch.repository.entry import ENTRY_REPO
from pnch.time import date_from_str, time_from_str
from pnch.view import state as view_state

EntryFactory: TypeAlias = Callable[..., Entry]


@pytest.fixture(autouse=True)
def isolated_paths(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    config_path = tmp_path / "config"
    data_path = tmp_path / "data"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.setattr(configuration, "DATA_ENTRIES_PATH", data_path / "entries.yaml")

    ENTRY_REPO.unload()
    CONFIGURATION_REPO.unload()
    view_state.set_print_color(True)

    yield tmp_path

    ENTRY_REPO.unload()
    CONFIGURATION_REPO.unload()


@pytest.fixture
def entries_path() -> Path:
    return configuration.DATA_ENTRIES_PATH


@pytest.fixture
def make_entry() -> EntryFactory:
    def factory(
        id: int,
        date: str,
        time_in: str,
        time_out: Optional[str] = None,
        tag: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Entry:
        return {
            "id": id,
            "date": date_from_str(date),
            "time_in": time_from_str(time_in),
            "time_out": time_from_str(time_out) if time_out is not None else None,
            "tag": tag,
            "description": description,
        }

    return factory

