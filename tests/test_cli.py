# SPDX-License-Identifier: MIT

import pendulum
from typer.testing import CliRunner

from pnch.repository.configuration import CONFIGURATION_REPO
from pnch.repository.entry import ENTRY_REPO
from pnch.terminal.app import app

runner = CliRunner()


def today() -> str:
    return pendulum.today("local").format("YYYY-MM-DD")


def test_in_and_out():
    result = runner.invoke(app, ["in", "--time", "8:30"])
    assert result.exit_code == 0, result.output

    result = runner.invoke(app, ["out", "pnch/Release", "--time", "9:41"])
    assert result.exit_code == 0, result.output
    assert "1h11m" in result.output

    ENTRY_REPO.unload()
    entries = ENTRY_REPO.get_all_entries()
    assert len(entries) == 1
    assert entries[0]["tag"] == "pnch"
    assert entries[0]["description"] == "Release"
    assert entries[0]["time_out"] == pendulum.time(9, 41)


def test_second_in_fails_with_a_hint():
    runner.invoke(app, ["in", "--time", "8:30"])

    result = runner.invoke(app, ["in", "--time", "9:00"])

    assert result.exit_code == 1
    assert "already open" in result.output
    assert len(ENTRY_REPO.get_open_entries()) == 1


def test_out_without_open_entry_fails():
    result = runner.invoke(app, ["out"])

    assert result.exit_code == 1
    assert ENTRY_REPO.get_all_entries() == []


def test_bad_time_is_a_usage_error():
    result = runner.invoke(app, ["in", "--time", "25:00"])

    assert result.exit_code == 2
    assert ENTRY_REPO.get_all_entries() == []


def test_edit_by_id_and_alias(entries_path):
    runner.invoke(app, ["in", "--time", "8:30"])
    runner.invoke(app, ["out", "--time", "9:41"])

    result = runner.invoke(app, ["e", "pnch/Release", "--id", "1", "--in", "8:00"])
    assert result.exit_code == 0, result.output

    before = entries_path.read_bytes()
    result = runner.invoke(app, ["edit", "--id", "42", "--in", "8:00"])
    assert result.exit_code == 1
    assert entries_path.read_bytes() == before

    entry = ENTRY_REPO.get_entry(1)
    assert entry["time_in"] == pendulum.time(8, 0)
    assert entry["tag"] == "pnch"


def test_ls_formats():
    runner.invoke(app, ["in", "pnch/Release", "--time", "8:30"])
    runner.invoke(app, ["out", "--time", "9:41"])

    result = runner.invoke(app, ["ls", "--format", "csv"])
    assert result.exit_code == 0, result.output
    assert result.output == f"pnch,Release,{today()},8:30,9:41\n"

    result = runner.invoke(app, ["l", "--format", "list", "--date", "today"])
    assert result.exit_code == 0, result.output
    assert "#1 > From 8:30 to 9:41 (1h11m)" in result.output
    assert "pnch Release" in result.output

    result = runner.invoke(app, ["--no-color", "ls", "--tag", "pnch"])
    assert result.exit_code == 0, result.output
    assert "Release" in result.output


def test_ls_without_matches():
    result = runner.invoke(app, ["ls", "--last", "1 week"])

    assert result.exit_code == 0, result.output
    assert "No pnchs found." in result.output


def test_ls_with_incomplete_range_fails():
    result = runner.invoke(app, ["ls", "--from", "2023-08-04"])

    assert result.exit_code == 1


def test_ls_with_bad_period_is_a_usage_error():
    result = runner.invoke(app, ["ls", "--last", "a while"])

    assert result.exit_code == 2


def test_config():
    result = runner.invoke(app, ["config", "ls-default-period", "3 days"])
    assert result.exit_code == 0, result.output

    CONFIGURATION_REPO.unload()
    assert CONFIGURATION_REPO.get_config()["ls_default_period"] == "3 days"

    result = runner.invoke(app, ["c"])
    assert result.exit_code == 0, result.output
    assert "3 days" in result.output

    result = runner.invoke(app, ["config", "print-color", "maybe"])
    assert result.exit_code == 1

    result = runner.invoke(app, ["config", "colour"])
    assert result.exit_code == 1


def test_ls_with_a_very_long_default_period():
    runner.invoke(app, ["in", "--time", "8:30"])
    result = runner.invoke(app, ["config", "ls-default-period", "3000 years"])
    assert result.exit_code == 0, result.output

    result = runner.invoke(app, ["ls", "--format", "csv"])

    assert result.exit_code == 0, result.output
    assert result.output == f",,{today()},8:30,\n"
