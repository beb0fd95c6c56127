# SPDX-License-Identifier: MIT

import pendulum
import pytest

from pnch.error import IncompleteRangeError
from pnch.query.filter import build_filter_criteria, filter_entries, matches
from pnch.time import period_from_str

NOW = pendulum.datetime(2023, 8, 6, 12, 0, tz="local")
TWO_WEEKS = period_from_str("2 weeks")


@pytest.fixture
def entries(make_entry):
    return [
        make_entry(1, "2023-06-30", "09:00", "10:00", "old"),
        make_entry(5, "2023-08-04", "08:30", "09:41", "pnch", "Release"),
        make_entry(6, "2023-08-04", "10:00", "11:00", "pnch"),
        make_entry(7, "2023-08-04", "13:00", "14:15", "ISSUE-123"),
        make_entry(8, "2023-08-04", "15:00", "16:00"),
        make_entry(9, "2023-08-06", "08:00", "09:30", "PNCH"),
    ]


def ids(entries):
    return [entry["id"] for entry in entries]


def test_from_and_to_on_one_date_returns_that_date(entries):
    date = pendulum.date(2023, 8, 4)
    criteria = build_filter_criteria(from_date=date, to_date=date)

    assert ids(filter_entries(entries, criteria, NOW, TWO_WEEKS)) == [5, 6, 7, 8]


def test_last_week(entries):
    criteria = build_filter_criteria(last=period_from_str("1 week"))

    assert ids(filter_entries(entries, criteria, NOW, TWO_WEEKS)) == [5, 6, 7, 8, 9]


def test_default_period_applies_without_date_criteria(entries):
    criteria = build_filter_criteria()

    assert ids(filter_entries(entries, criteria, NOW, TWO_WEEKS)) == [5, 6, 7, 8, 9]
    assert ids(filter_entries(entries, criteria, NOW, period_from_str("1 day"))) == [9]


def test_date_criteria_are_combined(entries):
    criteria = build_filter_criteria(
        dates=[pendulum.date(2023, 6, 30)], since=pendulum.date(2023, 8, 5)
    )

    assert ids(filter_entries(entries, criteria, NOW, TWO_WEEKS)) == [1, 9]


def test_tag_narrows_the_date_criteria(entries):
    criteria = build_filter_criteria(tag="pnch")
    assert ids(filter_entries(entries, criteria, NOW, TWO_WEEKS)) == [5, 6]

    criteria = build_filter_criteria(tag="old")
    assert ids(filter_entries(entries, criteria, NOW, TWO_WEEKS)) == []

    criteria = build_filter_criteria(since=pendulum.date(2023, 1, 1), tag="old")
    assert ids(filter_entries(entries, criteria, NOW, TWO_WEEKS)) == [1]


def test_tag_match_is_case_sensitive(entries):
    criteria = build_filter_criteria(tag="PNCH")

    assert ids(filter_entries(entries, criteria, NOW, TWO_WEEKS)) == [9]


def test_entries_without_tag_never_match_a_tag(make_entry):
    entry = make_entry(1, "2023-08-06", "08:00")

    assert not matches(entry, build_filter_criteria(tag=""), NOW, TWO_WEEKS)
    assert matches(entry, build_filter_criteria(), NOW, TWO_WEEKS)


@pytest.mark.parametrize("side", ["from_date", "to_date"])
def test_incomplete_range_is_rejected(side):
    with pytest.raises(IncompleteRangeError):
        build_filter_criteria(**{side: pendulum.date(2023, 8, 4)})


def test_period_reaching_before_the_first_date_keeps_everything(entries):
    criteria = build_filter_criteria(last=period_from_str("3000 years"))

    assert ids(filter_entries(entries, criteria, NOW, TWO_WEEKS)) == [1, 5, 6, 7, 8, 9]

    default_period = period_from_str("3000 years")
    everything = filter_entries(entries, build_filter_criteria(), NOW, default_period)
    assert ids(everything) == [1, 5, 6, 7, 8, 9]
