# SPDX-License-Identifier: MIT

from itertools import groupby
from typing import Optional, cast

import pendulum

from pnch.model.entity_id import EntryId
from pnch.model.entry import Entry
from pnch.model.report import DateGroup, Report
from pnch.time import minutes_between, now_local, time_of_day

MINUTES_PER_DAY = 24 * 60


def elapsed(entry: Entry, now: Optional[pendulum.DateTime] = None) -> pendulum.Duration:
    """
    Time spent on an entry.

    A closed entry counts from its in time to its out time. An open entry
    counts up to now when now is on its date and up to midnight when now is
    later, since an entry never spans two dates.
    """
    if entry["time_out"] is not None:
        minutes = minutes_between(entry["time_in"], entry["time_out"])
    else:
        moment = now if now is not None else now_local()
        today = moment.date()
        if today == entry["date"]:
            minutes = minutes_between(entry["time_in"], time_of_day(moment))
        elif today > entry["date"]:
            minutes = MINUTES_PER_DAY - (
                entry["time_in"].hour * 60 + entry["time_in"].minute
            )
        else:
            minutes = 0

    return pendulum.duration(minutes=max(minutes, 0))


def total_elapsed(
    entries: list[Entry], now: Optional[pendulum.DateTime] = None
) -> pendulum.Duration:
    total = pendulum.duration()
    for entry in entries:
        total = total + elapsed(entry, now)
    return total


def summarize(entries: list[Entry], now: Optional[pendulum.DateTime] = None) -> Report:
    """
    Group entries by date and add up the time spent.

    Groups are ordered by date and entries inside a group by id. The input is
    left untouched.
    """
    moment = now if now is not None else now_local()

    ordered = sorted(
        entries, key=lambda entry: (entry["date"], cast(EntryId, entry["id"]))
    )

    groups: list[DateGroup] = []
    for date, date_entries in groupby(ordered, key=lambda entry: entry["date"]):
        group_entries = list(date_entries)
        groups.append(
            {
                "date": date,
                "entries": group_entries,
                "total": total_elapsed(group_entries, moment),
            }
        )

    return {
        "total": total_elapsed(ordered, moment),
        "groups": groups,
    }
