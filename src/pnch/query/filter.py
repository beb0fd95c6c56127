# SPDX-License-Identifier: MIT

from abc import ABC, abstractmethod
from typing import Optional

import pendulum

from pnch.error import IncompleteRangeError
from pnch.model.entry import Entry
from pnch.model.filter import FilterCriteria
from pnch.model.period import Period
from pnch.template.filter import get_filter_criteria_template
from pnch.time import period_start


def build_filter_criteria(
    dates: Optional[list[pendulum.Date]] = None,
    from_date: Optional[pendulum.Date] = None,
    to_date: Optional[pendulum.Date] = None,
    since: Optional[pendulum.Date] = None,
    last: Optional[Period] = None,
    tag: Optional[str] = None,
) -> FilterCriteria:
    """
    Raises:
        IncompleteRangeError: if only one end of the from/to range is given
    """
    if (from_date is None) != (to_date is None):
        raise IncompleteRangeError()

    criteria = get_filter_criteria_template()
    criteria["dates"] = dates if dates else None
    criteria["from_date"] = from_date
    criteria["to_date"] = to_date
    criteria["since"] = since
    criteria["last"] = last
    criteria["tag"] = tag
    return criteria


def generate_filter(
    criteria: FilterCriteria, now: pendulum.DateTime, default_period: Period
) -> "Predicate":
    today = now.date()

    date_filter = Or()
    if criteria["dates"] is not None:
        date_filter.add_predicate(OnDates(criteria["dates"]))
    if criteria["from_date"] is not None and criteria["to_date"] is not None:
        date_filter.add_predicate(Between(criteria["from_date"], criteria["to_date"]))
    if criteria["since"] is not None:
        date_filter.add_predicate(Since(criteria["since"]))
    if criteria["last"] is not None:
        date_filter.add_predicate(Last(criteria["last"], today))

    if len(date_filter.predicates) == 0:
        date_filter.add_predicate(Last(default_period, today))

    if criteria["tag"] is None:
        return date_filter

    tag_filter = And()
    tag_filter.add_predicate(date_filter)
    tag_filter.add_predicate(Tag(criteria["tag"]))
    return tag_filter


def matches(
    entry: Entry,
    criteria: FilterCriteria,
    now: pendulum.DateTime,
    default_period: Period,
) -> bool:
    return generate_filter(criteria, now, default_period).include(entry)


def filter_entries(
    entries: list[Entry],
    criteria: FilterCriteria,
    now: pendulum.DateTime,
    default_period: Period,
) -> list[Entry]:
    return generate_filter(criteria, now, default_period).filter(entries)


class Predicate(ABC):
    @abstractmethod
    def include(self, entry: Entry) -> bool: ...

    def filter(self, entries: list[Entry]) -> list[Entry]:
        return [entry for entry in entries if self.include(entry)]


class And(Predicate):
    def __init__(self) -> None:
        self.predicates: list[Predicate] = []

    def add_predicate(self, predicate: Predicate) -> None:
        self.predicates.append(predicate)

    def include(self, entry: Entry) -> bool:
        return all(predicate.include(entry) for predicate in self.predicates)


class Or(Predicate):
    def __init__(self) -> None:
        self.predicates: list[Predicate] = []

    def add_predicate(self, predicate: Predicate) -> None:
        self.predicates.append(predicate)

    def include(self, entry: Entry) -> bool:
        return any(predicate.include(entry) for predicate in self.predicates)


class OnDates(Predicate):
    def __init__(self, dates: list[pendulum.Date]) -> None:
        self.dates = set(dates)

    def include(self, entry: Entry) -> bool:
        return entry["date"] in self.dates


class Between(Predicate):
    """Inclusive on both ends."""

    def __init__(self, from_date: pendulum.Date, to_date: pendulum.Date) -> None:
        self.from_date = from_date
        self.to_date = to_date

    def include(self, entry: Entry) -> bool:
        return self.from_date <= entry["date"] <= self.to_date


class Since(Predicate):
    def __init__(self, since: pendulum.Date) -> None:
        self.since = since

    def include(self, entry: Entry) -> bool:
        return entry["date"] >= self.since


class Last(Predicate):
    """The period counted back from today in calendar days, today included."""

    def __init__(self, period: Period, today: pendulum.Date) -> None:
        self.start = period_start(period, today)
        self.end = today

    def include(self, entry: Entry) -> bool:
        return self.start <= entry["date"] <= self.end


class Tag(Predicate):
    def __init__(self, tag: str) -> None:
        self.tag = tag

    def include(self, entry: Entry) -> bool:
        return entry["tag"] is not None and entry["tag"] == self.tag
