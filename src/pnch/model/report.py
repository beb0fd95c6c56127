# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from pnch.model.entry import Entry


class DateGroup(TypedDict):
    date: pendulum.Date
    entries: list[Entry]
    total: pendulum.Duration


class Report(TypedDict):
    total: pendulum.Duration
    groups: list[DateGroup]
