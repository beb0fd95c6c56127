# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import TypedDict


class PeriodUnit(StrEnum):
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"


class Period(TypedDict):
    count: int
    unit: PeriodUnit
