# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
import typer

from pnch.error import FormatError
from pnch.model.period import Period
from pnch.time import date_from_str, period_from_str, time_from_str


def parse_time(time_param: Optional[str]) -> Optional[pendulum.Time]:
    """
    Parse a time of day in (H)H:mm format, e.g. "8:00" or "17:30".
    """
    if time_param is None:
        return None
    try:
        return time_from_str(str(time_param))
    except FormatError as e:
        raise typer.BadParameter(f"{e.message} {e.hint}") from e


def parse_date(date_param: Optional[str]) -> Optional[pendulum.Date]:
    if date_param is None:
        return None
    try:
        return date_from_str(str(date_param))
    except FormatError as e:
        raise typer.BadParameter(f"{e.message} {e.hint}") from e


def parse_period(period_param: Optional[str]) -> Optional[Period]:
    if period_param is None:
        return None
    try:
        return period_from_str(str(period_param))
    except FormatError as e:
        raise typer.BadParameter(f"{e.message} {e.hint}") from e
