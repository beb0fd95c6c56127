# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from pnch.model.entry import Entry
from pnch.time import now_local, time_of_day


def get_entry_template(now: Optional[pendulum.DateTime] = None) -> Entry:
    moment = now if now is not None else now_local()
    return {
        "id": None,
        "date": moment.date(),
        "time_in": time_of_day(moment),
        "time_out": None,
        "tag": None,
        "description": None,
    }
