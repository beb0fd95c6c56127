# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from pnch.model.entity_id import EntryId


class Entry(TypedDict):
    id: Optional[EntryId]
    date: pendulum.Date
    time_in: pendulum.Time
    time_out: Optional[pendulum.Time]  # None while the entry is open
    tag: Optional[str]
    description: Optional[str]
