# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from pnch.model.period import Period


class FilterCriteria(TypedDict):
    """
    Which entries a listing selects.

    The date based fields (dates, from_date/to_date, since, last) are a union:
    an entry matching any one of them is kept. When none of them is set, the
    configured default period is used instead. The tag narrows whatever the
    date fields selected.
    """

    dates: Optional[list[pendulum.Date]]
    from_date: Optional[pendulum.Date]
    to_date: Optional[pendulum.Date]
    since: Optional[pendulum.Date]
    last: Optional[Period]
    tag: Optional[str]
