# SPDX-License-Identifier: MIT

from pnch.model.filter import FilterCriteria


def get_filter_criteria_template() -> FilterCriteria:
    return {
        "dates": None,
        "from_date": None,
        "to_date": None,
        "since": None,
        "last": None,
        "tag": None,
    }
