# SPDX-License-Identifier: MIT

import logging
from typing import Optional, cast

import pendulum

from pnch.error import (
    AlreadyOpenError,
    CrossesMidnightError,
    InvalidTimeOrderError,
    NoOpenEntryError,
)
from pnch.model.entity_id import EntryId
from pnch.model.entry import Entry
from pnch.repository.entry import ENTRY_REPO
from pnch.template.entry import get_entry_template
from pnch.time import date_to_str, now_local, time_of_day, time_to_display_str

logger = logging.getLogger(__name__)


def all_entries() -> list[Entry]:
    """Snapshot of every entry, ordered by id."""
    return ENTRY_REPO.get_all_entries()


def open_entry() -> Optional[Entry]:
    """The entry without an out time, if there is one."""
    open_entries = ENTRY_REPO.get_open_entries()
    if len(open_entries) == 0:
        return None
    # A hand edited store may hold several; the newest one is the live one
    return open_entries[-1]


def punch_in(
    time_in: Optional[pendulum.Time] = None,
    tag: Optional[str] = None,
    description: Optional[str] = None,
    now: Optional[pendulum.DateTime] = None,
) -> EntryId:
    """
    Open a new entry dated today.

    Raises:
        AlreadyOpenError: if an entry is already open
        StoreIOError: if the store could not be written
    """
    moment = now if now is not None else now_local()

    current = open_entry()
    if current is not None:
        raise AlreadyOpenError(cast(EntryId, current["id"]))

    entry = get_entry_template(moment)
    if time_in is not None:
        entry["time_in"] = time_in
    entry["tag"] = tag
    entry["description"] = description

    id = ENTRY_REPO.save_new_entry(entry)
    ENTRY_REPO.flush()

    logger.info("pnched in: %d at %s", id, time_to_display_str(entry["time_in"]))
    return id


def punch_out(
    time_out: Optional[pendulum.Time] = None,
    tag: Optional[str] = None,
    description: Optional[str] = None,
    now: Optional[pendulum.DateTime] = None,
) -> EntryId:
    """
    Close the open entry.

    A tag or description given here replaces the one set when pnching in.
    Without an explicit time the entry is closed now, which is refused when
    now falls on a later date than the entry: entries never cross midnight.

    Raises:
        NoOpenEntryError: if no entry is open
        CrossesMidnightError: if closing now would cross midnight
        InvalidTimeOrderError: if the out time is before the in time
        StoreIOError: if the store could not be written
    """
    moment = now if now is not None else now_local()

    current = open_entry()
    if current is None:
        raise NoOpenEntryError()
    id = cast(EntryId, current["id"])

    if time_out is None:
        time_out = time_of_day(moment)
        if moment.date() > current["date"]:
            raise CrossesMidnightError(
                id,
                date_to_str(current["date"]),
                time_to_display_str(current["time_in"]),
                time_to_display_str(time_out),
            )

    if time_out < current["time_in"]:
        raise InvalidTimeOrderError(
            time_to_display_str(current["time_in"]), time_to_display_str(time_out)
        )

    ENTRY_REPO.modify_entry(id, None, time_out, tag, description)
    ENTRY_REPO.flush()

    logger.info("pnched out: %d at %s", id, time_to_display_str(time_out))
    return id


def edit_entry(
    id: EntryId,
    time_in: Optional[pendulum.Time] = None,
    time_out: Optional[pendulum.Time] = None,
    tag: Optional[str] = None,
    description: Optional[str] = None,
) -> Entry:
    """
    Change the supplied fields of an entry, open or closed.

    Raises:
        EntryNotFoundError: if no entry has this id
        InvalidTimeOrderError: if the resulting out time is before the in time
        StoreIOError: if the store could not be written
    """
    entry = ENTRY_REPO.get_entry(id)

    if time_in is None and time_out is None and tag is None and description is None:
        return entry

    new_time_in = time_in if time_in is not None else entry["time_in"]
    new_time_out = time_out if time_out is not None else entry["time_out"]
    if new_time_out is not None and new_time_out < new_time_in:
        raise InvalidTimeOrderError(
            time_to_display_str(new_time_in), time_to_display_str(new_time_out)
        )

    ENTRY_REPO.modify_entry(id, time_in, time_out, tag, description)
    ENTRY_REPO.flush()

    logger.info("edited entry %d", id)
    return ENTRY_REPO.get_entry(id)


def edit_open_entry(
    time_in: Optional[pendulum.Time] = None,
    time_out: Optional[pendulum.Time] = None,
    tag: Optional[str] = None,
    description: Optional[str] = None,
) -> Entry:
    """
    Same as edit_entry for the open entry.

    Raises:
        NoOpenEntryError: if no entry is open
    """
    current = open_entry()
    if current is None:
        raise NoOpenEntryError()
    return edit_entry(
        cast(EntryId, current["id"]), time_in, time_out, tag, description
    )
