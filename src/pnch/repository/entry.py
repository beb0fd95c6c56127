# SPDX-License-Identifier: MIT

import datetime
import logging
import os
import tempfile
from copy import deepcopy
from typing import Any, Optional, cast

import pendulum
from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from pnch import configuration, time
from pnch.error import EntryNotFoundError, PnchError, StoreIOError
from pnch.model.entity_id import FIRST_ENTRY_ID, EntryId
from pnch.model.entry import Entry

logger = logging.getLogger(__name__)


class EntryRepository:
    """
    Owns every entry, persisted as a single YAML document.

    The whole collection is loaded on first access and rewritten on flush by
    writing a temporary file next to the store and renaming it over the old
    one, so a crash leaves either the previous or the new document on disk.
    """

    def __init__(self) -> None:
        self._entries: Optional[list[Entry]] = None
        self._next_id: EntryId = FIRST_ENTRY_ID
        self._persisted_entries: list[Entry] = []
        self._persisted_next_id: EntryId = FIRST_ENTRY_ID
        self.is_dirty = False

    @property
    def entries(self) -> list[Entry]:
        if self._entries is None:
            self.__load_data()
        if self._entries is None:
            raise ValueError()
        return self._entries

    def __load_data(self) -> None:
        path = configuration.DATA_ENTRIES_PATH
        self._entries = []
        self._next_id = FIRST_ENTRY_ID

        if not path.is_file():
            logger.debug("no entries file at %s, starting empty", path)
            self.__remember_persisted()
            return

        try:
            raw_document = load(path.read_text(encoding="utf-8"), Loader=Loader)
        except (OSError, YAMLError, ValueError) as e:
            self._entries = None
            raise StoreIOError("load", "pnchs", str(e)) from e

        if raw_document is None:
            self.__remember_persisted()
            return

        try:
            raw_entries = raw_document.get("entries") or []
            entries = [
                self.__convert_entry_for_deserialization(raw_entry)
                for raw_entry in raw_entries
            ]
            stored_next_id = int(raw_document.get("next_id") or FIRST_ENTRY_ID)
        except (AttributeError, KeyError, TypeError, ValueError, PnchError) as e:
            self._entries = None
            raise StoreIOError("load", "pnchs", f"malformed entry: {e}") from e

        entries.sort(key=lambda entry: cast(EntryId, entry["id"]))
        ids = [cast(EntryId, entry["id"]) for entry in entries]
        if len(ids) != len(set(ids)):
            self._entries = None
            raise StoreIOError("load", "pnchs", "duplicate entry ids")

        open_ids = [entry["id"] for entry in entries if entry["time_out"] is None]
        if len(open_ids) > 1:
            logger.warning("found %d open entries: %s", len(open_ids), open_ids)

        highest_id = max(ids, default=FIRST_ENTRY_ID - 1)
        self._next_id = max(stored_next_id, highest_id + 1)
        self._entries = entries
        self.__remember_persisted()
        logger.debug(
            "loaded %d entries from %s (next id %d)", len(entries), path, self._next_id
        )

    def __save_data(self) -> None:
        path = configuration.DATA_ENTRIES_PATH
        document: dict[str, Any] = {
            "next_id": self._next_id,
            "entries": [
                self.__convert_entry_for_serialization(deepcopy(entry))
                for entry in self.entries
            ],
        }
        content = dump(document, Dumper=Dumper, sort_keys=False, allow_unicode=True)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            file_descriptor, temporary_name = tempfile.mkstemp(
                prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
            )
        except OSError as e:
            raise StoreIOError("save", "pnchs", str(e)) from e

        try:
            with os.fdopen(file_descriptor, "w", encoding="utf-8") as temporary_file:
                temporary_file.write(content)
                temporary_file.flush()
                os.fsync(temporary_file.fileno())
            os.replace(temporary_name, path)
        except OSError as e:
            if os.path.exists(temporary_name):
                os.unlink(temporary_name)
            raise StoreIOError("save", "pnchs", str(e)) from e

        logger.debug("saved %d entries to %s", len(self.entries), path)

    def __remember_persisted(self) -> None:
        self._persisted_entries = deepcopy(self.entries)
        self._persisted_next_id = self._next_id

    def __rollback(self) -> None:
        logger.debug("rolling back unsaved entry changes")
        self._entries = deepcopy(self._persisted_entries)
        self._next_id = self._persisted_next_id
        self.is_dirty = False

    def flush(self) -> bool:
        """
        Write the collection if it changed.

        Raises:
            StoreIOError: if the file could not be replaced. The in-memory
                collection is rolled back to what is on disk.
        """
        if self._entries is not None and self.is_dirty:
            try:
                self.__save_data()
            except StoreIOError:
                logger.error("could not save entries to %s", configuration.DATA_ENTRIES_PATH)
                self.__rollback()
                raise
            self.is_dirty = False
            self.__remember_persisted()
            return True
        return False

    def unload(self) -> None:
        """Drop cached state; the next access reads the file again."""
        self._entries = None
        self._next_id = FIRST_ENTRY_ID
        self._persisted_entries = []
        self._persisted_next_id = FIRST_ENTRY_ID
        self.is_dirty = False

    def __convert_entry_for_serialization(self, entry: Entry) -> dict[str, Any]:
        serializable_entry = cast(dict[str, Any], entry)
        serializable_entry["date"] = time.date_to_str(serializable_entry["date"])
        serializable_entry["time_in"] = time.time_to_str(serializable_entry["time_in"])
        serializable_entry["time_out"] = time.time_to_str_optional(
            serializable_entry["time_out"]
        )
        return serializable_entry

    def __convert_entry_for_deserialization(self, entry: dict[str, Any]) -> Entry:
        return {
            "id": int(entry["id"]),
            "date": self.__date_from_yaml(entry["date"]),
            "time_in": self.__time_from_yaml(entry["time_in"]),
            "time_out": (
                self.__time_from_yaml(entry["time_out"])
                if entry.get("time_out") is not None
                else None
            ),
            "tag": entry.get("tag"),
            "description": entry.get("description"),
        }

    def __date_from_yaml(self, value: Any) -> pendulum.Date:
        # Hand edited files may hold an unquoted date, which YAML reads as a date
        if isinstance(value, datetime.date):
            return pendulum.date(value.year, value.month, value.day)
        return time.date_from_str(str(value))

    def __time_from_yaml(self, value: Any) -> pendulum.Time:
        # YAML 1.1 reads an unquoted 9:41 as the base 60 integer 581
        if isinstance(value, int):
            hour, minute = divmod(value, 60)
            return time.time_from_str(f"{hour}:{minute:02d}")
        return time.time_from_str(str(value))

    def save_new_entry(self, entry: Entry) -> EntryId:
        entries = self.entries
        self.is_dirty = True

        entry["id"] = self._next_id
        self._next_id += 1

        entries.append(entry)
        logger.debug("assigned id %d to new entry", entry["id"])

        return entry["id"]

    def modify_entry(
        self,
        id: EntryId,
        time_in: Optional[pendulum.Time],
        time_out: Optional[pendulum.Time],
        tag: Optional[str],
        description: Optional[str],
    ) -> None:
        entry = self.__find(id)
        self.is_dirty = True

        if time_in is not None:
            entry["time_in"] = time_in
        if time_out is not None:
            entry["time_out"] = time_out
        if tag is not None:
            entry["tag"] = tag
        if description is not None:
            entry["description"] = description

    def __find(self, id: EntryId) -> Entry:
        for entry in self.entries:
            if entry["id"] == id:
                return entry
        raise EntryNotFoundError(id)

    def get_all_entries(self) -> list[Entry]:
        return deepcopy(self.entries)

    def get_entry(self, id: EntryId) -> Entry:
        return deepcopy(self.__find(id))

    def get_open_entries(self) -> list[Entry]:
        return [
            entry for entry in deepcopy(self.entries) if entry["time_out"] is None
        ]

    def get_next_id(self) -> EntryId:
        # Touch the collection so the stored counter is loaded
        self.entries
        return self._next_id


ENTRY_REPO = EntryRepository()
