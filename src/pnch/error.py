# SPDX-License-Identifier: MIT

from typing import Optional


class PnchError(Exception):
    """Base class for every failure pnch reports to the user."""

    def __init__(self, message: str, hint: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class AlreadyOpenError(PnchError):
    def __init__(self, entry_id: int) -> None:
        super().__init__(
            f"A pnch is already open (id {entry_id}).",
            "Before pnching in, close the pnch with `pnch out`.",
        )
        self.entry_id = entry_id


class NoOpenEntryError(PnchError):
    def __init__(self) -> None:
        super().__init__(
            "No pnch seems to be opened.",
            'To open a new pnch, use `pnch in "my tag/my description"`.',
        )


class EntryNotFoundError(PnchError):
    def __init__(self, entry_id: int) -> None:
        super().__init__(
            f"No pnch exists with the id {entry_id}.",
            "The id of an entry can be found when listing entries with `pnch ls`.",
        )
        self.entry_id = entry_id


class InvalidTimeOrderError(PnchError):
    def __init__(
        self,
        time_in: str,
        time_out: str,
        message: Optional[str] = None,
        hint: Optional[str] = None,
    ) -> None:
        if message is None:
            message = f"The `out` time cannot be before the `in` time. (in: {time_in}, out: {time_out})"
        super().__init__(message, hint)
        self.time_in = time_in
        self.time_out = time_out


class CrossesMidnightError(InvalidTimeOrderError):
    def __init__(self, entry_id: int, date: str, time_in: str, time_out: str) -> None:
        super().__init__(
            time_in,
            time_out,
            f"A pnch cannot cross midnight. (date: {date}, in: {time_in}, out: {time_out})",
            f"Close it on its own date with `pnch edit --id {entry_id} --out hh:mm`.",
        )
        self.entry_id = entry_id


class FormatError(PnchError):
    typ = "value"

    def __init__(self, found: str, format_hint: str) -> None:
        super().__init__(
            f"The {self.typ} was specified with the wrong format. The given value was `{found}`.",
            f"The format should be {format_hint}.",
        )
        self.found = found


class InvalidTimeFormatError(FormatError):
    typ = "time"


class InvalidDateFormatError(FormatError):
    typ = "date"


class InvalidPeriodFormatError(FormatError):
    typ = "period"


class IncompleteRangeError(PnchError):
    def __init__(self) -> None:
        super().__init__(
            "The specified range was not complete.",
            "When defining a range both the `--from DATE` and `--to DATE` should be specified.",
        )


class InvalidConfigKeyError(PnchError):
    def __init__(self, key: str, valid_keys: list[str]) -> None:
        super().__init__(
            f"`{key}` is not a configuration key.",
            f"The valid keys are {', '.join(f'`{k}`' for k in valid_keys)}.",
        )
        self.key = key


class InvalidConfigValueError(PnchError):
    def __init__(self, key: str, value: str, format_hint: str) -> None:
        super().__init__(
            f"`{value}` is not a valid value for `{key}`.",
            f"The format should be {format_hint}.",
        )
        self.key = key
        self.value = value


class StoreIOError(PnchError):
    def __init__(self, action: str, typ: str, reason: Optional[str] = None) -> None:
        message = f"Could not {action} the {typ} database."
        if reason is not None:
            message = f"{message} ({reason})"
        super().__init__(
            message,
            "The previous data was left untouched. Check the permissions and free space of the data directory.",
        )
        self.action = action
        self.typ = typ
