# SPDX-License-Identifier: MIT

import csv
import io
from typing import Optional, cast

import pendulum
from rich import box
from rich.markup import escape
from rich.table import Table

from pnch.model.entity_id import EntryId
from pnch.model.entry import Entry
from pnch.model.report import Report
from pnch.service.report import elapsed
from pnch.time import (
    date_to_display_str,
    date_to_str,
    duration_to_clock_str,
    duration_to_str,
    time_to_display_str,
    time_to_display_str_optional,
)
from pnch.view.header import header
from pnch.view.state import get_console

NO_ENTRIES_MESSAGE = "No pnchs found."
NO_ENTRIES_HINT = "The filter was probably too strict, try `pnch ls --last \"1 month\"`."


def single_entry_view(
    entry: Entry,
    title: str = "pnch",
    now: Optional[pendulum.DateTime] = None,
) -> None:
    header(title)

    entry_table = Table(box=box.SIMPLE)
    entry_table.add_column("property")
    entry_table.add_column("value")

    entry_table.add_row("id", str(entry["id"]))
    entry_table.add_row("date", date_to_display_str(entry["date"]))
    entry_table.add_row("in", time_to_display_str(entry["time_in"]))
    entry_table.add_row("out", time_to_display_str_optional(entry["time_out"]) or "")
    entry_table.add_row("tag", escape(entry["tag"] or ""))
    entry_table.add_row("description", escape(entry["description"] or ""))
    entry_table.add_row("elapsed", duration_to_str(elapsed(entry, now)))

    get_console().print(entry_table)


def entries_view(report: Report, now: Optional[pendulum.DateTime] = None) -> None:
    """
    Print the report as a table, one block of rows per date.

    Each date ends with a subtotal row and the table ends with the overall
    total. Open entries are underlined.
    """
    console = get_console()
    if len(report["groups"]) == 0:
        __no_entries()
        return

    header("pnchs")

    entries_table = Table(box=box.SIMPLE)
    entries_table.add_column("id", justify="right")
    entries_table.add_column("date")
    entries_table.add_column("in")
    entries_table.add_column("out")
    entries_table.add_column("elapsed", justify="right")
    entries_table.add_column("tag")
    entries_table.add_column("description")

    for group in report["groups"]:
        for index, entry in enumerate(group["entries"]):
            is_open = entry["time_out"] is None
            row = [
                str(entry["id"]),
                date_to_display_str(entry["date"]) if index == 0 else "",
                time_to_display_str(entry["time_in"]),
                time_to_display_str_optional(entry["time_out"]) or "",
                duration_to_clock_str(elapsed(entry, now)),
                escape(entry["tag"] or ""),
                escape(entry["description"] or ""),
            ]
            if is_open:
                row = [f"[underline]{value}[/underline]" if value else value for value in row]
            entries_table.add_row(*row)

        entries_table.add_row(
            "", "", "", "", duration_to_clock_str(group["total"]), "", "", style="dim"
        )
        entries_table.add_section()

    entries_table.add_row(
        "", "total", "", "", duration_to_clock_str(report["total"]), "", "", style="bold"
    )

    console.print(entries_table)


def entries_list_view(report: Report, now: Optional[pendulum.DateTime] = None) -> None:
    """Print the report as plain text, without any table layout."""
    console = get_console()
    if len(report["groups"]) == 0:
        __no_entries()
        return

    lines = [f"The total duration of pnchs was {duration_to_str(report['total'])}"]
    for group in report["groups"]:
        lines.append("")
        lines.append(date_to_display_str(group["date"]))
        for entry in group["entries"]:
            lines.append(__list_line(entry, now))
            tag = entry["tag"] if entry["tag"] is not None else "[---]"
            description = entry["description"] or "no description"
            lines.append(f"    {tag} {description}")

    console.print("\n".join(lines), markup=False, highlight=False)


def entries_csv(report: Report) -> str:
    """
    CSV text with one row per entry: tag, description, date, in, out.

    Missing values are empty fields and there is no header row.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    for group in report["groups"]:
        for entry in group["entries"]:
            writer.writerow(
                [
                    entry["tag"] or "",
                    entry["description"] or "",
                    date_to_str(entry["date"]),
                    time_to_display_str(entry["time_in"]),
                    time_to_display_str_optional(entry["time_out"]) or "",
                ]
            )
    return buffer.getvalue()


def __list_line(entry: Entry, now: Optional[pendulum.DateTime]) -> str:
    id = cast(EntryId, entry["id"])
    if entry["time_out"] is None:
        return f"  #{id} > Since {time_to_display_str(entry['time_in'])}"
    return (
        f"  #{id} > From {time_to_display_str(entry['time_in'])}"
        f" to {time_to_display_str(entry['time_out'])}"
        f" ({duration_to_str(elapsed(entry, now))})"
    )


def __no_entries() -> None:
    console = get_console()
    console.print(NO_ENTRIES_MESSAGE)
    console.print(f"[yellow]{escape(NO_ENTRIES_HINT)}[/yellow]")
