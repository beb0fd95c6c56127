# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import Annotated, Optional

import pendulum
import typer

from pnch.description import split_tag_description
from pnch.model.period import Period
from pnch.query.filter import build_filter_criteria, filter_entries
from pnch.repository.configuration import CONFIGURATION_REPO
from pnch.repository.entry import ENTRY_REPO
from pnch.service import entry as entry_service
from pnch.service.report import summarize
from pnch.terminal.error import report_errors
from pnch.terminal.parse import parse_date, parse_period, parse_time
from pnch.time import now_local
from pnch.view import entry as entry_view

TEXT_HELP = (
    'valid input: "tag/description", everything before the first / is the tag '
    "and everything after it the description"
)
TIME_HELP = "valid input: (H)H:mm"
DATE_HELP = "valid inputs: YYYY-MM-DD, today, yesterday"


class OutputFormat(StrEnum):
    PRETTY = "pretty"
    LIST = "list"
    CSV = "csv"


def punch_in(
    text: Annotated[Optional[str], typer.Argument(help=TEXT_HELP)] = None,
    time: Annotated[
        Optional[pendulum.Time],
        typer.Option("--time", "-t", parser=parse_time, help=TIME_HELP),
    ] = None,
) -> None:
    """
    start a new pnch, now or at the given time
    """
    tag, description = split_tag_description(text) if text is not None else (None, None)

    with report_errors():
        id = entry_service.punch_in(time, tag, description)
        entry = ENTRY_REPO.get_entry(id)

    entry_view.single_entry_view(entry, "pnched in")


def punch_out(
    text: Annotated[Optional[str], typer.Argument(help=TEXT_HELP)] = None,
    time: Annotated[
        Optional[pendulum.Time],
        typer.Option("--time", "-t", parser=parse_time, help=TIME_HELP),
    ] = None,
) -> None:
    """
    close the open pnch, now or at the given time

    A tag or description given here replaces the one given when pnching in.
    """
    tag, description = split_tag_description(text) if text is not None else (None, None)

    with report_errors():
        id = entry_service.punch_out(time, tag, description)
        entry = ENTRY_REPO.get_entry(id)

    entry_view.single_entry_view(entry, "pnched out")


def edit(
    text: Annotated[Optional[str], typer.Argument(help=TEXT_HELP)] = None,
    id: Annotated[
        Optional[int],
        typer.Option("--id", help="id of the pnch to edit, the open pnch by default"),
    ] = None,
    time_in: Annotated[
        Optional[pendulum.Time],
        typer.Option("--in", "-i", parser=parse_time, help=TIME_HELP),
    ] = None,
    time_out: Annotated[
        Optional[pendulum.Time],
        typer.Option("--out", "-o", parser=parse_time, help=TIME_HELP),
    ] = None,
) -> None:
    """
    edit the times, tag or description of a pnch
    """
    tag, description = split_tag_description(text) if text is not None else (None, None)

    with report_errors():
        if id is None:
            entry = entry_service.edit_open_entry(time_in, time_out, tag, description)
        else:
            entry = entry_service.edit_entry(id, time_in, time_out, tag, description)

    entry_view.single_entry_view(entry, "edited pnch")


def ls(
    dates: Annotated[
        Optional[list[pendulum.Date]],
        typer.Option(
            "--date",
            "-d",
            parser=parse_date,
            help=f"{DATE_HELP}; accepts multiple date options",
        ),
    ] = None,
    since: Annotated[
        Optional[pendulum.Date],
        typer.Option("--since", "-s", parser=parse_date, help=DATE_HELP),
    ] = None,
    from_date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--from", "-f", parser=parse_date, help=DATE_HELP),
    ] = None,
    to_date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--to", parser=parse_date, help=DATE_HELP),
    ] = None,
    last: Annotated[
        Optional[Period],
        typer.Option(
            "--last",
            "-l",
            parser=parse_period,
            help='valid input: "n unit" where unit is days, weeks, months or years',
        ),
    ] = None,
    tag: Annotated[Optional[str], typer.Option("--tag", "-t")] = None,
    format: Annotated[
        OutputFormat, typer.Option("--format", "-F", case_sensitive=False)
    ] = OutputFormat.PRETTY,
) -> None:
    """
    list pnchs grouped by date

    Date criteria are combined, an entry matching any of them is listed.
    Without any of them the `ls-default-period` setting applies. A tag narrows
    the result down further.
    """
    with report_errors():
        criteria = build_filter_criteria(dates, from_date, to_date, since, last, tag)
        default_period = CONFIGURATION_REPO.get_default_period()
        now = now_local()
        entries = filter_entries(
            entry_service.all_entries(), criteria, now, default_period
        )
        report = summarize(entries, now)

    match format:
        case OutputFormat.CSV:
            typer.echo(entry_view.entries_csv(report), nl=False)
        case OutputFormat.LIST:
            entry_view.entries_list_view(report, now)
        case _:
            entry_view.entries_view(report, now)
