#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from repeatkit.calendar_arithmetic import day_of_week, format_date
from repeatkit.events import EventForm

WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


def occurrences_table(events: Sequence[EventForm], title: str | None = None) -> Table:
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Date", style="cyan")
    table.add_column("Weekday")
    table.add_column("Title")
    table.add_column("Time")
    table.add_column("Repeats")
    for i, event in enumerate(events, start=1):
        time_ = (
            f"{event.start_time}-{event.end_time}" if event.start_time else "all day"
        )
        repeats = (
            f"{event.repeat.kind} / {event.repeat.interval}"
            if event.repeat.is_repeating
            else "-"
        )
        table.add_row(
            str(i),
            format_date(event.date),
            WEEKDAY_NAMES[day_of_week(event.date)],
            event.title,
            time_,
            repeats,
        )
    return table


def display_occurrences(events: Sequence[EventForm], title: str | None = None):
    """Print the events as a table, one row per occurrence."""
    console = Console()
    console.print(occurrences_table(events, title=title))
