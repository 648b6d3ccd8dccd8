#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""Decide whether a given date is an occurrence of a repeating event."""

import datetime

from repeatkit.calendar_arithmetic import (
    day_of_week,
    days_between,
    months_between,
    parse_date,
    years_between,
)
from repeatkit.constants import DEFAULT_MAX_HORIZON
from repeatkit.events import EventForm, RecurrenceKind


def should_create_event_for_date(
    event: EventForm,
    candidate: datetime.date | str,
    max_horizon: datetime.date = DEFAULT_MAX_HORIZON,
) -> bool:
    """Check whether `candidate` is an occurrence of `event` under its recurrence rule.

    Parameters
    ----------
    event
        The event whose `date` anchors the series.
    candidate
        The date to test, as a `datetime.date` or a `YYYY-MM-DD` string.
    max_horizon
        The last date occurrences can fall on when the rule has no end date.

    Notes
    -----
    1. The anchor date is itself an occurrence of any repeating rule.
    2. Events which do not repeat have no occurrences under this predicate.
    3. A monthly rule anchored on a day missing from some month (eg the 31st)
    never matches that month, and a yearly rule anchored on February 29 only
    matches leap years.

    Raises
    ------
    ValidationError
        If the rule repeats with a non-positive interval.
    ParseError
        If `candidate` is a malformed date string.
    """
    spec = event.repeat
    spec.ensure_valid()
    candidate = parse_date(candidate)
    if not spec.is_repeating:
        return False

    anchor = event.date
    if not anchor <= candidate <= spec.horizon(max_horizon):
        return False

    interval = spec.interval
    if spec.kind == RecurrenceKind.DAILY:
        return days_between(anchor, candidate) % interval == 0
    elif spec.kind == RecurrenceKind.WEEKLY:
        if day_of_week(candidate) != day_of_week(anchor):
            return False
        return (days_between(anchor, candidate) // 7) % interval == 0
    elif spec.kind == RecurrenceKind.MONTHLY:
        if candidate.day != anchor.day:
            return False
        return months_between(anchor, candidate) % interval == 0
    elif spec.kind == RecurrenceKind.YEARLY:
        if (candidate.month, candidate.day) != (anchor.month, anchor.day):
            return False
        return years_between(anchor, candidate) % interval == 0
    else:
        raise ValueError(f"Unsupported recurrence kind: {spec.kind}")
