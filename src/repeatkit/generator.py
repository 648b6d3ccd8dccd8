#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""Expand a repeating event into its occurrences."""

import datetime
import logging
from collections.abc import Callable, Generator

from repeatkit.calendar_arithmetic import (
    ShiftResult,
    ShiftStatus,
    shift_by_days,
    try_shift_by_months,
    try_shift_by_years,
)
from repeatkit.constants import DEFAULT_MAX_HORIZON
from repeatkit.events import EventForm, Occurrence, RecurrenceKind, RecurrenceSpec

logger = logging.getLogger(__name__)

Stepper = Callable[[datetime.date, int, datetime.date | None], ShiftResult]


def _shift_by_weeks(
    date: datetime.date, weeks: int, until: datetime.date | None = None
) -> ShiftResult:
    return shift_by_days(date, weeks * 7, until)


_STEPPERS: dict[RecurrenceKind, Stepper] = {
    RecurrenceKind.DAILY: shift_by_days,
    RecurrenceKind.WEEKLY: _shift_by_weeks,
    RecurrenceKind.MONTHLY: try_shift_by_months,
    RecurrenceKind.YEARLY: try_shift_by_years,
}


def iter_occurrence_dates(
    spec: RecurrenceSpec,
    anchor: datetime.date,
    max_horizon: datetime.date = DEFAULT_MAX_HORIZON,
) -> Generator[datetime.date, None, None]:
    """Yield the occurrence dates of `spec` in ascending order, starting with `anchor`.

    Every candidate is offset from `anchor` rather than from the previous
    occurrence, so a skipped month does not shift the day of later ones.

    Parameters
    ----------
    spec
        The recurrence rule. Nothing is yielded if it does not repeat.
    anchor
        The first date of the series.
    max_horizon
        The last date occurrences can fall on if `spec` has no end date.
    """
    spec.ensure_valid()
    if not spec.is_repeating:
        return
    try:
        step = _STEPPERS[spec.kind]
    except KeyError:
        raise ValueError(f"Unsupported recurrence kind: {spec.kind}")

    until = spec.horizon(max_horizon)
    n_steps = 0
    while True:
        result = step(anchor, n_steps * spec.interval, until)
        n_steps += 1
        if result.status == ShiftStatus.OUT_OF_BOUNDS:
            logger.debug(
                f"Stopping {spec.kind} series anchored on {anchor} after {n_steps} "
                f"steps: next candidate is past {until}"
            )
            return
        if result.status == ShiftStatus.SKIP:
            logger.debug(
                f"Skipping step {n_steps - 1} of {spec.kind} series anchored on "
                f"{anchor}: day does not exist in target period"
            )
            continue
        yield result.date


def create_repeating_events(
    event: EventForm, max_horizon: datetime.date = DEFAULT_MAX_HORIZON
) -> list[Occurrence]:
    """Materialise the occurrences of a repeating event.

    Each occurrence copies every field of `event` but `date`. Events which
    do not repeat produce no occurrences; it is up to the caller to save
    them as they are.

    Parameters
    ----------
    event
        The anchor event. Its date is always the first occurrence.
    max_horizon
        The last date occurrences can fall on if the rule has no end date.

    Raises
    ------
    ValidationError
        If the rule repeats with a non-positive interval. No occurrences are
        produced in this case.
    """
    fields = {f: getattr(event, f) for f in EventForm.model_fields if f != "date"}
    occurrences = [
        Occurrence(date=date, **fields)
        for date in iter_occurrence_dates(event.repeat, event.date, max_horizon)
    ]
    if event.repeat.is_repeating and not occurrences:
        logger.warning(f"No occurrences generated for {event}")
    return occurrences
