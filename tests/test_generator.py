#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import datetime
from collections.abc import Callable

import pytest

from repeatkit.constants import DEFAULT_MAX_HORIZON
from repeatkit.events import AnchorEvent, Occurrence, RecurrenceKind, RecurrenceSpec
from repeatkit.exceptions import ValidationError
from repeatkit.generator import create_repeating_events, iter_occurrence_dates

EventFactory = Callable[..., AnchorEvent]


def _dates(occurrences: list[Occurrence]) -> list[str]:
    return [o.date.isoformat() for o in occurrences]


def _repeat(kind: str, interval: int = 1, end_date: str | None = None) -> dict:
    return {"type": kind, "interval": interval, "endDate": end_date}


@pytest.mark.parametrize(
    "date, repeat, expected",
    [
        # daily, every day
        (
            "2025-08-01",
            _repeat("daily", 1, "2025-08-03"),
            ["2025-08-01", "2025-08-02", "2025-08-03"],
        ),
        # daily, every other day
        (
            "2025-08-01",
            _repeat("daily", 2, "2025-08-05"),
            ["2025-08-01", "2025-08-03", "2025-08-05"],
        ),
        # monthly without an end date stops at the default horizon
        (
            "2025-08-01",
            _repeat("monthly", 1),
            ["2025-08-01", "2025-09-01", "2025-10-01"],
        ),
        # monthly on the 31st skips September
        (
            "2025-08-31",
            _repeat("monthly", 1, "2025-10-31"),
            ["2025-08-31", "2025-10-31"],
        ),
        # yearly on a leap day only lands on leap years
        (
            "2020-02-29",
            _repeat("yearly", 1, "2025-03-01"),
            ["2020-02-29", "2024-02-29"],
        ),
        # weekly on Thursdays
        (
            "2025-08-07",
            _repeat("weekly", 1, "2025-08-21"),
            ["2025-08-07", "2025-08-14", "2025-08-21"],
        ),
    ],
)
def test_scenarios(make_event: EventFactory, date: str, repeat: dict, expected):
    event = make_event(date=date, repeat=repeat)
    assert _dates(create_repeating_events(event)) == expected


def test_default_horizon_excludes_following_month(make_event: EventFactory):
    event = make_event(repeat=_repeat("monthly"))
    occurrences = create_repeating_events(event)
    assert "2025-11-01" not in _dates(occurrences)
    assert all(o.date <= DEFAULT_MAX_HORIZON for o in occurrences)


def test_max_horizon_is_configurable(make_event: EventFactory):
    event = make_event(repeat=_repeat("monthly"))
    occurrences = create_repeating_events(
        event, max_horizon=datetime.date(2025, 12, 31)
    )
    assert _dates(occurrences) == [
        "2025-08-01",
        "2025-09-01",
        "2025-10-01",
        "2025-11-01",
        "2025-12-01",
    ]


def test_end_date_takes_precedence_over_horizon(make_event: EventFactory):
    event = make_event(repeat=_repeat("daily", 1, "2025-08-03"))
    occurrences = create_repeating_events(
        event, max_horizon=datetime.date(2025, 12, 31)
    )
    assert _dates(occurrences) == ["2025-08-01", "2025-08-02", "2025-08-03"]


def test_non_repeating_event(make_event: EventFactory):
    assert create_repeating_events(make_event()) == []


def test_end_date_before_anchor(make_event: EventFactory):
    event = make_event(repeat=_repeat("daily", 1, "2025-07-31"))
    assert create_repeating_events(event) == []


def test_leap_day_with_no_leap_year_in_range(make_event: EventFactory):
    event = make_event(date="2024-02-29", repeat=_repeat("yearly", 1, "2025-10-30"))
    assert _dates(create_repeating_events(event)) == ["2024-02-29"]


def test_every_other_day_until_end(make_event: EventFactory):
    event = make_event(date="2025-08-15", repeat=_repeat("daily", 2, "2025-10-30"))
    occurrences = create_repeating_events(event)
    assert _dates(occurrences)[:3] == ["2025-08-15", "2025-08-17", "2025-08-19"]
    assert occurrences[-1].date == datetime.date(2025, 10, 30)
    assert len(occurrences) == 39


def test_monthly_on_31st_over_a_year(make_event: EventFactory):
    event = make_event(date="2025-01-31", repeat=_repeat("monthly", 1, "2025-12-31"))
    assert _dates(create_repeating_events(event)) == [
        "2025-01-31",
        "2025-03-31",
        "2025-05-31",
        "2025-07-31",
        "2025-08-31",
        "2025-10-31",
        "2025-12-31",
    ]


def test_monthly_interval_skip_does_not_shift_series(make_event: EventFactory):
    event = make_event(date="2025-01-31", repeat=_repeat("monthly", 2, "2025-12-31"))
    # September and November have no 31st
    assert _dates(create_repeating_events(event)) == [
        "2025-01-31",
        "2025-03-31",
        "2025-05-31",
        "2025-07-31",
    ]


def test_weekly_interval(make_event: EventFactory):
    event = make_event(date="2025-08-07", repeat=_repeat("weekly", 2, "2025-09-30"))
    occurrences = create_repeating_events(event)
    assert _dates(occurrences) == [
        "2025-08-07",
        "2025-08-21",
        "2025-09-04",
        "2025-09-18",
    ]
    assert {o.date.weekday() for o in occurrences} == {3}


def test_yearly_interval(make_event: EventFactory):
    event = make_event(date="2025-08-15", repeat=_repeat("yearly", 2, "2031-08-15"))
    assert _dates(create_repeating_events(event)) == [
        "2025-08-15",
        "2027-08-15",
        "2029-08-15",
        "2031-08-15",
    ]


def test_occurrences_copy_anchor_fields(make_event: EventFactory):
    event = make_event(
        title="Standup",
        startTime="09:00",
        endTime="09:15",
        repeat=_repeat("weekly", 3, "2025-10-30"),
    )
    occurrences = create_repeating_events(event)
    assert occurrences
    for occurrence in occurrences:
        assert isinstance(occurrence, Occurrence)
        assert occurrence.model_dump(exclude={"date"}) == event.model_dump(
            exclude={"date"}
        )
        assert occurrence.repeat.kind == RecurrenceKind.WEEKLY
        assert occurrence.repeat.interval == 3


@pytest.mark.parametrize(
    "kind, interval, date",
    [
        ("daily", 1, "2025-08-01"),
        ("weekly", 2, "2025-08-07"),
        ("monthly", 1, "2025-08-31"),
        ("yearly", 1, "2020-02-29"),
    ],
)
def test_order_and_bounds(make_event: EventFactory, kind: str, interval: int, date):
    event = make_event(date=date, repeat=_repeat(kind, interval, "2029-12-31"))
    occurrences = create_repeating_events(event)
    dates = [o.date for o in occurrences]
    assert dates[0] == event.date
    assert all(d1 < d2 for d1, d2 in zip(dates, dates[1:]))
    assert dates[-1] <= event.repeat.end_date
    # generation keeps no state between calls
    assert create_repeating_events(event) == occurrences


def test_non_positive_interval_is_rejected(make_event: EventFactory):
    spec = RecurrenceSpec.model_construct(
        kind=RecurrenceKind.MONTHLY, interval=-1, end_date=None
    )
    event = make_event().model_copy(update={"repeat": spec})
    with pytest.raises(ValidationError):
        create_repeating_events(event)


def test_iter_occurrence_dates_is_lazy():
    spec = RecurrenceSpec(kind=RecurrenceKind.DAILY, interval=1)
    dates = iter_occurrence_dates(
        spec, datetime.date(2025, 1, 1), max_horizon=datetime.date.max
    )
    assert next(dates) == datetime.date(2025, 1, 1)
    assert next(dates) == datetime.date(2025, 1, 2)
