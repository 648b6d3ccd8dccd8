#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
from importlib.metadata import PackageNotFoundError, version  # pragma: no cover

from repeatkit.calendar_arithmetic import is_leap_year, last_day_of_month
from repeatkit.events import AnchorEvent, Occurrence, RecurrenceKind, RecurrenceSpec
from repeatkit.exceptions import EventDefinitionError, ParseError, ValidationError
from repeatkit.generator import create_repeating_events
from repeatkit.recurrence import should_create_event_for_date

try:
    # Change here if project is renamed and does not equal the package name
    dist_name = "repeatkit"
    __version__ = version(dist_name)
except PackageNotFoundError:  # pragma: no cover
    __version__ = "unknown"
finally:
    del version, PackageNotFoundError

__all__ = [
    "AnchorEvent",
    "EventDefinitionError",
    "Occurrence",
    "ParseError",
    "RecurrenceKind",
    "RecurrenceSpec",
    "ValidationError",
    "create_repeating_events",
    "is_leap_year",
    "last_day_of_month",
    "should_create_event_for_date",
]
