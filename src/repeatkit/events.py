#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""Event and recurrence rule models."""

import datetime
from enum import StrEnum, auto
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from repeatkit.aliases import EventPayload, NotificationMinutes, TimeStr
from repeatkit.calendar_arithmetic import format_date, parse_date
from repeatkit.exceptions import ValidationError

DEFAULT_NOTIFICATION_MINUTES = 10


class RecurrenceKind(StrEnum):
    NONE = auto()
    DAILY = auto()
    WEEKLY = auto()
    MONTHLY = auto()
    YEARLY = auto()


class RecurrenceSpec(BaseModel):
    """
    How an event repeats.

    Parameters
    ----------
    kind
        How often the event occurs. Serialised as `type`.
    interval
        Number of `kind` units between occurrences. For example, with WEEKLY an
        interval of 2 means once every two weeks. Must be at least 1 for
        repeating kinds and is ignored otherwise.
    end_date
        The last date on which the event may occur (inclusive). If not set,
        occurrences are generated up to a maximum horizon chosen by the caller.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    kind: RecurrenceKind = Field(default=RecurrenceKind.NONE, alias="type")
    interval: int = 1
    end_date: datetime.date | None = None

    @field_validator("end_date", mode="before")
    @classmethod
    def _parse_end_date(cls, value: Any) -> datetime.date | None:
        # forms send an empty string when no end date is picked
        if value is None or value == "":
            return None
        return parse_date(value)

    @model_validator(mode="after")
    def _check_interval(self) -> Self:
        self.ensure_valid()
        return self

    @property
    def is_repeating(self) -> bool:
        return self.kind != RecurrenceKind.NONE

    def ensure_valid(self) -> None:
        """Raise `ValidationError` if the rule repeats with a non-positive interval."""
        if self.is_repeating and self.interval < 1:
            raise ValidationError(
                f"Interval must be a positive integer for {self.kind} "
                f"recurrence, got {self.interval}"
            )

    def horizon(self, max_horizon: datetime.date) -> datetime.date:
        """The last date an occurrence may fall on."""
        return self.end_date if self.end_date is not None else max_horizon


class EventForm(BaseModel):
    """The user editable fields of a calendar event.

    Parameters
    ----------
    date
        The calendar date of the event. Accepts `YYYY-MM-DD` strings.
    start_time, end_time
        Wall clock times, copied verbatim and never interpreted.
    notification_time
        Minutes before the start of the event when the user is notified.
    repeat
        The recurrence rule. Events which do not repeat have `kind` NONE.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    title: str = ""
    date: datetime.date
    start_time: TimeStr = ""
    end_time: TimeStr = ""
    description: str = ""
    location: str = ""
    category: str = ""
    notification_time: NotificationMinutes = DEFAULT_NOTIFICATION_MINUTES
    repeat: RecurrenceSpec = Field(default_factory=RecurrenceSpec)

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, value: Any) -> datetime.date:
        return parse_date(value)

    def to_payload(self) -> EventPayload:
        """Serialise to the camelCase JSON form used by event stores."""
        return self.model_dump(mode="json", by_alias=True)

    def __str__(self) -> str:
        when = format_date(self.date)
        if self.start_time and self.end_time:
            when = f"{when} {self.start_time}-{self.end_time}"
        display = f"'{self.title}' on {when}" if self.title else f"Event on {when}"
        if self.location:
            display += f" (location: {self.location})"
        if self.repeat.is_repeating:
            display += f" repeating {self.repeat.kind} every {self.repeat.interval}"
        return display


class AnchorEvent(EventForm):
    """The user authored template of a (possibly) repeating event. Its `date`
    is the anchor date all occurrences are computed from."""


class Occurrence(EventForm):
    """One concrete instance of a repeating event. Identifiers are assigned
    by the event store on save, not here."""

    def detach(self) -> Self:
        """Return this instance as a standalone event, no longer part of
        the series. Used when a single instance of a series is edited."""
        single = self.repeat.model_copy(update={"kind": RecurrenceKind.NONE})
        return self.model_copy(update={"repeat": single})
