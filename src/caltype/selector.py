"""
caltype.selector
----------------
Round trip between a canonical instant and the discrete fields of a date/time
selector (day, month, year, hour, minute selects plus an optional "enabled"
checkbox).

Rendering is not done here. This module only turns an instant into the values
the selects should show, and turns submitted values back into an instant.

Minutes are shown in multiples of `step`. An instant whose minute is not a
multiple is truncated down to the previous multiple (37 -> 35 for step 5);
it is never rounded up and never carries into the hour.

An optional selector that is switched off stands for "no date" and is
exchanged as NOT_SET (0). Neither direction calls into the calendar for it.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from .core.engine import CalendarType
from .core.errors import InvalidDate
from .core.timezone import USER_TIMEZONE, TimezoneResolver, TimezoneSpec

logger = logging.getLogger(__name__)

NOT_SET = 0


def _check_step(step: int) -> None:
    if not (1 <= step <= 60):
        raise ValueError("step must be in 1..60")

def round_down_minute(minute: int, step: int) -> int:
    _check_step(step)
    return minute - minute % step


@dataclass(frozen=True)
class SelectorOptions:
    start_year: int
    stop_year: int
    default_time: int = 0
    timezone: Optional[TimezoneSpec] = USER_TIMEZONE
    step: int = 5
    optional: bool = False

    def __post_init__(self) -> None:
        _check_step(self.step)
        if self.start_year > self.stop_year:
            raise ValueError("start_year must be <= stop_year")

    @classmethod
    def for_calendar(cls, calendar: CalendarType, **kwargs) -> "SelectorOptions":
        kwargs.setdefault("start_year", calendar.min_year())
        kwargs.setdefault("stop_year", calendar.max_year())
        return cls(**kwargs)


@dataclass(frozen=True)
class SelectorFields:
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    enabled: bool = True


@dataclass(frozen=True)
class SelectorChoices:
    days: Tuple[Tuple[int, str], ...]
    months: Tuple[Tuple[int, str], ...]
    years: Tuple[Tuple[int, str], ...]
    hours: Tuple[Tuple[int, str], ...]
    minutes: Tuple[Tuple[int, str], ...]


def choices(calendar: CalendarType, options: SelectorOptions) -> SelectorChoices:
    """Option lists for the five selects, as (value, label) pairs."""
    return SelectorChoices(
        days=tuple((d, str(d)) for d in calendar.all_possible_days()),
        months=tuple((i, name) for i, name in enumerate(calendar.month_names(), start=1)),
        years=tuple((y, str(y)) for y in range(options.start_year, options.stop_year + 1)),
        hours=tuple((h, f"{h:02d}") for h in range(24)),
        minutes=tuple((m, f"{m:02d}") for m in range(0, 60, options.step)),
    )


def _fields_at(
    instant: int,
    calendar: CalendarType,
    options: SelectorOptions,
    resolver: Optional[TimezoneResolver],
    enabled: bool,
) -> SelectorFields:
    c = calendar.from_canonical(instant, options.timezone, resolver=resolver)
    return SelectorFields(
        year=c.year,
        month=c.month,
        day=c.day,
        hour=c.hour,
        minute=round_down_minute(c.minute, options.step),
        enabled=enabled,
    )


def decode(
    instant: int,
    calendar: CalendarType,
    options: SelectorOptions,
    *,
    resolver: Optional[TimezoneResolver] = None,
) -> Optional[SelectorFields]:
    """Selector fields for a stored instant; None when the instant is NOT_SET."""
    if instant == NOT_SET:
        return None
    return _fields_at(instant, calendar, options, resolver, enabled=True)


def initial_fields(
    value: int,
    calendar: CalendarType,
    options: SelectorOptions,
    *,
    resolver: Optional[TimezoneResolver] = None,
    now: Optional[Callable[[], int]] = None,
) -> SelectorFields:
    """
    What a freshly displayed selector shows. A NOT_SET value falls back to
    options.default_time, then to the current time; an optional selector is
    only enabled when a value was actually given.
    """
    instant = value
    if instant == NOT_SET:
        instant = options.default_time
        if not instant:
            instant = now() if now is not None else int(time.time())
    enabled = value != NOT_SET if options.optional else True
    return _fields_at(instant, calendar, options, resolver, enabled=enabled)


def encode(
    fields: SelectorFields,
    calendar: CalendarType,
    options: SelectorOptions,
    *,
    resolver: Optional[TimezoneResolver] = None,
) -> int:
    """Canonical instant for submitted fields; NOT_SET for a switched-off optional selector."""
    if options.optional and not fields.enabled:
        logger.debug("Optional selector disabled, encoding NOT_SET")
        return NOT_SET
    instant = calendar.to_canonical(
        fields.year,
        fields.month,
        fields.day,
        fields.hour,
        fields.minute,
        timezone=options.timezone,
        resolver=resolver,
    )
    if instant == NOT_SET:
        raise InvalidDate("Date maps to the not-set sentinel (1970-01-01 00:00 UTC) and cannot be stored")
    return instant
