"""
caltype.core.engine
-------------------
The calendar-type contract and the registry of available calendar types.

A concrete calendar supplies its shape, its leap rule and the two day-count
primitives (to_jdn / from_jdn). Everything else (validation, navigation,
weekdays, canonical-instant conversion, formatting) is derived here once, on
top of the Julian Day Number, so that every calendar converts through the same
code path.
"""

from __future__ import annotations

import copy
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .errors import InvalidDate, UnsupportedCalendarIdentifier
from .time import gregorian_to_jdn, jdn_to_gregorian, local_seconds, split_local_seconds
from .timezone import USER_TIMEZONE, TimezoneResolver, TimezoneSpec
from .types import CalendarDate, CalendarShape, DateComponents, WeekdayName

logger = logging.getLogger(__name__)

_DEFAULT_RESOLVER = TimezoneResolver()


class CalendarType(ABC):
    """
    One calendar system. Instances are immutable; the only per-instance state
    is the first day of the week used for display.
    """

    # (jdn + WEEKDAY_JDN_OFFSET) % weekdays_per_week() is the weekday index.
    # With 1 and a 7-day week, index 0 is Sunday.
    WEEKDAY_JDN_OFFSET = 1

    def __init__(self, starting_weekday: Optional[int] = None):
        shape = self.shape()
        if starting_weekday is None:
            starting_weekday = shape.starting_weekday
        if not (0 <= starting_weekday < shape.weekdays_per_week):
            raise ValueError(f"starting_weekday must be in 0..{shape.weekdays_per_week - 1}")
        self._starting_weekday = starting_weekday

    # ---------------------------------------------------------
    # Primitives
    # ---------------------------------------------------------

    @abstractmethod
    def shape(self) -> CalendarShape:
        ...

    @abstractmethod
    def is_leap_year(self, year: int) -> bool:
        ...

    @abstractmethod
    def to_jdn(self, year: int, month: int, day: int) -> int:
        """Julian Day Number of a date that has already been validated."""
        ...

    @abstractmethod
    def from_jdn(self, jdn: int) -> Tuple[int, int, int]:
        """(year, month, day) of the civil day jdn."""
        ...

    # ---------------------------------------------------------
    # Shape accessors
    # ---------------------------------------------------------

    def name(self) -> str:
        return self.shape().name

    def all_possible_days(self) -> Tuple[int, ...]:
        """Every day number any month can have (what a day select list offers)."""
        return tuple(range(1, self.shape().max_days_in_month + 1))

    def month_names(self) -> Tuple[str, ...]:
        return self.shape().month_names

    def min_year(self) -> int:
        return self.shape().min_year

    def max_year(self) -> int:
        return self.shape().max_year

    def weekdays_per_week(self) -> int:
        return self.shape().weekdays_per_week

    def weekday_names(self) -> Tuple[WeekdayName, ...]:
        return self.shape().weekday_names

    def starting_weekday_index(self) -> int:
        return self._starting_weekday

    def with_starting_weekday(self, index: int) -> "CalendarType":
        other = copy.copy(self)
        CalendarType.__init__(other, starting_weekday=index)
        return other

    # ---------------------------------------------------------
    # Month / day arithmetic
    # ---------------------------------------------------------

    def months_in_year(self, year: int) -> int:
        return self.shape().months_per_year

    def days_in_month(self, year: int, month: int) -> int:
        self._check_month(year, month)
        s = self.shape()
        table = s.leap_month_lengths if self.is_leap_year(year) else s.common_month_lengths
        return table[month - 1]

    def days_in_year(self, year: int) -> int:
        s = self.shape()
        return s.leap_year_length if self.is_leap_year(year) else s.common_year_length

    def validate(self, year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0) -> None:
        dim = self.days_in_month(year, month)
        if not (1 <= day <= dim):
            raise InvalidDate(f"Day {day} is out of range 1..{dim} for {self.name()} {year}-{month:02d}")
        if not (0 <= hour <= 23):
            raise InvalidDate(f"Hour {hour} is out of range 0..23")
        if not (0 <= minute <= 59):
            raise InvalidDate(f"Minute {minute} is out of range 0..59")
        if not (0 <= second <= 59):
            raise InvalidDate(f"Second {second} is out of range 0..59")

    def _check_month(self, year: int, month: int) -> None:
        n = self.months_in_year(year)
        if not (1 <= month <= n):
            raise InvalidDate(f"Month {month} is out of range 1..{n} for the {self.name()} calendar")

    def previous_month(self, year: int, month: int) -> Tuple[int, int]:
        self._check_month(year, month)
        if month == 1:
            return year - 1, self.months_in_year(year - 1)
        return year, month - 1

    def next_month(self, year: int, month: int) -> Tuple[int, int]:
        self._check_month(year, month)
        if month == self.months_in_year(year):
            return year + 1, 1
        return year, month + 1

    def weekday_index(self, year: int, month: int, day: int) -> int:
        self.validate(year, month, day)
        return self._weekday_from_jdn(self.to_jdn(year, month, day))

    def day_of_year(self, year: int, month: int, day: int) -> int:
        self.validate(year, month, day)
        return self.to_jdn(year, month, day) - self.to_jdn(year, 1, 1) + 1

    def _weekday_from_jdn(self, jdn: int) -> int:
        return (jdn + self.WEEKDAY_JDN_OFFSET) % self.weekdays_per_week()

    # ---------------------------------------------------------
    # Week layout
    # ---------------------------------------------------------

    def ordered_weekdays(self) -> List[WeekdayName]:
        """Weekday names in display order, beginning with the starting weekday."""
        names = self.weekday_names()
        k = self._starting_weekday
        return list(names[k:] + names[:k])

    def first_column(self, year: int, month: int) -> int:
        """Column (0-based) of day 1 of the month in a week grid that begins at the starting weekday."""
        wd = self.weekday_index(year, month, 1)
        return (wd - self._starting_weekday) % self.weekdays_per_week()

    # ---------------------------------------------------------
    # Canonical instant conversion
    # ---------------------------------------------------------

    def to_canonical(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        timezone: Optional[TimezoneSpec] = USER_TIMEZONE,
        resolver: Optional[TimezoneResolver] = None,
    ) -> int:
        """
        Seconds since 1970-01-01 UTC for a wall-clock date in this calendar.
        The wall clock is read in `timezone` (USER_TIMEZONE resolves through
        `resolver`, whose user zone defaults to UTC).
        """
        self.validate(year, month, day, hour, minute, second)
        local = local_seconds(self.to_jdn(year, month, day), hour, minute, second)
        res = resolver or _DEFAULT_RESOLVER
        return local - res.offset_for_local(timezone, local)

    def from_canonical(
        self,
        instant: int,
        timezone: Optional[TimezoneSpec] = USER_TIMEZONE,
        *,
        resolver: Optional[TimezoneResolver] = None,
    ) -> DateComponents:
        res = resolver or _DEFAULT_RESOLVER
        return self._components_at(instant + res.offset_at(timezone, instant))

    def _components_at(self, local: int) -> DateComponents:
        jdn, hour, minute, second = split_local_seconds(local)
        y, m, d = self.from_jdn(jdn)
        return DateComponents(
            calendar=self.name(),
            year=y,
            month=m,
            day=d,
            hour=hour,
            minute=minute,
            second=second,
            weekday=self._weekday_from_jdn(jdn),
            yday=jdn - self.to_jdn(y, 1, 1) + 1,
        )

    def convert_to_gregorian(self, year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> CalendarDate:
        self.validate(year, month, day, hour, minute)
        gy, gm, gd = jdn_to_gregorian(self.to_jdn(year, month, day))
        return CalendarDate("gregorian", gy, gm, gd, hour, minute)

    def convert_from_gregorian(self, year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> CalendarDate:
        jdn = gregorian_to_jdn(year, month, day)
        if not (1 <= month <= 12) or jdn_to_gregorian(jdn) != (year, month, day):
            raise InvalidDate(f"{year}-{month:02d}-{day:02d} is not a valid gregorian date")
        if not (0 <= hour <= 23) or not (0 <= minute <= 59):
            raise InvalidDate(f"Time {hour:02d}:{minute:02d} is out of range")
        y, m, d = self.from_jdn(jdn)
        return CalendarDate(self.name(), y, m, d, hour, minute)

    # ---------------------------------------------------------
    # Formatting
    # ---------------------------------------------------------

    def format(
        self,
        instant: int,
        pattern: str,
        timezone: Optional[TimezoneSpec] = USER_TIMEZONE,
        trim_leading_zero_day: bool = True,
        trim_leading_zero_hour: bool = True,
        *,
        resolver: Optional[TimezoneResolver] = None,
    ) -> str:
        from ..formatting import format_components

        res = resolver or _DEFAULT_RESOLVER
        offset = res.offset_at(timezone, instant)
        comps = self._components_at(instant + offset)
        return format_components(
            self,
            comps,
            pattern,
            offset=offset,
            trim_leading_zero_day=trim_leading_zero_day,
            trim_leading_zero_hour=trim_leading_zero_hour,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(starting_weekday={self._starting_weekday})"

    def _key(self) -> tuple:
        return (type(self), self._starting_weekday)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarType):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())


@dataclass
class CalendarRegistry:
    _calendars: Dict[str, CalendarType]

    def get(self, name: str) -> CalendarType:
        if name not in self._calendars:
            raise UnsupportedCalendarIdentifier(f"Unknown calendar '{name}'. Available: {sorted(self._calendars)}")
        return self._calendars[name]

    def list(self) -> List[str]:
        return sorted(self._calendars.keys())

    def register(self, name: str, calendar: CalendarType, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._calendars):
            raise KeyError(f"Calendar '{name}' already exists. Use overwrite=True to replace.")
        logger.debug("Registering calendar %s -> %r", name, calendar)
        self._calendars[name] = calendar
