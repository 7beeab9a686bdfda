from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

@dataclass(frozen=True)
class WeekdayName:
    shortname: str
    fullname: str

@dataclass(frozen=True)
class CalendarShape:
    """Static description of one calendar system.

    Month tables are indexed by month - 1. The leap table applies to years for
    which the calendar's leap rule holds.
    """
    name: str
    min_year: int
    max_year: int
    weekdays_per_week: int
    starting_weekday: int
    month_names: Tuple[str, ...]
    weekday_names: Tuple[WeekdayName, ...]
    common_month_lengths: Tuple[int, ...]
    leap_month_lengths: Tuple[int, ...]
    common_year_length: int
    leap_year_length: int

    def __post_init__(self) -> None:
        n = len(self.month_names)
        if len(self.common_month_lengths) != n or len(self.leap_month_lengths) != n:
            raise ValueError(f"{self.name}: month tables must have {n} entries")
        if sum(self.common_month_lengths) != self.common_year_length:
            raise ValueError(f"{self.name}: common month lengths must sum to {self.common_year_length}")
        if sum(self.leap_month_lengths) != self.leap_year_length:
            raise ValueError(f"{self.name}: leap month lengths must sum to {self.leap_year_length}")
        if len(self.weekday_names) != self.weekdays_per_week:
            raise ValueError(f"{self.name}: expected {self.weekdays_per_week} weekday names")
        if not (0 <= self.starting_weekday < self.weekdays_per_week):
            raise ValueError(f"{self.name}: starting_weekday must be in 0..{self.weekdays_per_week - 1}")
        if self.min_year > self.max_year:
            raise ValueError(f"{self.name}: min_year must be <= max_year")

    @property
    def months_per_year(self) -> int:
        return len(self.month_names)

    @property
    def max_days_in_month(self) -> int:
        return max(max(self.common_month_lengths), max(self.leap_month_lengths))

@dataclass(frozen=True)
class DateComponents:
    """A date and time of day in one calendar system, as seen from one timezone."""
    calendar: str
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    weekday: int = 0  # index into the calendar's weekday_names
    yday: int = 1     # 1-based day of year

    def as_tuple(self) -> Tuple[int, int, int, int, int, int]:
        return (self.year, self.month, self.day, self.hour, self.minute, self.second)

@dataclass(frozen=True)
class CalendarDate:
    calendar: str
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
