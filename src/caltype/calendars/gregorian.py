"""
caltype.calendars.gregorian
---------------------------
The proleptic Gregorian calendar, also the canonical calendar every other
calendar converts through.

Leap rule: divisible by 4, except centuries, except every fourth century.
"""

from __future__ import annotations

from typing import Tuple

from caltype.core.engine import CalendarType
from caltype.core.time import gregorian_is_leap, gregorian_to_jdn, jdn_to_gregorian
from caltype.core.types import CalendarShape, WeekdayName

MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

WEEKDAYS = (
    WeekdayName("Sun", "Sunday"),
    WeekdayName("Mon", "Monday"),
    WeekdayName("Tue", "Tuesday"),
    WeekdayName("Wed", "Wednesday"),
    WeekdayName("Thu", "Thursday"),
    WeekdayName("Fri", "Friday"),
    WeekdayName("Sat", "Saturday"),
)

GREGORIAN_SHAPE = CalendarShape(
    name="gregorian",
    min_year=1900,
    max_year=2050,
    weekdays_per_week=7,
    starting_weekday=1,  # Monday
    month_names=MONTHS,
    weekday_names=WEEKDAYS,
    common_month_lengths=(31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31),
    leap_month_lengths=(31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31),
    common_year_length=365,
    leap_year_length=366,
)


class GregorianCalendar(CalendarType):

    def shape(self) -> CalendarShape:
        return GREGORIAN_SHAPE

    def is_leap_year(self, year: int) -> bool:
        return gregorian_is_leap(year)

    def to_jdn(self, year: int, month: int, day: int) -> int:
        return gregorian_to_jdn(year, month, day)

    def from_jdn(self, jdn: int) -> Tuple[int, int, int]:
        return jdn_to_gregorian(jdn)
