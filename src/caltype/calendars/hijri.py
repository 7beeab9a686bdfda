"""
caltype.calendars.hijri
-----------------------
Arithmetical (tabular) Islamic calendar.

Twelve months alternating 30 and 29 days (354 days), with the last month
lengthened to 30 days in 11 leap years of every 30-year cycle. The cycle
position of the leap years is set by `leap_shift`:

    year y is leap  <=>  (leap_shift + 11*y) mod 30 < 11

leap_shift=14 gives the widespread "Type II" set {2,5,7,10,13,16,18,21,24,26,29};
leap_shift=15 moves the 16th year to the 15th.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from caltype.core.engine import CalendarType
from caltype.core.types import CalendarShape, WeekdayName

# 1 Muharram AH 1 = Friday 16 July 622 (Julian), civil reckoning.
HIJRI_EPOCH_CIVIL = 1948440
HIJRI_EPOCH_ASTRONOMICAL = 1948439

MONTHS = (
    "Muharram", "Safar", "Rabi' al-awwal", "Rabi' al-thani",
    "Jumada al-ula", "Jumada al-akhirah", "Rajab", "Sha'ban",
    "Ramadan", "Shawwal", "Dhu al-Qi'dah", "Dhu al-Hijjah",
)

WEEKDAYS = (
    WeekdayName("Ahd", "al-Ahad"),
    WeekdayName("Ith", "al-Ithnayn"),
    WeekdayName("Thl", "ath-Thulatha'"),
    WeekdayName("Arb", "al-Arbi'a'"),
    WeekdayName("Kha", "al-Khamis"),
    WeekdayName("Jum", "al-Jumu'ah"),
    WeekdayName("Sab", "as-Sabt"),
)

HIJRI_SHAPE = CalendarShape(
    name="hijri",
    min_year=1317,
    max_year=1473,
    weekdays_per_week=7,
    starting_weekday=6,  # as-Sabt
    month_names=MONTHS,
    weekday_names=WEEKDAYS,
    common_month_lengths=(30, 29, 30, 29, 30, 29, 30, 29, 30, 29, 30, 29),
    leap_month_lengths=(30, 29, 30, 29, 30, 29, 30, 29, 30, 29, 30, 30),
    common_year_length=354,
    leap_year_length=355,
)


@dataclass(frozen=True)
class TabularHijriParams:
    epoch_jdn: int = HIJRI_EPOCH_CIVIL
    leap_shift: int = 14

    def __post_init__(self) -> None:
        if not (0 <= self.leap_shift < 30):
            raise ValueError("leap_shift must be in 0..29")


class HijriCalendar(CalendarType):

    def __init__(self, params: TabularHijriParams = TabularHijriParams(), starting_weekday: Optional[int] = None):
        self.params = params
        super().__init__(starting_weekday=starting_weekday)

    def shape(self) -> CalendarShape:
        return HIJRI_SHAPE

    def is_leap_year(self, year: int) -> bool:
        return (self.params.leap_shift + 11 * year) % 30 < 11

    def leap_years_before(self, year: int) -> int:
        """Number of leap years in AH 1 .. year-1 (negative for year < 1)."""
        s = self.params.leap_shift
        return (s - 11 + 11 * year) // 30 - s // 30

    def to_jdn(self, year: int, month: int, day: int) -> int:
        month_start = (59 * (month - 1) + 1) // 2  # ceil(29.5 * (month - 1))
        return (
            self.params.epoch_jdn - 1
            + 354 * (year - 1)
            + self.leap_years_before(year)
            + month_start
            + day
        )

    def from_jdn(self, jdn: int) -> Tuple[int, int, int]:
        # Mean-year estimate, then settle on the exact year.
        year = (30 * (jdn - self.params.epoch_jdn + 1) + 10646) // 10631
        while jdn < self.to_jdn(year, 1, 1):
            year -= 1
        while jdn >= self.to_jdn(year + 1, 1, 1):
            year += 1

        offset = jdn - self.to_jdn(year, 1, 1)
        month = min(12, (2 * offset) // 59 + 1)
        day = jdn - self.to_jdn(year, month, 1) + 1
        return year, month, day

    def _key(self):
        return super()._key() + (self.params,)

    def __repr__(self) -> str:
        return f"HijriCalendar(params={self.params!r}, starting_weekday={self.starting_weekday_index()})"
