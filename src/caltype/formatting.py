"""
caltype.formatting
------------------
strftime-style rendering of DateComponents with the naming of the calendar the
components belong to. Only the substitution is done here; the calendar
arithmetic has already happened in CalendarType.from_canonical.

Supported directives:

    %a %A   weekday short / full name      %b %h %B  month short / full name
    %C      century (2 digits)             %d %e     day (zero / space padded)
    %D      %m/%d/%y                       %F        %Y-%m-%d
    %H      hour 00-23                     %I %l     hour 01-12 (zero / space padded)
    %j      day of year 001-               %m        month 01-
    %M %S   minute, second                 %p %P     AM/PM, am/pm
    %R %T   %H:%M, %H:%M:%S                %u %w     weekday 1-7 (Mon=1) / 0-6 (Sun=0)
    %y %Y   year (2 digits / full)         %z        UTC offset +hhmm
    %n %t %%

Anything else after a '%' is copied through unchanged.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from .core.types import DateComponents

if TYPE_CHECKING:
    from .core.engine import CalendarType

_DIRECTIVE_RE = re.compile(r"%(.)", re.DOTALL)


def month_short_name(name: str) -> str:
    return name[:3]

def offset_label(offset: int) -> str:
    sign = "-" if offset < 0 else "+"
    hh, rem = divmod(abs(offset), 3600)
    return f"{sign}{hh:02d}{rem // 60:02d}"


def format_components(
    cal: "CalendarType",
    c: DateComponents,
    pattern: str,
    *,
    offset: int = 0,
    trim_leading_zero_day: bool = True,
    trim_leading_zero_hour: bool = True,
) -> str:
    month_name = cal.month_names()[c.month - 1]
    weekday = cal.weekday_names()[c.weekday]
    hour12 = c.hour % 12 or 12

    def directive(m: "re.Match[str]") -> str:
        code = m.group(1)
        if code == "a":
            return weekday.shortname
        if code == "A":
            return weekday.fullname
        if code in ("b", "h"):
            return month_short_name(month_name)
        if code == "B":
            return month_name
        if code == "C":
            return f"{c.year // 100:02d}"
        if code == "d":
            return str(c.day) if trim_leading_zero_day else f"{c.day:02d}"
        if code == "e":
            return f"{c.day:2d}"
        if code == "D":
            return f"{c.month:02d}/{c.day:02d}/{c.year % 100:02d}"
        if code == "F":
            return f"{c.year}-{c.month:02d}-{c.day:02d}"
        if code == "H":
            return f"{c.hour:02d}"
        if code == "I":
            return str(hour12) if trim_leading_zero_hour else f"{hour12:02d}"
        if code == "l":
            return f"{hour12:2d}"
        if code == "j":
            return f"{c.yday:03d}"
        if code == "m":
            return f"{c.month:02d}"
        if code == "M":
            return f"{c.minute:02d}"
        if code == "S":
            return f"{c.second:02d}"
        if code == "p":
            return "AM" if c.hour < 12 else "PM"
        if code == "P":
            return "am" if c.hour < 12 else "pm"
        if code == "R":
            return f"{c.hour:02d}:{c.minute:02d}"
        if code == "T":
            return f"{c.hour:02d}:{c.minute:02d}:{c.second:02d}"
        if code == "u":
            return str(c.weekday or cal.weekdays_per_week())
        if code == "w":
            return str(c.weekday)
        if code == "y":
            return f"{c.year % 100:02d}"
        if code == "Y":
            return str(c.year)
        if code == "z":
            return offset_label(offset)
        if code == "n":
            return "\n"
        if code == "t":
            return "\t"
        if code == "%":
            return "%"
        return m.group(0)

    return _DIRECTIVE_RE.sub(directive, pattern)
