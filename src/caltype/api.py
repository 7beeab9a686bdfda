from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

from .core.engine import CalendarRegistry, CalendarType
from .core.timezone import USER_TIMEZONE, TimezoneResolver, TimezoneSpec
from .core.types import CalendarDate, DateComponents

logger = logging.getLogger(__name__)

CalendarRef = Union[str, CalendarType]

_registry: Optional[CalendarRegistry] = None

def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg
    logger.debug("Calendar registry set: %s", reg.list())

def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def _cal(calendar: CalendarRef) -> CalendarType:
    if isinstance(calendar, CalendarType):
        return calendar
    return _reg().get(calendar)

def list_calendars() -> List[str]:
    return _reg().list()

def resolve(identifier: str) -> CalendarType:
    """Calendar type registered under `identifier` (UnsupportedCalendarIdentifier if none)."""
    return _reg().get(identifier)

def register_calendar(name: str, calendar: CalendarType, *, overwrite: bool = False) -> None:
    _reg().register(name, calendar, overwrite=overwrite)

def calendar_info(calendar: CalendarRef) -> Dict[str, Any]:
    cal = _cal(calendar)
    s = cal.shape()
    return {
        "name": cal.name(),
        "min_year": s.min_year,
        "max_year": s.max_year,
        "months": list(s.month_names),
        "weekdays": [w.fullname for w in s.weekday_names],
        "starting_weekday": cal.starting_weekday_index(),
        "common_year_length": s.common_year_length,
        "leap_year_length": s.leap_year_length,
    }

# ============================================================
# Conversions
# ============================================================

def to_canonical(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    *,
    calendar: CalendarRef = "gregorian",
    timezone: Optional[TimezoneSpec] = USER_TIMEZONE,
    resolver: Optional[TimezoneResolver] = None,
) -> int:
    return _cal(calendar).to_canonical(
        year, month, day, hour, minute, second, timezone=timezone, resolver=resolver
    )

def date_info(
    instant: int,
    *,
    calendar: CalendarRef = "gregorian",
    timezone: Optional[TimezoneSpec] = USER_TIMEZONE,
    resolver: Optional[TimezoneResolver] = None,
) -> DateComponents:
    return _cal(calendar).from_canonical(instant, timezone, resolver=resolver)

def format_date(
    instant: int,
    pattern: str,
    *,
    calendar: CalendarRef = "gregorian",
    timezone: Optional[TimezoneSpec] = USER_TIMEZONE,
    trim_leading_zero_day: bool = True,
    trim_leading_zero_hour: bool = True,
    resolver: Optional[TimezoneResolver] = None,
) -> str:
    return _cal(calendar).format(
        instant,
        pattern,
        timezone,
        trim_leading_zero_day,
        trim_leading_zero_hour,
        resolver=resolver,
    )

def convert(year: int, month: int, day: int, *, source: CalendarRef, target: CalendarRef) -> CalendarDate:
    """Same civil day, relabelled from one calendar to another."""
    src = _cal(source)
    dst = _cal(target)
    src.validate(year, month, day)
    jdn = src.to_jdn(year, month, day)
    y, m, d = dst.from_jdn(jdn)
    return CalendarDate(dst.name(), y, m, d)
