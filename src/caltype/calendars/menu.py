from __future__ import annotations
from typing import Callable, Dict

from ..core.engine import CalendarType
from ..core.errors import UnsupportedCalendarIdentifier
from .gregorian import GregorianCalendar
from .hijri import HijriCalendar

CalendarBuilder = Callable[[], CalendarType]

STANDARD_CALENDARS: Dict[str, CalendarBuilder] = {
    "gregorian": GregorianCalendar,
    "hijri": HijriCalendar,
}

def make_calendar(name: str) -> CalendarType:
    if name not in STANDARD_CALENDARS:
        raise UnsupportedCalendarIdentifier(f"Unknown standard calendar '{name}'. Available: {sorted(STANDARD_CALENDARS)}")
    return STANDARD_CALENDARS[name]()

def standard_calendars() -> Dict[str, CalendarType]:
    return {name: build() for name, build in STANDARD_CALENDARS.items()}
