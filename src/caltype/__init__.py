"""caltype public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_calendars,
    resolve,
    register_calendar,
    calendar_info,
    to_canonical,
    date_info,
    format_date,
    convert,
)
from .config import Settings
from .core.engine import CalendarType, CalendarRegistry
from .core.errors import (
    CaltypeError,
    ConfigurationError,
    InvalidDate,
    UnsupportedCalendarIdentifier,
    AmbiguousOrMissingTimezone,
)
from .core.timezone import USER_TIMEZONE, TimezoneResolver
from .core.types import CalendarDate, CalendarShape, DateComponents, WeekdayName
from .calendars.gregorian import GregorianCalendar
from .calendars.hijri import HijriCalendar, TabularHijriParams

__all__ = [
    "list_calendars",
    "resolve",
    "register_calendar",
    "calendar_info",
    "to_canonical",
    "date_info",
    "format_date",
    "convert",
    "Settings",
    "CalendarType",
    "CalendarRegistry",
    "CaltypeError",
    "ConfigurationError",
    "InvalidDate",
    "UnsupportedCalendarIdentifier",
    "AmbiguousOrMissingTimezone",
    "USER_TIMEZONE",
    "TimezoneResolver",
    "CalendarDate",
    "CalendarShape",
    "DateComponents",
    "WeekdayName",
    "GregorianCalendar",
    "HijriCalendar",
    "TabularHijriParams",
]
