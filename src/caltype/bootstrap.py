from __future__ import annotations
from caltype.core.engine import CalendarRegistry
from caltype.calendars.menu import standard_calendars

def build_registry() -> CalendarRegistry:
    return CalendarRegistry(standard_calendars())
