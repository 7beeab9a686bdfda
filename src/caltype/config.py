"""
caltype.config
--------------
Explicit configuration for code that needs "the" calendar or "the" user zone.

Nothing in caltype reads this behind the caller's back: build a Settings once
(typically Settings.from_env() at startup), then pass the calendar and the
resolver it produces to the call sites that need them.

Environment variables (all optional):

    CALTYPE_CALENDAR           registered calendar name
    CALTYPE_TIMEZONE           zone used when a caller does not name one
    CALTYPE_USER_TIMEZONE      what the user-zone sentinel (99) stands for
    CALTYPE_STARTING_WEEKDAY   first weekday column, index into weekday names
    CALTYPE_STEP               selector minute step, 1..60
    CALTYPE_STRICT_TIMEZONES   reject wall-clock times in DST gaps and folds
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.engine import CalendarRegistry, CalendarType
from .core.errors import ConfigurationError
from .core.timezone import USER_TIMEZONE, TimezoneResolver, TimezoneSpec

ENV_PREFIX = "CALTYPE_"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    calendar: str = "gregorian"
    timezone: TimezoneSpec = USER_TIMEZONE
    user_timezone: TimezoneSpec = "UTC"
    starting_weekday: Optional[int] = Field(default=None, ge=0)  # None keeps the calendar's own default
    step: int = Field(default=5, ge=1, le=60)
    strict_timezones: bool = False

    @field_validator("calendar", mode="before")
    @classmethod
    def _strip_calendar(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v

    @field_validator("timezone", "user_timezone", mode="before")
    @classmethod
    def _zone(cls, v: Any) -> Any:
        return parse_zone(v) if isinstance(v, str) else v

    @classmethod
    def from_env(cls) -> "Settings":
        """Settings from the CALTYPE_* environment; bad values raise ConfigurationError."""
        try:
            return cls()
        except ValidationError as e:
            raise ConfigurationError(_describe(e)) from e

    def tweak(self, **kwargs) -> "Settings":
        try:
            return type(self)(**{**self.model_dump(), **kwargs})
        except ValidationError as e:
            raise ConfigurationError(_describe(e)) from e

    def resolver(self) -> TimezoneResolver:
        return TimezoneResolver(self.user_timezone, strict=self.strict_timezones)

    def calendar_type(self, registry: Optional[CalendarRegistry] = None) -> CalendarType:
        if registry is None:
            from .api import resolve
            cal = resolve(self.calendar)
        else:
            cal = registry.get(self.calendar)
        if self.starting_weekday is not None and self.starting_weekday != cal.starting_weekday_index():
            try:
                cal = cal.with_starting_weekday(self.starting_weekday)
            except ValueError as e:
                raise ConfigurationError(f"{ENV_PREFIX}STARTING_WEEKDAY: {e}") from e
        return cal


def parse_zone(raw: str) -> TimezoneSpec:
    """Numeric strings become offsets in hours; anything else is a zone name."""
    s = raw.strip()
    try:
        return float(s)
    except ValueError:
        return s

def _describe(e: ValidationError) -> str:
    parts = []
    for err in e.errors():
        field = ".".join(str(x) for x in err["loc"])
        parts.append(f"{ENV_PREFIX}{field.upper()}: {err['msg']}")
    return "Invalid settings: " + "; ".join(parts)
