"""
caltype.core.timezone
---------------------
Resolution of a timezone spec to a UTC offset.

A spec is either a fixed offset in hours (int, float or numeric string, with
fractional half/quarter hours), a named IANA zone, or the USER_TIMEZONE
sentinel, which stands for whatever zone the resolver was configured with for
the current user. Named zones carry DST; fixed offsets never do.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import AmbiguousOrMissingTimezone

logger = logging.getLogger(__name__)

TimezoneSpec = Union[int, float, str]

USER_TIMEZONE = 99
MAX_OFFSET_HOURS = 14

_EPOCH_UTC = datetime(1970, 1, 1, tzinfo=timezone.utc)
_EPOCH_NAIVE = datetime(1970, 1, 1)


def fixed_offset_seconds(hours: float) -> int:
    if not math.isfinite(hours) or abs(hours) > MAX_OFFSET_HOURS:
        raise AmbiguousOrMissingTimezone(f"Fixed offset must be within +/-{MAX_OFFSET_HOURS} hours, got {hours!r}")
    return int(round(hours * 3600))


class TimezoneResolver:
    """
    Turns a TimezoneSpec into the signed UTC offset (seconds) in force at a
    given instant or wall-clock time.

    user_zone is what USER_TIMEZONE resolves to. With strict=True, wall-clock
    times inside a DST gap or fold raise instead of taking the pre-transition
    offset.
    """
    def __init__(self, user_zone: TimezoneSpec = 0, *, strict: bool = False):
        if _is_user_sentinel(user_zone):
            raise AmbiguousOrMissingTimezone("user_zone cannot itself be the user-zone sentinel")
        self.user_zone = user_zone
        self.strict = strict
        self._zones: Dict[str, ZoneInfo] = {}

    def __repr__(self) -> str:
        return f"TimezoneResolver(user_zone={self.user_zone!r}, strict={self.strict})"

    # ---------------------------------------------------------
    # Spec normalization
    # ---------------------------------------------------------

    def normalize(self, tz: Optional[TimezoneSpec]) -> Union[int, ZoneInfo]:
        """Fixed offset in seconds, or a ZoneInfo for named zones."""
        if tz is None or _is_user_sentinel(tz):
            tz = self.user_zone
        if isinstance(tz, bool):
            raise AmbiguousOrMissingTimezone(f"Unsupported timezone spec {tz!r}")
        if isinstance(tz, (int, float)):
            return fixed_offset_seconds(tz)
        if isinstance(tz, str):
            key = tz.strip()
            hours = _parse_hours(key)
            if hours is not None:
                return fixed_offset_seconds(hours)
            return self._zone(key)
        raise AmbiguousOrMissingTimezone(f"Unsupported timezone spec {tz!r}")

    def _zone(self, key: str) -> ZoneInfo:
        z = self._zones.get(key)
        if z is None:
            try:
                z = ZoneInfo(key)
            except (ZoneInfoNotFoundError, ValueError, OSError) as e:
                raise AmbiguousOrMissingTimezone(f"Unknown timezone '{key}'") from e
            logger.debug("Loaded timezone %s", key)
            self._zones[key] = z
        return z

    # ---------------------------------------------------------
    # Offsets
    # ---------------------------------------------------------

    def offset_at(self, tz: Optional[TimezoneSpec], instant: int) -> int:
        """UTC offset (seconds) in force at a canonical instant."""
        z = self.normalize(tz)
        if isinstance(z, int):
            return z
        try:
            local = (_EPOCH_UTC + timedelta(seconds=instant)).astimezone(z)
        except OverflowError as e:
            raise AmbiguousOrMissingTimezone(f"Timezone '{z.key}' cannot be resolved at instant {instant}") from e
        return int(local.utcoffset().total_seconds())

    def offset_for_local(self, tz: Optional[TimezoneSpec], local: int) -> int:
        """UTC offset (seconds) for a wall-clock time given as seconds since the local epoch."""
        z = self.normalize(tz)
        if isinstance(z, int):
            return z
        try:
            naive = _EPOCH_NAIVE + timedelta(seconds=local)
        except OverflowError as e:
            raise AmbiguousOrMissingTimezone(f"Timezone '{z.key}' cannot be resolved at local time {local}") from e

        first = naive.replace(tzinfo=z, fold=0)
        off = first.utcoffset()
        if self.strict and off != naive.replace(tzinfo=z, fold=1).utcoffset():
            back = first.astimezone(timezone.utc).astimezone(z).replace(tzinfo=None)
            what = "does not exist" if back != naive else "is ambiguous"
            raise AmbiguousOrMissingTimezone(f"Local time {naive.isoformat()} {what} in '{z.key}'")
        return int(off.total_seconds())


def _is_user_sentinel(tz: object) -> bool:
    if isinstance(tz, bool):
        return False
    if isinstance(tz, (int, float)):
        return tz == USER_TIMEZONE
    if isinstance(tz, str):
        return _parse_hours(tz.strip()) == USER_TIMEZONE
    return False

def _parse_hours(s: str) -> Optional[float]:
    try:
        return float(s)
    except ValueError:
        return None
