from __future__ import annotations
from typing import Tuple

SECONDS_PER_DAY = 86400

# JDN of 1970-01-01, the day canonical instants count from.
UNIX_EPOCH_JDN = 2440588


def gregorian_to_jdn(y: int, m: int, day: int) -> int:
    """Proleptic Gregorian date -> Julian Day Number (Fliegel-Van Flandern)."""
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045

def jdn_to_gregorian(jdn: int) -> Tuple[int, int, int]:
    """Inverse of gregorian_to_jdn. Not bounded to datetime.date's year range."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day

def gregorian_is_leap(y: int) -> bool:
    return y % 4 == 0 and (y % 100 != 0 or y % 400 == 0)


# ============================================================
# JDN + seconds-of-day <-> canonical instant
# ============================================================

def local_seconds(jdn: int, hour: int = 0, minute: int = 0, second: int = 0) -> int:
    """Wall-clock seconds since the epoch for a civil day and time of day (no zone applied)."""
    return (jdn - UNIX_EPOCH_JDN) * SECONDS_PER_DAY + hour * 3600 + minute * 60 + second

def split_local_seconds(t: int) -> Tuple[int, int, int, int]:
    """Wall-clock seconds -> (jdn, hour, minute, second). Floor semantics for t < 0."""
    days, rem = divmod(t, SECONDS_PER_DAY)
    hour, rem = divmod(rem, 3600)
    minute, second = divmod(rem, 60)
    return UNIX_EPOCH_JDN + days, hour, minute, second
