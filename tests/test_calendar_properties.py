# tests/test_calendar_properties.py
#
# Properties every registered calendar type must satisfy.

import random

import pytest

import caltype
from caltype import InvalidDate

CALENDARS = caltype.list_calendars()


def _random_date(cal, rng):
    y = rng.randint(cal.min_year(), cal.max_year())
    m = rng.randint(1, cal.months_in_year(y))
    d = rng.randint(1, cal.days_in_month(y, m))
    return y, m, d, rng.randint(0, 23), rng.randint(0, 59)

def _next_day(cal, y, m, d):
    if d < cal.days_in_month(y, m):
        return y, m, d + 1
    y, m = cal.next_month(y, m)
    return y, m, 1


@pytest.fixture(params=CALENDARS)
def cal(request):
    return caltype.resolve(request.param)


def test_registry_has_standard_calendars():
    assert "gregorian" in CALENDARS
    assert "hijri" in CALENDARS

def test_round_trip(cal):
    rng = random.Random(42)
    for _ in range(500):
        t = _random_date(cal, rng)
        ts = cal.to_canonical(*t, timezone=0)
        c = cal.from_canonical(ts, 0)
        assert (c.year, c.month, c.day, c.hour, c.minute) == t
        assert c.second == 0
        assert c.calendar == cal.name()
        assert c.weekday == cal.weekday_index(*t[:3])
        assert c.yday == cal.day_of_year(*t[:3])

def test_round_trip_with_offsets(cal):
    rng = random.Random(7)
    for _ in range(200):
        t = _random_date(cal, rng)
        tz = rng.choice([-12, -3.5, 0, 5.5, 5.75, 9, 14])
        c = cal.from_canonical(cal.to_canonical(*t, timezone=tz), tz)
        assert (c.year, c.month, c.day, c.hour, c.minute) == t

def test_gregorian_round_trip(cal):
    rng = random.Random(42)
    for _ in range(500):
        y, m, d, hh, mi = _random_date(cal, rng)
        g = cal.convert_to_gregorian(y, m, d, hh, mi)
        assert g.calendar == "gregorian"
        back = cal.convert_from_gregorian(g.year, g.month, g.day, g.hour, g.minute)
        assert (back.year, back.month, back.day, back.hour, back.minute) == (y, m, d, hh, mi)

def test_monotonic(cal):
    rng = random.Random(42)
    dates = sorted(_random_date(cal, rng) for _ in range(300))
    stamps = [cal.to_canonical(*t, timezone=0) for t in dates]
    for (a, b), (ta, tb) in zip(zip(dates, dates[1:]), zip(stamps, stamps[1:])):
        if a < b:
            assert ta < tb
        else:
            assert ta == tb

def test_consecutive_days_are_one_day_apart(cal):
    rng = random.Random(3)
    for _ in range(200):
        y, m, d, _, _ = _random_date(cal, rng)
        ny, nm, nd = _next_day(cal, y, m, d)
        assert cal.to_canonical(ny, nm, nd, timezone=0) - cal.to_canonical(y, m, d, timezone=0) == 86400

def test_weekday_cycle(cal):
    rng = random.Random(42)
    n = cal.weekdays_per_week()
    for _ in range(100):
        y, m, d, _, _ = _random_date(cal, rng)
        seen = []
        for _ in range(n):
            seen.append(cal.weekday_index(y, m, d))
            y, m, d = _next_day(cal, y, m, d)
        assert sorted(seen) == list(range(n))
        for a, b in zip(seen, seen[1:]):
            assert b == (a + 1) % n
        assert cal.weekday_index(y, m, d) == seen[0]

def test_month_navigation_closure(cal):
    for y in range(cal.min_year(), cal.min_year() + 40):
        for m in range(1, cal.months_in_year(y) + 1):
            assert cal.previous_month(*cal.next_month(y, m)) == (y, m)
            assert cal.next_month(*cal.previous_month(y, m)) == (y, m)
    assert cal.next_month(2000, cal.months_in_year(2000)) == (2001, 1)
    assert cal.previous_month(2000, 1) == (1999, cal.months_in_year(1999))

def test_day_counts(cal):
    for y in range(cal.min_year(), cal.min_year() + 40):
        total = 0
        for m in range(1, cal.months_in_year(y) + 1):
            dim = cal.days_in_month(y, m)
            assert 1 <= dim <= len(cal.all_possible_days())
            cal.to_canonical(y, m, dim, timezone=0)
            with pytest.raises(InvalidDate):
                cal.to_canonical(y, m, dim + 1, timezone=0)
            total += dim
        assert total == cal.days_in_year(y)
        assert cal.to_jdn(y + 1, 1, 1) - cal.to_jdn(y, 1, 1) == total

def test_shape_is_consistent(cal):
    s = cal.shape()
    assert len(cal.month_names()) == s.months_per_year
    assert len(cal.weekday_names()) == cal.weekdays_per_week()
    assert 0 <= cal.starting_weekday_index() < cal.weekdays_per_week()
    assert cal.min_year() <= cal.max_year()
    assert max(s.leap_month_lengths) == len(cal.all_possible_days())
    assert len(cal.ordered_weekdays()) == cal.weekdays_per_week()
    assert set(cal.ordered_weekdays()) == set(cal.weekday_names())

def test_first_column_matches_weekday(cal):
    n = cal.weekdays_per_week()
    y = cal.min_year() + 10
    for k in range(n):
        other = cal.with_starting_weekday(k)
        for m in range(1, other.months_in_year(y) + 1):
            col = other.first_column(y, m)
            assert 0 <= col < n
            assert other.ordered_weekdays()[col] == other.weekday_names()[other.weekday_index(y, m, 1)]

def test_instant_zero_is_1970_01_01(cal):
    c = cal.from_canonical(0, 0)
    g = cal.convert_to_gregorian(c.year, c.month, c.day)
    assert (g.year, g.month, g.day) == (1970, 1, 1)
