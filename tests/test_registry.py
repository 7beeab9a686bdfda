# tests/test_registry.py

import pytest

import caltype
from caltype import (
    CalendarRegistry,
    CalendarShape,
    ConfigurationError,
    GregorianCalendar,
    HijriCalendar,
    Settings,
    TabularHijriParams,
    UnsupportedCalendarIdentifier,
)
from caltype.api import set_registry
from caltype.bootstrap import build_registry
from caltype.calendars.menu import make_calendar


@pytest.fixture
def fresh_registry():
    reg = build_registry()
    set_registry(reg)
    yield reg
    set_registry(build_registry())


def test_list_calendars():
    assert caltype.list_calendars() == ["gregorian", "hijri"]

def test_resolve():
    assert isinstance(caltype.resolve("gregorian"), GregorianCalendar)
    assert isinstance(caltype.resolve("hijri"), HijriCalendar)

@pytest.mark.parametrize("name", ["julian", "", "Gregorian"])
def test_unknown_identifier(name):
    with pytest.raises(UnsupportedCalendarIdentifier):
        caltype.resolve(name)
    with pytest.raises(LookupError):
        caltype.to_canonical(2024, 1, 1, calendar=name)
    with pytest.raises(UnsupportedCalendarIdentifier):
        make_calendar(name)

def test_register_calendar(fresh_registry):
    umm = HijriCalendar(TabularHijriParams(leap_shift=15))
    caltype.register_calendar("hijri15", umm)
    assert "hijri15" in caltype.list_calendars()
    assert caltype.resolve("hijri15") is umm

    with pytest.raises(KeyError):
        caltype.register_calendar("hijri15", HijriCalendar())
    caltype.register_calendar("hijri15", HijriCalendar(), overwrite=True)
    assert caltype.resolve("hijri15") == HijriCalendar()

def test_private_registry():
    reg = CalendarRegistry({})
    assert reg.list() == []
    reg.register("g", GregorianCalendar())
    assert reg.get("g").name() == "gregorian"
    with pytest.raises(UnsupportedCalendarIdentifier):
        reg.get("gregorian")

def test_calendar_info():
    info = caltype.calendar_info("hijri")
    assert info["name"] == "hijri"
    assert info["common_year_length"] == 354
    assert info["leap_year_length"] == 355
    assert info["months"][0] == "Muharram"
    assert len(info["weekdays"]) == 7
    assert info["starting_weekday"] == 6
    assert caltype.calendar_info(GregorianCalendar(starting_weekday=0))["starting_weekday"] == 0

def test_date_info():
    c = caltype.date_info(1689724800, calendar="hijri", timezone=0)
    assert c.as_tuple() == (1445, 1, 1, 0, 0, 0)
    assert caltype.to_canonical(1445, 1, 1, calendar="hijri", timezone=0) == 1689724800

def test_starting_weekday():
    g = GregorianCalendar()
    s = g.with_starting_weekday(0)
    assert s.starting_weekday_index() == 0
    assert g.starting_weekday_index() == 1
    assert s != g
    assert s == GregorianCalendar(starting_weekday=0)
    assert hash(s) == hash(GregorianCalendar(starting_weekday=0))
    with pytest.raises(ValueError):
        g.with_starting_weekday(7)
    with pytest.raises(ValueError):
        GregorianCalendar(starting_weekday=-1)

def _shape(**kw):
    base = dict(
        name="tiny",
        min_year=1,
        max_year=10,
        weekdays_per_week=2,
        starting_weekday=0,
        month_names=("A", "B"),
        weekday_names=(caltype.WeekdayName("X", "Xday"), caltype.WeekdayName("Y", "Yday")),
        common_month_lengths=(3, 3),
        leap_month_lengths=(3, 4),
        common_year_length=6,
        leap_year_length=7,
    )
    base.update(kw)
    return CalendarShape(**base)

def test_shape_validation():
    s = _shape()
    assert s.months_per_year == 2
    assert s.max_days_in_month == 4
    with pytest.raises(ValueError):
        _shape(common_year_length=7)
    with pytest.raises(ValueError):
        _shape(leap_month_lengths=(3, 4, 1))
    with pytest.raises(ValueError):
        _shape(starting_weekday=2)
    with pytest.raises(ValueError):
        _shape(min_year=11)
    with pytest.raises(ValueError):
        _shape(weekday_names=(caltype.WeekdayName("X", "Xday"),))


# ------------------------------------------------------------
# Settings
# ------------------------------------------------------------

SETTINGS_ENV = ("CALENDAR", "TIMEZONE", "USER_TIMEZONE", "STARTING_WEEKDAY", "STEP", "STRICT_TIMEZONES")


@pytest.fixture
def env(monkeypatch):
    for key in SETTINGS_ENV:
        monkeypatch.delenv(f"CALTYPE_{key}", raising=False)
    return monkeypatch


def test_settings_defaults(env):
    s = Settings.from_env()
    assert s == Settings()
    assert s.calendar == "gregorian"
    assert s.timezone == caltype.USER_TIMEZONE
    assert s.user_timezone == "UTC"
    assert s.step == 5
    assert isinstance(s.calendar_type(), GregorianCalendar)

def test_settings_from_env(env):
    env.setenv("CALTYPE_CALENDAR", " hijri ")
    env.setenv("CALTYPE_TIMEZONE", "5.5")
    env.setenv("CALTYPE_USER_TIMEZONE", "Asia/Riyadh")
    env.setenv("CALTYPE_STARTING_WEEKDAY", "0")
    env.setenv("CALTYPE_STEP", "15")
    env.setenv("CALTYPE_STRICT_TIMEZONES", "yes")
    s = Settings.from_env()
    assert s.calendar == "hijri"
    assert s.timezone == 5.5
    assert s.user_timezone == "Asia/Riyadh"
    assert s.step == 15
    assert s.strict_timezones is True

    cal = s.calendar_type()
    assert isinstance(cal, HijriCalendar)
    assert cal.starting_weekday_index() == 0

    r = s.resolver()
    assert r.strict
    assert r.user_zone == "Asia/Riyadh"
    assert r.offset_at(caltype.USER_TIMEZONE, 0) == 3 * 3600

@pytest.mark.parametrize("key, value", [
    ("STEP", "five"),
    ("STEP", "90"),
    ("STEP", "0"),
    ("STARTING_WEEKDAY", "-1"),
    ("STARTING_WEEKDAY", "monday"),
    ("STRICT_TIMEZONES", "maybe"),
])
def test_malformed_env_value(env, key, value):
    env.setenv(f"CALTYPE_{key}", value)
    with pytest.raises(ConfigurationError, match=f"CALTYPE_{key}"):
        Settings.from_env()

def test_starting_weekday_beyond_week(env):
    env.setenv("CALTYPE_STARTING_WEEKDAY", "9")
    s = Settings.from_env()
    with pytest.raises(ConfigurationError):
        s.calendar_type()

def test_settings_validation(env):
    with pytest.raises(ValueError):
        Settings(step=0)
    with pytest.raises(ConfigurationError):
        Settings().tweak(step=61)
    with pytest.raises(UnsupportedCalendarIdentifier):
        Settings(calendar="julian").calendar_type()

def test_settings_are_frozen(env):
    s = Settings()
    with pytest.raises(ValueError):
        s.step = 10

def test_settings_tweak_and_private_registry(env):
    s = Settings().tweak(calendar="g", starting_weekday=3)
    reg = CalendarRegistry({"g": GregorianCalendar()})
    cal = s.calendar_type(reg)
    assert cal.starting_weekday_index() == 3
    assert reg.get("g").starting_weekday_index() == 1
