"""Tests for calendar arithmetic."""

import logging
from datetime import UTC, date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from calendar_duration.calculator import (
    add_duration,
    add_fixed,
    add_months,
    add_years,
    subtract_duration,
)
from calendar_duration.duration import CalendarDuration
from calendar_duration.errors import CalendarInvariantError, DateRangeError
from calendar_duration.models import Unit
from calendar_duration.parser import parse_duration


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=UTC)


def test_basic_addition():
    """Test adding fixed and calendar units together."""
    base_time = utc(2021, 2, 1)

    duration = CalendarDuration(hours=1, minutes=20, seconds=5)
    assert base_time + duration == utc(2021, 2, 1, 1, 20, 5)

    duration = CalendarDuration(months=2, days=5, hours=5, seconds=51)
    assert base_time + duration == utc(2021, 4, 6, 5, 0, 51)

    duration = CalendarDuration(months=1, weeks=2, days=1, hours=1)
    assert base_time + duration == utc(2021, 3, 16, 1)

    duration = CalendarDuration(days=1, hours=1)
    assert base_time - duration == utc(2021, 1, 30, 23)
    assert base_time + -duration == utc(2021, 1, 30, 23)


def test_parsed_scenarios():
    """Test parsed strings applied to a timestamp."""
    base_time = utc(2021, 2, 1)
    assert add_duration(base_time, parse_duration("1h20m5s")) == utc(2021, 2, 1, 1, 20, 5)
    assert add_duration(base_time, parse_duration("2mon5d5h51s")) == utc(2021, 4, 6, 5, 0, 51)


def test_february_addition():
    """Test month-end and leap-day clamping."""
    time = utc(2020, 1, 31) + CalendarDuration(months=1)
    assert time == utc(2020, 2, 29)

    year = CalendarDuration(years=1)
    assert time + year == utc(2021, 2, 28)
    assert time - year == utc(2019, 2, 28)

    assert utc(2020, 2, 29) + CalendarDuration(months=12) == utc(2021, 2, 28)


def test_january_31_non_leap():
    """Test Jan 31 + 1 month lands on Feb 28 in a common year."""
    assert utc(2021, 1, 31) + CalendarDuration(months=1) == utc(2021, 2, 28)


def test_month_end_clamping_to_30():
    """Test clamping into 30-day months."""
    assert add_months(utc(2021, 3, 31), 1) == utc(2021, 4, 30)
    assert add_months(utc(2021, 5, 31), -1) == utc(2021, 4, 30)


def test_month_year_rollover():
    """Test month additions that cross year boundaries."""
    time = utc(2021, 12, 15, 11) + CalendarDuration(months=1)
    assert time == utc(2022, 1, 15, 11)
    assert time + CalendarDuration(negative=True, months=1) == utc(2021, 12, 15, 11)

    time = utc(2021, 11, 15, 11)
    assert time + CalendarDuration(months=2) == utc(2022, 1, 15, 11)

    duration = CalendarDuration(months=38)
    later = time + duration
    assert later == utc(2025, 1, 15, 11)
    assert later - duration == time

    assert time + CalendarDuration(negative=True, months=15) == utc(2020, 8, 15, 11)
    assert time + CalendarDuration(months=24) == utc(2023, 11, 15, 11)


@pytest.mark.parametrize(
    ("months", "expected"),
    [
        (-1, date(2020, 12, 1)),
        (-12, date(2020, 1, 1)),
        (-13, date(2019, 12, 1)),
        (-24, date(2019, 1, 1)),
        (11, date(2021, 12, 1)),
        (12, date(2022, 1, 1)),
    ],
)
def test_exact_year_multiples(months, expected):
    """Test year carry uses floor division at exact multiples of 12."""
    assert add_months(date(2021, 1, 1), months) == expected


def test_add_years():
    """Test plain year addition."""
    assert add_years(utc(2021, 6, 15), 3) == utc(2024, 6, 15)
    assert add_years(utc(2024, 2, 29), 4) == utc(2028, 2, 29)
    assert add_years(utc(2024, 2, 29), -1) == utc(2023, 2, 28)


def test_clamping_is_not_reversible():
    """Test add-then-subtract loses the day once it has been clamped."""
    month = CalendarDuration(months=1)
    assert utc(2021, 1, 31) + month - month == utc(2021, 1, 28)


def test_fixed_units_reversible():
    """Test fixed-unit deltas round-trip exactly."""
    base_time = utc(2021, 2, 1, 12, 30, 15)
    duration = parse_duration("2w3d4h5m6s")
    assert base_time + duration + -duration == base_time
    assert subtract_duration(add_duration(base_time, duration), duration) == base_time


def test_years_before_months():
    """Test years are applied before months."""
    # Feb 29 + 1y -> Feb 28, then + 1mon -> Mar 28
    assert utc(2020, 2, 29) + CalendarDuration(years=1, months=1) == utc(2021, 3, 28)


def test_zero_duration_is_identity():
    """Test the zero duration leaves the time unchanged."""
    base_time = utc(2021, 2, 1)
    assert base_time + CalendarDuration() == base_time
    assert base_time - CalendarDuration(negative=True) == base_time


def test_timezone_preserved():
    """Test the tzinfo is carried through."""
    tz = timezone(timedelta(hours=9))
    result = datetime(2021, 1, 31, 8, tzinfo=tz) + CalendarDuration(months=1, hours=2)
    assert result == datetime(2021, 2, 28, 10, tzinfo=tz)
    assert result.tzinfo is tz


def test_zoneinfo_wall_clock():
    """Test fixed units follow wall-clock arithmetic for zoneinfo datetimes."""
    tz = ZoneInfo("Europe/Paris")
    # DST starts 2021-03-28
    result = datetime(2021, 3, 27, 12, tzinfo=tz) + CalendarDuration(days=1)
    assert result.hour == 12
    assert result.day == 28


def test_add_fixed_rejects_calendar_units():
    """Test add_fixed only accepts fixed-length units."""
    with pytest.raises(ValueError):
        add_fixed(utc(2021, 1, 1), Unit.MONTHS, 1)


def test_out_of_range_years():
    """Test results beyond the supported years raise DateRangeError."""
    with pytest.raises(DateRangeError):
        utc(2021, 1, 1) + CalendarDuration(years=65535)
    with pytest.raises(DateRangeError):
        date(1, 1, 1) - CalendarDuration(months=1)


def test_out_of_range_fixed():
    """Test fixed-unit overflow raises DateRangeError."""
    with pytest.raises(DateRangeError):
        utc(9999, 12, 31) + CalendarDuration(days=1)
    with pytest.raises(OverflowError):
        utc(2021, 1, 1) + CalendarDuration(weeks=4294967295)


def test_clamping_is_logged(caplog):
    """Test clamped days are logged at debug level."""
    with caplog.at_level(logging.DEBUG, logger="calendar_duration"):
        add_months(utc(2021, 1, 31), 1)
    assert "Clamped day 31 to 28" in caplog.text


def test_date_calendar_and_day_units():
    """Test plain dates take years, months, weeks and days and round-trip."""
    day = date(2021, 2, 1)
    duration = CalendarDuration(weeks=1, days=2)
    assert day + duration == date(2021, 2, 10)
    assert day + duration - duration == day
    assert day - CalendarDuration(years=1, months=1) == date(2020, 1, 1)


@pytest.mark.parametrize("field", ["hours", "minutes", "seconds"])
def test_date_rejects_sub_day_units(field):
    """Test sub-day units cannot be applied to a plain date."""
    day = date(2021, 2, 1)
    with pytest.raises(TypeError):
        day + CalendarDuration(**{field: 5})
    with pytest.raises(TypeError):
        day - CalendarDuration(**{field: 5})


def test_invariant_guard(monkeypatch):
    """Test a clamp that still yields an invalid date raises CalendarInvariantError."""
    # pretend February always has 31 days
    monkeypatch.setattr(
        "calendar_duration.calculator.monthrange", lambda year, month: (0, 31)
    )
    with pytest.raises(CalendarInvariantError) as excinfo:
        add_months(datetime(2021, 1, 31), 1)
    assert isinstance(excinfo.value, AssertionError)
