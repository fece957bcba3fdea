"""
Calendar arithmetic for CalendarDuration.

Years and months are applied first, by replacing date components and clamping
the day to the end of the target month (Jan 31 + 1 month -> Feb 28/29, never
March). Weeks and shorter units are then added as plain timedeltas.

Clamping makes add-then-subtract lossy: Jan 31 + 1 month - 1 month is Jan 28
(or 29), not Jan 31. That is how calendar months work and is not corrected.
"""

import logging
from calendar import monthrange
from datetime import MAXYEAR, MINYEAR, datetime, timedelta

from calendar_duration.duration import CalendarDuration
from calendar_duration.errors import CalendarInvariantError, DateRangeError
from calendar_duration.models import Unit

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12
SUB_DAY_UNITS = (Unit.HOURS, Unit.MINUTES, Unit.SECONDS)


def _replace_clamped(moment: datetime, year: int, month: int) -> datetime:
    """Move ``moment`` to year/month, keeping the day or the last valid one."""
    if not MINYEAR <= year <= MAXYEAR:
        msg = f"year {year} is outside {MINYEAR}..{MAXYEAR}"
        raise DateRangeError(msg)

    _, days_in_month = monthrange(year, month)
    day = min(moment.day, days_in_month)
    if day != moment.day:
        logger.debug(
            "Clamped day %d to %d for %04d-%02d", moment.day, day, year, month
        )

    try:
        return moment.replace(year=year, month=month, day=day)
    except ValueError as exc:
        # day is within monthrange, so this is a bug
        msg = f"cannot move {moment.isoformat()} to {year:04d}-{month:02d}-{day:02d}"
        raise CalendarInvariantError(msg) from exc


def add_years(moment: datetime, years: int) -> datetime:
    """Add a signed number of years; Feb 29 becomes Feb 28 in non-leap years."""
    return _replace_clamped(moment, moment.year + years, moment.month)


def add_months(moment: datetime, months: int) -> datetime:
    """Add a signed number of months, carrying whole years first."""
    # floor division: Jan - 12 months is one year back, not two
    years_delta, _ = divmod(moment.month - 1 + months, MONTHS_PER_YEAR)
    if years_delta:
        moment = add_years(moment, years_delta)

    target_month = (moment.month - 1 + months) % MONTHS_PER_YEAR + 1
    return _replace_clamped(moment, moment.year, target_month)


def add_fixed(moment: datetime, unit: Unit, count: int) -> datetime:
    """Add a signed count of a fixed-length unit (weeks or shorter)."""
    if not unit.is_fixed:
        msg = f"{unit.field} is not a fixed-length unit"
        raise ValueError(msg)
    if not isinstance(moment, datetime) and unit in SUB_DAY_UNITS:
        msg = f"cannot add {unit.field} to a date; use a datetime"
        raise TypeError(msg)
    try:
        return moment + timedelta(**{unit.field: count})
    except OverflowError as exc:
        msg = f"adding {count} {unit.field} to {moment.isoformat()} is out of range"
        raise DateRangeError(msg) from exc


def add_duration(moment: datetime, duration: CalendarDuration) -> datetime:
    """
    Add a duration to a date or datetime.

    Plain dates only take years, months, weeks and days; hours, minutes or
    seconds raise TypeError.

    Units are applied in a fixed order: years, months, then weeks, days,
    hours, minutes and seconds. Zero fields are skipped. The sign flag negates
    every field.
    """
    if duration.years:
        moment = add_years(moment, duration.signed(Unit.YEARS))
    if duration.months:
        moment = add_months(moment, duration.signed(Unit.MONTHS))
    for unit, value in duration.magnitudes():
        if unit.is_fixed and value:
            moment = add_fixed(moment, unit, duration.signed(unit))
    return moment


def subtract_duration(moment: datetime, duration: CalendarDuration) -> datetime:
    """Subtract a duration, i.e. add its negation."""
    return add_duration(moment, -duration)
