"""Calendar-aware durations: parse '1y3mon4d', describe them, add them to datetimes."""

from calendar_duration.calculator import add_duration, add_months, add_years, subtract_duration
from calendar_duration.duration import CalendarDuration
from calendar_duration.formatter import format_compact, format_duration
from calendar_duration.models import Unit
from calendar_duration.parser import ParseResult, parse_duration, parse_with_diagnostics

__all__ = [
    "CalendarDuration",
    "ParseResult",
    "Unit",
    "add_duration",
    "add_months",
    "add_years",
    "format_compact",
    "format_duration",
    "parse_duration",
    "parse_with_diagnostics",
    "subtract_duration",
]
