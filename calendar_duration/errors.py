"""Custom exceptions."""


class CalendarDurationError(Exception):
    """Base exception for calendar_duration."""


class InvalidMagnitudeError(CalendarDurationError, ValueError):
    """Raised when a duration field is given a negative or non-integer magnitude."""


class CalendarInvariantError(CalendarDurationError, AssertionError):
    """Raised when day clamping cannot produce a valid date (a bug, never user error)."""


class DateRangeError(CalendarDurationError, OverflowError):
    """Raised when a result falls outside the supported date range."""


class InvalidTimezoneError(CalendarDurationError):
    """Raised when a configured timezone name is unknown."""
