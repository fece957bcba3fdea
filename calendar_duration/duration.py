"""Calendar-aware duration value type."""

from collections.abc import Iterator
from dataclasses import dataclass, fields, replace
from datetime import date

from calendar_duration.errors import InvalidMagnitudeError
from calendar_duration.models import Unit


@dataclass(frozen=True)
class CalendarDuration:
    """
    A signed duration made of calendar units.

    All seven magnitudes are non-negative; the single ``negative`` flag applies
    to every one of them. Years and months are variable-length and resolved
    against the date they are added to.
    """

    negative: bool = False
    years: int = 0
    months: int = 0
    weeks: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    @classmethod
    def parse(cls, text: str) -> "CalendarDuration":
        """Parse a compact duration string like '-1y2mon3d'."""
        from calendar_duration.parser import parse_duration

        return parse_duration(text)

    def __post_init__(self) -> None:
        for f in fields(self):
            if f.name == "negative":
                continue
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int):
                msg = f"{f.name} must be an int, got {type(value).__name__}"
                raise InvalidMagnitudeError(msg)
            if value < 0:
                msg = f"{f.name} must be non-negative, got {value}; use negative=True instead"
                raise InvalidMagnitudeError(msg)

    def magnitudes(self) -> Iterator[tuple[Unit, int]]:
        """Yield each unit with its magnitude, largest unit first."""
        for unit in Unit:
            yield unit, getattr(self, unit.field)

    def signed(self, unit: Unit) -> int:
        """Magnitude of a unit with the sign applied."""
        value = getattr(self, unit.field)
        return -value if self.negative else value

    def is_zero(self) -> bool:
        """True if every magnitude is zero, whatever the sign."""
        return all(value == 0 for _, value in self.magnitudes())

    def compact(self) -> str:
        """Render in the compact syntax accepted by parse()."""
        from calendar_duration.formatter import format_compact

        return format_compact(self)

    def __str__(self) -> str:
        from calendar_duration.formatter import format_duration

        return format_duration(self)

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __neg__(self) -> "CalendarDuration":
        return replace(self, negative=not self.negative)

    def __add__(self, other: object):
        if not isinstance(other, date):
            return NotImplemented
        from calendar_duration.calculator import add_duration

        return add_duration(other, self)

    __radd__ = __add__

    def __rsub__(self, other: object):
        if not isinstance(other, date):
            return NotImplemented
        from calendar_duration.calculator import subtract_duration

        return subtract_duration(other, self)
