"""Units of a calendar duration."""

from enum import Enum

U16_MAX = 2**16 - 1
U8_MAX = 2**8 - 1
U32_MAX = 2**32 - 1


class Unit(str, Enum):
    """A duration unit, valued by its token in the compact syntax."""

    YEARS = "y"
    MONTHS = "mon"
    WEEKS = "w"
    DAYS = "d"
    HOURS = "h"
    MINUTES = "m"
    SECONDS = "s"

    @classmethod
    def from_token(cls, token: str) -> "Unit | None":
        """Look up a unit by its exact (case-sensitive) token."""
        try:
            return cls(token)
        except ValueError:
            return None

    @property
    def field(self) -> str:
        """Attribute name on CalendarDuration."""
        return self.name.lower()

    @property
    def label(self) -> str:
        """English singular name."""
        return self.field[:-1]

    @property
    def limit(self) -> int:
        """Largest magnitude accepted when parsing."""
        if self is Unit.YEARS:
            return U16_MAX
        if self is Unit.MONTHS:
            return U8_MAX
        return U32_MAX

    @property
    def is_fixed(self) -> bool:
        """Whether the unit has a constant length (weeks and shorter)."""
        return self not in (Unit.YEARS, Unit.MONTHS)
