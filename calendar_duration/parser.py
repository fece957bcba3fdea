"""
Parser for the compact duration syntax.

The syntax is a run of ``<digits><unit>`` pairs with an optional leading
``-``, e.g. ``1y3mon4d`` or ``-3w4m5s``. Units are ``y``, ``mon``, ``w``, ``d``,
``h``, ``m`` and ``s``.

Parsing is best-effort and never raises: unknown units are skipped and values
that are not plain integers (or do not fit their unit) become zero.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from calendar_duration.duration import CalendarDuration
from calendar_duration.models import Unit

logger = logging.getLogger(__name__)


class IgnoreReason(str, Enum):
    """Why a parsed pair did not set a field."""

    UNKNOWN_UNIT = "unknown-unit"
    INVALID_VALUE = "invalid-value"
    OUT_OF_RANGE = "out-of-range"


@dataclass(frozen=True)
class IgnoredToken:
    """A value/unit pair that was dropped or zeroed while parsing."""

    value: str
    unit: str
    reason: IgnoreReason


@dataclass(frozen=True)
class ParseResult:
    """A parsed duration together with the pairs that were ignored."""

    duration: CalendarDuration
    ignored: tuple[IgnoredToken, ...] = ()


def _commit(
    values: dict[str, int], ignored: list[IgnoredToken], value_str: str, unit_str: str
) -> None:
    """Store one value/unit pair into ``values``, recording anything ignored."""
    if not value_str and not unit_str:
        return

    unit = Unit.from_token(unit_str)
    if unit is None:
        ignored.append(IgnoredToken(value_str, unit_str, IgnoreReason.UNKNOWN_UNIT))
        return

    # int() would also accept non-ASCII digits; only plain 0-9 count
    if not (value_str.isascii() and value_str.isdigit()):
        ignored.append(IgnoredToken(value_str, unit_str, IgnoreReason.INVALID_VALUE))
        values[unit.field] = 0
        return

    value = int(value_str)
    if value > unit.limit:
        ignored.append(IgnoredToken(value_str, unit_str, IgnoreReason.OUT_OF_RANGE))
        value = 0
    values[unit.field] = value


def parse_with_diagnostics(text: str) -> ParseResult:
    """Parse a duration string and report which pairs were ignored."""
    values: dict[str, int] = {}
    ignored: list[IgnoredToken] = []
    negative = text.startswith("-")

    value_str = ""
    unit_str = ""
    for ch in text:
        if ch.isalpha():
            unit_str += ch
        elif ch.isnumeric():
            # A digit after a unit starts the next pair
            if unit_str:
                _commit(values, ignored, value_str, unit_str)
                value_str = ""
                unit_str = ""
            value_str += ch
    _commit(values, ignored, value_str, unit_str)

    for token in ignored:
        logger.debug(
            "Ignored duration token %r in %r (%s)",
            token.value + token.unit,
            text,
            token.reason.value,
        )

    return ParseResult(CalendarDuration(negative=negative, **values), tuple(ignored))


def parse_duration(text: str) -> CalendarDuration:
    """Parse a duration string like '3d2h10m' into a CalendarDuration."""
    return parse_with_diagnostics(text).duration
