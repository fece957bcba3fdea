"""Rendering of durations as text."""

from calendar_duration.duration import CalendarDuration


def _segment(value: int, label: str) -> str:
    suffix = "s" if value > 1 else ""
    return f"{value} {label}{suffix}"


def format_duration(duration: CalendarDuration) -> str:
    """
    Describe the magnitudes of a duration in English.

    The sign is not rendered. Examples:
        "10 seconds"
        "40 minutes and 1 second"
        "1 hour, 20 minutes and 41 seconds"
    """
    segments = [_segment(value, unit.label) for unit, value in duration.magnitudes() if value > 0]
    if len(segments) >= 3:
        return f"{', '.join(segments[:-1])} and {segments[-1]}"
    return " and ".join(segments)


def format_compact(duration: CalendarDuration) -> str:
    """Render a duration in the compact syntax, e.g. '-1y2mon3d'."""
    body = "".join(f"{value}{unit.value}" for unit, value in duration.magnitudes() if value > 0)
    if body and duration.negative:
        return f"-{body}"
    return body
