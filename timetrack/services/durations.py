"""
Duration arithmetic shared by validation, aggregation and display.

Every place that derives minutes from a start/end pair goes through
duration_minutes() so the validator and the calendar can never disagree.
"""

from datetime import time
from typing import Union

TimeLike = Union[str, time]


def time_to_minutes(value: TimeLike) -> int:
    """
    Convert a time of day to minutes since midnight.

    Accepts datetime.time values or "HH:MM" / "HH:MM:SS" strings; seconds
    are ignored.
    """
    if isinstance(value, time):
        return value.hour * 60 + value.minute

    hours, minutes = value.split(":")[:2]
    return int(hours) * 60 + int(minutes)


def duration_minutes(start: TimeLike, end: TimeLike) -> int:
    """Minutes between start and end; zero or negative when end is not after start."""
    return time_to_minutes(end) - time_to_minutes(start)


def format_time(value: TimeLike) -> str:
    """Render a time of day as HH:MM."""
    total = time_to_minutes(value)
    return f"{total // 60:02d}:{total % 60:02d}"


def format_duration(minutes: int) -> str:
    """
    Render a duration as "{h}h {m}m", dropping whichever part is zero.

    0 -> "0m", 45 -> "45m", 60 -> "1h", 90 -> "1h 30m"
    """
    if minutes == 0:
        return "0m"

    hours, mins = divmod(minutes, 60)
    if hours > 0 and mins > 0:
        return f"{hours}h {mins}m"
    if hours > 0:
        return f"{hours}h"
    return f"{mins}m"
