"""
Validation of a single time entry's date and start/end times.

The same validate_time_range() call backs both the pre-submission check
endpoint and the create endpoint, so a range accepted by one is accepted
by the other.
"""

import re
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from .durations import duration_minutes

TIME_PATTERN = re.compile(r"^([01][0-9]|2[0-3]):[0-5][0-9]$")
DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class RejectionReason(str, Enum):
    MISSING_FIELD = "missing_field"
    INVALID_TIME_FORMAT = "invalid_time_format"
    END_NOT_AFTER_START = "end_not_after_start"
    INVALID_DATE_FORMAT = "invalid_date_format"


REJECTION_MESSAGES = {
    RejectionReason.MISSING_FIELD: "All fields are required",
    RejectionReason.INVALID_TIME_FORMAT: "Invalid time format. Use HH:MM format.",
    RejectionReason.END_NOT_AFTER_START: "End time must be after start time",
    RejectionReason.INVALID_DATE_FORMAT: "Invalid date format. Use YYYY-MM-DD format.",
}


class TimeRangeError(ValueError):
    """Raised when a date/start/end triple cannot be accepted."""

    def __init__(self, reason: RejectionReason):
        self.reason = reason
        self.message = REJECTION_MESSAGES[reason]
        super().__init__(self.message)


@dataclass(frozen=True)
class TimeRange:
    date: date
    start: str
    end: str

    @property
    def duration_minutes(self) -> int:
        return duration_minutes(self.start, self.end)


def normalize_time_input(value: str) -> str:
    """
    Accept "0900" as shorthand for "09:00".

    Non-digits are stripped; when exactly four digits remain they are
    reformatted as HH:MM. Anything else is returned untouched so the format
    check can reject it.
    """
    digits = re.sub(r"\D", "", value)
    if len(digits) == 4:
        return f"{digits[:2]}:{digits[2:]}"
    return value


def is_valid_time(value: str) -> bool:
    return bool(TIME_PATTERN.match(value))


def parse_entry_date(value: str) -> Optional[date]:
    if not DATE_PATTERN.match(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def validate_time_range(
    entry_date: Optional[str],
    start_time: Optional[str],
    end_time: Optional[str],
) -> TimeRange:
    """
    Validate and normalize a time entry's date and times.

    Args:
        entry_date: Date string in YYYY-MM-DD form
        start_time: Start time, HH:MM or four digits
        end_time: End time, HH:MM or four digits

    Returns:
        TimeRange with the parsed date and HH:MM start/end

    Raises:
        TimeRangeError: with the reason the input was rejected
    """
    if not entry_date or not start_time or not end_time:
        raise TimeRangeError(RejectionReason.MISSING_FIELD)

    start = normalize_time_input(start_time.strip())
    end = normalize_time_input(end_time.strip())

    if not is_valid_time(start) or not is_valid_time(end):
        raise TimeRangeError(RejectionReason.INVALID_TIME_FORMAT)

    # No overnight spans: end must land later on the same day
    if duration_minutes(start, end) <= 0:
        raise TimeRangeError(RejectionReason.END_NOT_AFTER_START)

    parsed_date = parse_entry_date(entry_date.strip())
    if parsed_date is None:
        raise TimeRangeError(RejectionReason.INVALID_DATE_FORMAT)

    return TimeRange(date=parsed_date, start=start, end=end)
