"""
Monthly calendar aggregation: one Day per calendar date with its entries
and total tracked minutes.
"""

import calendar
import logging
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Iterable, List, Tuple

from .durations import duration_minutes, time_to_minutes

logger = logging.getLogger(__name__)


@dataclass
class Day:
    date: date
    entries: List[Any] = field(default_factory=list)
    total_minutes: int = 0


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def month_bounds(year: int, month: int) -> Tuple[date, date]:
    """First and last date of the month, both inclusive."""
    return date(year, month, 1), date(year, month, days_in_month(year, month))


def is_current_month(year: int, month: int, today: date) -> bool:
    return (year, month) == (today.year, today.month)


def is_future_month(year: int, month: int, today: date) -> bool:
    return (year, month) > (today.year, today.month)


def clamp_month(year: int, month: int, today: date) -> Tuple[int, int]:
    """Redirect any month after the current one back to the current month."""
    if is_future_month(year, month, today):
        logger.debug(f"Clamping requested month {year}-{month:02d} to {today.year}-{today.month:02d}")
        return today.year, today.month
    return year, month


def last_visible_day(year: int, month: int, today: date) -> int:
    """
    Last day of the month shown on the calendar.

    The current month stops at today; days that have not happened yet are
    left out rather than rendered empty. Past months show every day and
    future months show none.
    """
    if is_future_month(year, month, today):
        return 0
    if is_current_month(year, month, today):
        return today.day
    return days_in_month(year, month)


def build_month(year: int, month: int, entries: Iterable[Any], today: date) -> List[Day]:
    """
    Bucket time entries into Day records for the given month.

    Args:
        year: Calendar year
        month: Month number, 1-12
        entries: Objects exposing date, start_time and end_time; entries
            outside the month are ignored
        today: Reference date deciding which days are in the future

    Returns:
        Days in ascending date order, each with its entries sorted by start
        time and the sum of their durations
    """
    by_date: Dict[date, List[Any]] = defaultdict(list)
    for entry in entries:
        by_date[entry.date].append(entry)

    days = []
    for day_number in range(1, last_visible_day(year, month, today) + 1):
        day_date = date(year, month, day_number)
        day_entries = sorted(by_date.get(day_date, []), key=lambda e: time_to_minutes(e.start_time))
        total = sum(duration_minutes(e.start_time, e.end_time) for e in day_entries)
        days.append(Day(date=day_date, entries=day_entries, total_minutes=total))

    return days


def month_total(days: Iterable[Day]) -> int:
    return sum(day.total_minutes for day in days)
