from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import date

from ..services.durations import duration_minutes, format_duration, format_time


class TimeRangeRequest(BaseModel):
    """Raw user input; fields stay optional so a missing value is reported as such"""
    date: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None


class TimeEntryCreate(TimeRangeRequest):
    project_id: Optional[int] = None


class TimeRangeResponse(BaseModel):
    """Normalized date/start/end accepted by the validator"""
    date: date
    start_time: str = Field(description="HH:MM")
    end_time: str = Field(description="HH:MM")
    duration_minutes: int
    duration_display: str


class TimeEntryResponse(BaseModel):
    id: int
    user_id: int
    project_id: int
    date: date
    start_time: str
    end_time: str
    duration_minutes: int
    duration_display: str
    project_name: Optional[str] = None
    client_name: Optional[str] = None

    @classmethod
    def from_entry(cls, entry) -> "TimeEntryResponse":
        """Build from a TimeEntry row, denormalizing project and client names"""
        minutes = duration_minutes(entry.start_time, entry.end_time)
        project = entry.project
        client = project.client if project is not None else None
        return cls(
            id=entry.id,
            user_id=entry.user_id,
            project_id=entry.project_id,
            date=entry.date,
            start_time=format_time(entry.start_time),
            end_time=format_time(entry.end_time),
            duration_minutes=minutes,
            duration_display=format_duration(minutes),
            project_name=project.name if project is not None else None,
            client_name=client.name if client is not None else None,
        )


class CalendarDay(BaseModel):
    date: date
    weekday: str
    is_today: bool
    total_minutes: int
    total_display: str
    entries: List[TimeEntryResponse]


class CalendarMonth(BaseModel):
    """Day records for one month; future days of the current month are omitted"""
    year: int
    month: int
    month_name: str
    clamped: bool = Field(description="True if a future month was requested and redirected to the current one")
    total_minutes: int
    total_display: str
    days: List[CalendarDay]
