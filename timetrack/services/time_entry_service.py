import calendar
import logging
from datetime import date, time
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from .. import models
from ..schemas import (
    TimeRangeRequest,
    TimeEntryCreate,
    TimeRangeResponse,
    TimeEntryResponse,
    CalendarDay,
    CalendarMonth
)
from .durations import format_duration
from .month_view import build_month, clamp_month, month_bounds, month_total
from .project_service import ProjectService
from .store_errors import is_unique_violation, store_error_detail
from .time_range import RejectionReason, REJECTION_MESSAGES, TimeRange, TimeRangeError, validate_time_range

logger = logging.getLogger(__name__)

DUPLICATE_ENTRY_MESSAGE = "A time entry with the same project, date, and times already exists"


class TimeEntryService:
    """Service for recording time entries and building the monthly calendar."""

    @staticmethod
    def validate_range(request: TimeRangeRequest) -> TimeRange:
        """
        Run the shared time range validator, translating rejections to 400s.

        Raises:
            HTTPException: 400 with the rejection message
        """
        try:
            return validate_time_range(request.date, request.start_time, request.end_time)
        except TimeRangeError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=e.message
            )

    @staticmethod
    def check_time_range(request: TimeRangeRequest) -> TimeRangeResponse:
        """Validate without persisting, for checking input before submission."""
        time_range = TimeEntryService.validate_range(request)
        minutes = time_range.duration_minutes
        return TimeRangeResponse(
            date=time_range.date,
            start_time=time_range.start,
            end_time=time_range.end,
            duration_minutes=minutes,
            duration_display=format_duration(minutes)
        )

    @staticmethod
    def create_time_entry(db: Session, user: models.User, request: TimeEntryCreate) -> models.TimeEntry:
        """
        Record a time entry on one of the user's projects.

        Raises:
            HTTPException: 400 on invalid input, 404 if the project is not
                the user's, 409 for a duplicate entry
        """
        if request.project_id is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=REJECTION_MESSAGES[RejectionReason.MISSING_FIELD]
            )

        time_range = TimeEntryService.validate_range(request)
        project = ProjectService.get_owned_project(db, user, request.project_id)

        db_entry = models.TimeEntry(
            user_id=user.id,
            project_id=project.id,
            date=time_range.date,
            start_time=time.fromisoformat(time_range.start),
            end_time=time.fromisoformat(time_range.end)
        )
        try:
            db.add(db_entry)
            db.commit()
            db.refresh(db_entry)
        except SQLAlchemyError as e:
            db.rollback()
            if is_unique_violation(e):
                logger.info(f"Rejected duplicate time entry on project {project.id} for {time_range.date}")
                raise HTTPException(
                    status_code=status.HTTP_409_CONFLICT,
                    detail=DUPLICATE_ENTRY_MESSAGE
                )
            logger.error(f"Failed to create time entry for user {user.id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=store_error_detail(e, "Failed to create time entry")
            )

        logger.info(f"Recorded time entry {db_entry.id} on project {project.id} for user {user.id}")
        return db_entry

    @staticmethod
    def delete_time_entry(db: Session, user: models.User, entry_id: int) -> None:
        db_entry = db.query(models.TimeEntry).filter(
            models.TimeEntry.id == entry_id,
            models.TimeEntry.user_id == user.id
        ).first()

        if not db_entry:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Time entry not found"
            )

        try:
            db.delete(db_entry)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to delete time entry {entry_id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=store_error_detail(e, "Failed to delete time entry")
            )

    @staticmethod
    def list_entries_for_month(db: Session, user: models.User, year: int, month: int) -> List[models.TimeEntry]:
        """All of the user's entries dated within the month, by date then start time."""
        first_day, last_day = month_bounds(year, month)
        return db.query(models.TimeEntry).options(
            joinedload(models.TimeEntry.project).joinedload(models.Project.client)
        ).filter(
            models.TimeEntry.user_id == user.id,
            models.TimeEntry.date >= first_day,
            models.TimeEntry.date <= last_day
        ).order_by(
            models.TimeEntry.date,
            models.TimeEntry.start_time
        ).all()

    @staticmethod
    def get_calendar(
        db: Session,
        user: models.User,
        today: date,
        year: Optional[int] = None,
        month: Optional[int] = None
    ) -> CalendarMonth:
        """
        Build the calendar for a month, defaulting to the current one.

        Months after the current month are redirected to the current month.
        """
        requested_year = year if year is not None else today.year
        requested_month = month if month is not None else today.month
        year, month = clamp_month(requested_year, requested_month, today)

        entries = [
            TimeEntryResponse.from_entry(entry)
            for entry in TimeEntryService.list_entries_for_month(db, user, year, month)
        ]
        days = build_month(year, month, entries, today)
        total = month_total(days)

        return CalendarMonth(
            year=year,
            month=month,
            month_name=calendar.month_name[month],
            clamped=(year, month) != (requested_year, requested_month),
            total_minutes=total,
            total_display=format_duration(total),
            days=[
                CalendarDay(
                    date=day.date,
                    weekday=day.date.strftime("%A"),
                    is_today=day.date == today,
                    total_minutes=day.total_minutes,
                    total_display=format_duration(day.total_minutes),
                    entries=day.entries
                )
                for day in days
            ]
        )
