from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from .. import models, schemas
from ..dependencies import get_db, get_current_user, get_today
from ..services.month_view import clamp_month
from ..services.time_entry_service import TimeEntryService

router = APIRouter(
    tags=["Time Entries"],
    responses={404: {"description": "Not found"}},
)


@router.post("/time-entries/validate", response_model=schemas.TimeRangeResponse)
def validate_time_entry(
    request: schemas.TimeRangeRequest,
    current_user: models.User = Depends(get_current_user)
):
    """Check a date and start/end times without saving anything"""
    return TimeEntryService.check_time_range(request)


@router.post("/time-entries", response_model=schemas.TimeEntryResponse)
def create_time_entry(
    request: schemas.TimeEntryCreate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    """Record a time entry on one of the current user's projects"""
    entry = TimeEntryService.create_time_entry(db, current_user, request)
    return schemas.TimeEntryResponse.from_entry(entry)


@router.get("/time-entries", response_model=List[schemas.TimeEntryResponse])
def list_time_entries(
    month: Optional[int] = Query(None, ge=1, le=12),
    year: Optional[int] = Query(None, ge=1, le=9999),
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
    today: date = Depends(get_today)
):
    """List the current user's time entries for a month"""
    year, month = clamp_month(
        year if year is not None else today.year,
        month if month is not None else today.month,
        today
    )
    entries = TimeEntryService.list_entries_for_month(db, current_user, year, month)
    return [schemas.TimeEntryResponse.from_entry(entry) for entry in entries]


@router.delete("/time-entries/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_time_entry(
    entry_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    TimeEntryService.delete_time_entry(db, current_user, entry_id)


@router.get("/calendar", response_model=schemas.CalendarMonth)
def get_calendar(
    month: Optional[int] = Query(None, ge=1, le=12),
    year: Optional[int] = Query(None, ge=1, le=9999),
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
    today: date = Depends(get_today)
):
    """
    Day-by-day view of a month with per-day and monthly totals.

    Defaults to the current month; later months are redirected to it.
    """
    return TimeEntryService.get_calendar(db, current_user, today, year, month)
