from sqlalchemy import Column, Integer, Date, Time, DateTime, ForeignKey, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..db import Base


class TimeEntry(Base):
    """
    A block of work on one project within a single calendar day.
    End time is strictly after start time; entries never span midnight.
    """
    __tablename__ = "time_entries"
    __table_args__ = (
        UniqueConstraint(
            "project_id", "date", "start_time", "end_time",
            name="uq_time_entries_project_date_times",
        ),
        CheckConstraint("end_time > start_time", name="ck_time_entries_end_after_start"),
    )
    
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    start_time = Column(Time, nullable=False)
    end_time = Column(Time, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    
    user = relationship("User", back_populates="time_entries")
    project = relationship("Project", back_populates="time_entries")
