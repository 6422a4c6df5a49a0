from pydantic import BaseModel
from typing import Optional
from datetime import date, datetime
from ..enums import ProjectStatus


class ProjectBase(BaseModel):
    name: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class ProjectCreate(ProjectBase):
    client_id: Optional[int] = None


class ProjectUpdate(ProjectBase):
    """Client is fixed at creation and cannot be changed"""
    pass


class ProjectClient(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True


class Project(ProjectBase):
    id: int
    user_id: int
    client_id: int
    status: ProjectStatus
    created_at: datetime
    client: Optional[ProjectClient] = None

    class Config:
        from_attributes = True
