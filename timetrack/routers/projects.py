from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from .. import models, schemas
from ..dependencies import get_db, get_current_user
from ..services.project_service import ProjectService

router = APIRouter(
    prefix="/projects",
    tags=["Projects"],
    responses={404: {"description": "Not found"}},
)


@router.post("", response_model=schemas.Project)
def create_project(
    project: schemas.ProjectCreate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    """Create a new project under one of the current user's clients"""
    return ProjectService.create_project(db, current_user, project)


@router.get("", response_model=List[schemas.Project])
def list_projects(
    client_id: Optional[int] = Query(None, description="Only projects of this client"),
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    """List the current user's projects with their client, ordered by name"""
    return ProjectService.list_projects(db, current_user, client_id)


@router.get("/active", response_model=List[schemas.Project])
def list_active_projects(
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    """List the project currently being tracked against"""
    return ProjectService.list_active_projects(db, current_user)


@router.get("/{project_id}", response_model=schemas.Project)
def get_project(
    project_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    return ProjectService.get_owned_project(db, current_user, project_id)


@router.put("/{project_id}", response_model=schemas.Project)
def update_project(
    project_id: int,
    project: schemas.ProjectUpdate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    """Update a project's name and dates; the client cannot be changed"""
    return ProjectService.update_project(db, current_user, project_id, project)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_project(
    project_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    """Delete a project together with its time entries"""
    ProjectService.delete_project(db, current_user, project_id)


@router.post("/{project_id}/activate", response_model=schemas.Project)
def activate_project(
    project_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    """Make this the only active project of the current user"""
    return ProjectService.set_project_active(db, current_user, project_id)
