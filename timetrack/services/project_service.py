import logging
from datetime import date
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy import case, literal
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from .. import models
from ..enums import ProjectStatus
from ..schemas import ProjectCreate, ProjectUpdate
from .client_service import ClientService
from .names import clean_name
from .store_errors import store_error_detail

logger = logging.getLogger(__name__)


def _check_date_order(start_date: Optional[date], end_date: Optional[date]) -> None:
    if start_date and end_date and end_date < start_date:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Project end date must not be before its start date"
        )


class ProjectService:
    """Service for project management and the active-project switch."""

    @staticmethod
    def get_owned_project(db: Session, user: models.User, project_id: int) -> models.Project:
        """Fetch a project belonging to the user or raise 404."""
        project = db.query(models.Project).options(
            joinedload(models.Project.client)
        ).filter(
            models.Project.id == project_id,
            models.Project.user_id == user.id
        ).first()

        if not project:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Project not found"
            )
        return project

    @staticmethod
    def list_projects(db: Session, user: models.User, client_id: Optional[int] = None) -> List[models.Project]:
        """List the user's projects with their client, optionally for one client only."""
        query = db.query(models.Project).options(
            joinedload(models.Project.client)
        ).filter(models.Project.user_id == user.id)

        if client_id is not None:
            query = query.filter(models.Project.client_id == client_id)

        return query.order_by(models.Project.name).all()

    @staticmethod
    def list_active_projects(db: Session, user: models.User) -> List[models.Project]:
        return db.query(models.Project).options(
            joinedload(models.Project.client)
        ).filter(
            models.Project.user_id == user.id,
            models.Project.status == ProjectStatus.ACTIVE
        ).order_by(models.Project.name).all()

    @staticmethod
    def create_project(db: Session, user: models.User, request: ProjectCreate) -> models.Project:
        """
        Create a project under one of the user's clients.

        New projects start out completed; use set_project_active to start
        tracking against one.

        Raises:
            HTTPException: 400 on invalid input, 404 if the client is not the user's
        """
        name = clean_name(request.name, "Project")

        if request.client_id is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Client is required"
            )
        _check_date_order(request.start_date, request.end_date)

        client = ClientService.get_owned_client(db, user, request.client_id)

        db_project = models.Project(
            name=name,
            client_id=client.id,
            user_id=user.id,
            status=ProjectStatus.COMPLETED,
            start_date=request.start_date,
            end_date=request.end_date
        )
        try:
            db.add(db_project)
            db.commit()
            db.refresh(db_project)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to create project for user {user.id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=store_error_detail(e, "Failed to create project")
            )

        logger.info(f"Created project {db_project.id} under client {client.id} for user {user.id}")
        return db_project

    @staticmethod
    def update_project(db: Session, user: models.User, project_id: int, request: ProjectUpdate) -> models.Project:
        name = clean_name(request.name, "Project")
        _check_date_order(request.start_date, request.end_date)
        db_project = ProjectService.get_owned_project(db, user, project_id)

        try:
            db_project.name = name
            db_project.start_date = request.start_date
            db_project.end_date = request.end_date
            db.commit()
            db.refresh(db_project)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to update project {project_id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=store_error_detail(e, "Failed to update project")
            )

        return db_project

    @staticmethod
    def delete_project(db: Session, user: models.User, project_id: int) -> None:
        """Delete a project; its time entries go with it via the FK cascade."""
        db_project = ProjectService.get_owned_project(db, user, project_id)

        try:
            db.delete(db_project)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to delete project {project_id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=store_error_detail(e, "Failed to delete project")
            )

        logger.info(f"Deleted project {project_id} for user {user.id}")

    @staticmethod
    def set_project_active(db: Session, user: models.User, project_id: int) -> models.Project:
        """
        Make one project the user's only active project.

        Every other project of the user is demoted to completed and the
        target promoted in a single UPDATE, so there is never a moment with
        zero or two active projects, and a failure leaves the previous state
        in place. Projects of other users are not touched.
        """
        project = ProjectService.get_owned_project(db, user, project_id)

        status_type = models.Project.__table__.c.status.type
        new_status = case(
            (models.Project.id == project.id, literal(ProjectStatus.ACTIVE, status_type)),
            else_=literal(ProjectStatus.COMPLETED, status_type)
        )

        try:
            db.query(models.Project).filter(
                models.Project.user_id == user.id
            ).update({models.Project.status: new_status}, synchronize_session=False)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to set project {project_id} active for user {user.id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=store_error_detail(e, "Failed to set project as active")
            )

        db.refresh(project)
        logger.info(f"Project {project_id} is now the active project of user {user.id}")
        return project
