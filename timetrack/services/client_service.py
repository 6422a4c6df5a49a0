import logging
from typing import List

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .. import models
from ..schemas import ClientCreate, ClientUpdate
from .names import clean_name
from .store_errors import store_error_detail

logger = logging.getLogger(__name__)


class ClientService:
    """Service for client management scoped to the current user."""

    @staticmethod
    def get_owned_client(db: Session, user: models.User, client_id: int) -> models.Client:
        """Fetch a client belonging to the user or raise 404."""
        client = db.query(models.Client).filter(
            models.Client.id == client_id,
            models.Client.user_id == user.id
        ).first()

        if not client:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Client not found"
            )
        return client

    @staticmethod
    def list_clients(db: Session, user: models.User) -> List[models.Client]:
        return db.query(models.Client).filter(
            models.Client.user_id == user.id
        ).order_by(models.Client.name).all()

    @staticmethod
    def create_client(db: Session, user: models.User, request: ClientCreate) -> models.Client:
        """
        Create a client for the user.

        The name is trimmed and validated before anything touches the store.
        """
        name = clean_name(request.name, "Client")

        db_client = models.Client(name=name, user_id=user.id)
        try:
            db.add(db_client)
            db.commit()
            db.refresh(db_client)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to create client for user {user.id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=store_error_detail(e, "Failed to create client")
            )

        logger.info(f"Created client {db_client.id} for user {user.id}")
        return db_client

    @staticmethod
    def update_client(db: Session, user: models.User, client_id: int, request: ClientUpdate) -> models.Client:
        name = clean_name(request.name, "Client")
        db_client = ClientService.get_owned_client(db, user, client_id)

        try:
            db_client.name = name
            db.commit()
            db.refresh(db_client)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to update client {client_id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=store_error_detail(e, "Failed to update client")
            )

        return db_client

    @staticmethod
    def delete_client(db: Session, user: models.User, client_id: int) -> None:
        """Delete a client; its projects and time entries go with it via the FK cascade."""
        db_client = ClientService.get_owned_client(db, user, client_id)

        try:
            db.delete(db_client)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to delete client {client_id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=store_error_detail(e, "Failed to delete client")
            )

        logger.info(f"Deleted client {client_id} for user {user.id}")
