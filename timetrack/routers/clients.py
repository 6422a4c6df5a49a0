from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from .. import models, schemas
from ..dependencies import get_db, get_current_user
from ..services.client_service import ClientService

router = APIRouter(
    prefix="/clients",
    tags=["Clients"],
    responses={404: {"description": "Not found"}},
)


@router.post("", response_model=schemas.Client)
def create_client(
    client: schemas.ClientCreate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    """Create a new client for the current user"""
    return ClientService.create_client(db, current_user, client)


@router.get("", response_model=List[schemas.Client])
def list_clients(
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    """List all clients of the current user, ordered by name"""
    return ClientService.list_clients(db, current_user)


@router.put("/{client_id}", response_model=schemas.Client)
def update_client(
    client_id: int,
    client: schemas.ClientUpdate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    """Rename a client"""
    return ClientService.update_client(db, current_user, client_id, client)


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_client(
    client_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    """Delete a client together with its projects and time entries"""
    ClientService.delete_client(db, current_user, client_id)
