from pydantic import BaseModel
from datetime import datetime


class ClientBase(BaseModel):
    name: str


class ClientCreate(ClientBase):
    pass


class ClientUpdate(ClientBase):
    pass


class Client(ClientBase):
    id: int
    user_id: int
    created_at: datetime

    class Config:
        from_attributes = True
