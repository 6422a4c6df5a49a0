# Import and re-export all models so callers can use `from timetrack import models`

# Import Base from db module
from ..db import Base

# Import all models from their individual files
from .user import User
from .client import Client
from .project import Project
from .time_entry import TimeEntry
from .revoked_token import RevokedToken

# Ensure all models are available at package level
__all__ = [
    "Base",
    "User",
    "Client",
    "Project",
    "TimeEntry",
    "RevokedToken",
]
