# Auth schemas
from .auth import (
    SignupRequest,
    LoginRequest,
    Token,
    UserResponse,
    SignupResponse,
    LoginResponse,
    LogoutResponse
)

# Client schemas
from .client import ClientBase, ClientCreate, ClientUpdate, Client

# Project schemas
from .project import ProjectBase, ProjectCreate, ProjectUpdate, ProjectClient, Project

# Time entry and calendar schemas
from .time_entry import (
    TimeRangeRequest,
    TimeEntryCreate,
    TimeRangeResponse,
    TimeEntryResponse,
    CalendarDay,
    CalendarMonth
)

# Make all schemas available at package level
__all__ = [
    # Auth
    "SignupRequest",
    "LoginRequest",
    "Token",
    "UserResponse",
    "SignupResponse",
    "LoginResponse",
    "LogoutResponse",
    # Client
    "ClientBase",
    "ClientCreate",
    "ClientUpdate",
    "Client",
    # Project
    "ProjectBase",
    "ProjectCreate",
    "ProjectUpdate",
    "ProjectClient",
    "Project",
    # Time entry
    "TimeRangeRequest",
    "TimeEntryCreate",
    "TimeRangeResponse",
    "TimeEntryResponse",
    "CalendarDay",
    "CalendarMonth"
]
