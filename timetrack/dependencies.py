from datetime import date

# Re-export database dependency
from .db import get_db

# Re-export authentication dependencies
from .auth import get_current_user, get_token_payload

# Re-export settings dependency
from .core.settings import get_settings


def get_today() -> date:
    """Reference date for calendar views; overridden in tests."""
    return date.today()
