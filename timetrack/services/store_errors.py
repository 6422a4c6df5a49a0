"""
Helpers for turning database errors into user-facing messages.
"""

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

# PostgreSQL SQLSTATE for unique_violation
UNIQUE_VIOLATION_PGCODE = "23505"


def is_unique_violation(exc: SQLAlchemyError) -> bool:
    """True when the error comes from a unique constraint or index."""
    if not isinstance(exc, IntegrityError):
        return False

    orig = getattr(exc, "orig", None)
    if getattr(orig, "pgcode", None) == UNIQUE_VIOLATION_PGCODE:
        return True
    # SQLite reports constraint failures only through the message
    return "UNIQUE constraint failed" in str(orig)


def store_error_detail(exc: SQLAlchemyError, fallback: str) -> str:
    """The backend's own message, or the fallback when it has none."""
    orig = getattr(exc, "orig", None)
    message = str(orig).strip() if orig is not None else ""
    return message or fallback
