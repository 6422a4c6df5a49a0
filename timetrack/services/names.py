from fastapi import HTTPException, status

MAX_NAME_LENGTH = 255


def clean_name(name: str, label: str) -> str:
    """
    Trim a display name and enforce the required/length rules.

    Args:
        name: Raw name from the request
        label: Entity label used in messages, e.g. "Client"

    Raises:
        HTTPException: 400 if the trimmed name is empty or too long
    """
    trimmed = (name or "").strip()
    if not trimmed:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{label} name is required"
        )

    if len(trimmed) > MAX_NAME_LENGTH:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{label} name must be {MAX_NAME_LENGTH} characters or less"
        )

    return trimmed
