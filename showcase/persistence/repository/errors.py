"""Helpers for reading database errors."""

from typing import Optional

from sqlalchemy.exc import DBAPIError


def violated_constraint(error: DBAPIError, candidates: tuple[str, ...]) -> Optional[str]:
    """Name of the constraint behind an integrity error.

    asyncpg exposes the name on the driver exception; other drivers only
    carry it in the message, so fall back to searching that.

    Args:
        error: Wrapped driver error
        candidates: Constraint names to look for in the message

    Returns:
        Constraint name, or None if it cannot be determined
    """
    driver_error = getattr(error.orig, "__cause__", None) or error.orig
    name = getattr(driver_error, "constraint_name", None)
    if name:
        return name

    message = str(error.orig)
    for candidate in candidates:
        if candidate in message:
            return candidate
    return None
