"""Domain value objects."""

from showcase.domain.value.identifiers import AccountId, CategoryId, ProjectId
from showcase.domain.value.types import (
    AccountRole,
    Email,
    Handle,
    Slug,
    ViewConsistency,
)

__all__ = [
    # Identifiers
    "AccountId",
    "CategoryId",
    "ProjectId",
    # Types
    "AccountRole",
    "Email",
    "Handle",
    "Slug",
    "ViewConsistency",
]
