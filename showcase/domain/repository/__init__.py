"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from showcase.domain.repository.account import (
    AccountRepository,
    InsertResult,
    InsertStatus,
)
from showcase.domain.repository.category import CategoryRepository
from showcase.domain.repository.project import ProjectRepository

__all__ = [
    "AccountRepository",
    "CategoryRepository",
    "InsertResult",
    "InsertStatus",
    "ProjectRepository",
]
