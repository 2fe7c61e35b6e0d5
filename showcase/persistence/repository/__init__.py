"""PostgreSQL repository implementations."""

from showcase.persistence.repository.account import PostgresAccountRepository
from showcase.persistence.repository.category import PostgresCategoryRepository
from showcase.persistence.repository.project import PostgresProjectRepository

__all__ = [
    "PostgresAccountRepository",
    "PostgresCategoryRepository",
    "PostgresProjectRepository",
]
