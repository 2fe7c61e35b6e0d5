"""In-memory repository implementations for testing."""

from .account import InMemoryAccountRepository
from .category import InMemoryCategoryRepository
from .project import InMemoryProjectRepository

__all__ = [
    "InMemoryAccountRepository",
    "InMemoryCategoryRepository",
    "InMemoryProjectRepository",
]
