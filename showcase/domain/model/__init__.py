"""Domain model entities."""

from showcase.domain.model.account import Account
from showcase.domain.model.category import Category
from showcase.domain.model.project import Project
from showcase.domain.model.session import Session

__all__ = [
    "Account",
    "Category",
    "Project",
    "Session",
]
