"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand.
"""

from typing import Any, Dict
from uuid import UUID

from showcase.domain.model import Account, Category, Project
from showcase.domain.value import (
    AccountId,
    AccountRole,
    CategoryId,
    Email,
    Handle,
    ProjectId,
    Slug,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_account(row: Dict[str, Any]) -> Account:
    """Convert database row to Account domain model.

    Args:
        row: Database row as dict

    Returns:
        Account domain model
    """
    return Account(
        id=AccountId(_uuid(row["id"])),
        auth_id=row["auth_id"],
        email=Email(row["email"]),
        handle=Handle(row["handle"]),
        display_name=row.get("display_name"),
        avatar_url=row.get("avatar_url"),
        role=AccountRole(row["role"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def account_to_dict(account: Account) -> Dict[str, Any]:
    """Convert Account domain model to database dict.

    Args:
        account: Account domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": account.id,
        "auth_id": account.auth_id,
        "email": account.email.root,
        "handle": account.handle.root,
        "display_name": account.display_name,
        "avatar_url": account.avatar_url,
        "role": account.role.value,
        "created_at": account.created_at,
        "updated_at": account.updated_at,
    }


def row_to_project(row: Dict[str, Any]) -> Project:
    """Convert database row to Project domain model.

    Args:
        row: Database row as dict

    Returns:
        Project domain model
    """
    return Project(
        id=ProjectId(_uuid(row["id"])),
        owner_id=AccountId(_uuid(row["owner_id"])),
        title=row["title"],
        slug=Slug(row["slug"]),
        description=row["description"],
        website_url=row.get("website_url"),
        category_id=(
            CategoryId(_uuid(row["category_id"])) if row.get("category_id") else None
        ),
        views=row["views"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def project_to_dict(project: Project) -> Dict[str, Any]:
    """Convert Project domain model to database dict."""
    return {
        "id": project.id,
        "owner_id": project.owner_id,
        "title": project.title,
        "slug": project.slug.root,
        "description": project.description,
        "website_url": project.website_url,
        "category_id": project.category_id,
        "views": project.views,
        "created_at": project.created_at,
        "updated_at": project.updated_at,
    }


def row_to_category(row: Dict[str, Any]) -> Category:
    """Convert database row to Category domain model."""
    return Category(
        id=CategoryId(_uuid(row["id"])),
        slug=Slug(row["slug"]),
        name=row["name"],
        description=row.get("description"),
        icon=row.get("icon"),
        color=row.get("color"),
        gradient=row.get("gradient"),
        sort_order=row["sort_order"],
        is_active=row["is_active"],
        created_at=row["created_at"],
    )


def category_to_dict(category: Category) -> Dict[str, Any]:
    """Convert Category domain model to database dict."""
    return {
        "id": category.id,
        "slug": category.slug.root,
        "name": category.name,
        "description": category.description,
        "icon": category.icon,
        "color": category.color,
        "gradient": category.gradient,
        "sort_order": category.sort_order,
        "is_active": category.is_active,
        "created_at": category.created_at,
    }
