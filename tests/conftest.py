"""Test configuration and helpers."""

from datetime import datetime, timedelta
from uuid import uuid4

from showcase.config import Settings
from showcase.domain.model import Account, Category, Project
from showcase.domain.service import SessionService
from showcase.domain.value import (
    AccountId,
    AccountRole,
    CategoryId,
    Email,
    Handle,
    ProjectId,
    Slug,
)


def make_account(
    handle: str = "alice",
    auth_id: str | None = None,
    email: str | None = None,
) -> Account:
    """Build an account with unique auth_id and email unless given."""
    suffix = uuid4().hex[:8]
    return Account(
        id=AccountId(uuid4()),
        auth_id=auth_id or f"auth-{suffix}",
        email=Email(email or f"{handle}-{suffix}@example.com"),
        handle=Handle(handle),
        display_name=handle,
        role=AccountRole.SUBMITTER,
    )


def make_project(
    owner: Account,
    title: str = "Open Wallet Kit",
    slug: str | None = None,
    views: int = 0,
    age: timedelta = timedelta(0),
    category: Category | None = None,
) -> Project:
    """Build a project owned by `owner`, `age` older than now."""
    project_id = ProjectId(uuid4())
    created_at = datetime.now() - age
    return Project(
        id=project_id,
        owner_id=owner.id,
        title=title,
        slug=Slug(slug or f"project-{project_id.hex[:8]}"),
        description=f"{title} description",
        category_id=category.id if category else None,
        views=views,
        created_at=created_at,
        updated_at=created_at,
    )


def make_category(
    slug: str = "defi",
    name: str | None = None,
    sort_order: int = 0,
    is_active: bool = True,
) -> Category:
    """Build a category named after its slug unless given."""
    return Category(
        id=CategoryId(uuid4()),
        slug=Slug(slug),
        name=name or slug.replace("-", " ").title(),
        sort_order=sort_order,
        is_active=is_active,
    )


def issue_session_token(auth_id: str, now: datetime | None = None) -> str:
    """Session token signed with the settings the app loads from the environment."""
    return SessionService(Settings().auth).issue(auth_id, now=now)
