"""Project aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from showcase.domain.model.common import DomainModel
from showcase.domain.value import AccountId, CategoryId, ProjectId, Slug


class Project(DomainModel):
    """A community project listed in the directory.

    `views` only ever grows; it is advanced by the engagement counter and
    never written through `save` for an existing project.
    """

    id: ProjectId
    owner_id: AccountId
    title: str = Field(min_length=1, max_length=200)
    slug: Slug
    description: str = Field(min_length=1, max_length=5000)
    website_url: Optional[str] = None
    category_id: Optional[CategoryId] = None
    views: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
