"""Category entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from showcase.domain.model.common import DomainModel
from showcase.domain.value import CategoryId, Slug


class Category(DomainModel):
    """A browsable grouping of projects.

    Inactive categories keep their projects but are left out of listings.
    """

    id: CategoryId
    slug: Slug
    name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=1000)
    icon: Optional[str] = Field(default=None, max_length=50)
    color: Optional[str] = Field(default=None, max_length=50)
    gradient: Optional[str] = Field(default=None, max_length=200)
    sort_order: int = 0
    is_active: bool = True
    created_at: datetime = Field(default_factory=datetime.now)
