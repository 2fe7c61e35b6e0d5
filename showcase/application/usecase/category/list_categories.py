"""List categories use case."""

from datetime import datetime

from pydantic import BaseModel

from showcase.domain.model import Category
from showcase.domain.service import CategoryService


class CategoryResponse(BaseModel):
    """Category as returned to callers."""

    id: str
    slug: str
    name: str
    description: str | None
    icon: str | None
    color: str | None
    gradient: str | None
    sort_order: int
    projects_count: int
    created_at: datetime

    @classmethod
    def from_category(
        cls, category: Category, projects_count: int
    ) -> "CategoryResponse":
        return cls(
            id=str(category.id),
            slug=category.slug.root,
            name=category.name,
            description=category.description,
            icon=category.icon,
            color=category.color,
            gradient=category.gradient,
            sort_order=category.sort_order,
            projects_count=projects_count,
            created_at=category.created_at,
        )


class ListCategoriesResponse(BaseModel):
    """List categories response."""

    categories: list[CategoryResponse]  # By sort_order, then name


class ListCategoriesUseCase:
    """Use case for listing active categories with project counts."""

    def __init__(self, category_service: CategoryService) -> None:
        self.category_service = category_service

    async def execute(self) -> ListCategoriesResponse:
        entries = await self.category_service.list_active()
        return ListCategoriesResponse(
            categories=[
                CategoryResponse.from_category(category, count)
                for category, count in entries
            ]
        )
