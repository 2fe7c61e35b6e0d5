"""Get category use case."""

from pydantic import BaseModel

from showcase.domain.service import CategoryService

from .list_categories import CategoryResponse


class GetCategoryRequest(BaseModel):
    """Get category request."""

    slug: str


class GetCategoryResponse(BaseModel):
    """Get category response."""

    category: CategoryResponse


class GetCategoryUseCase:
    """Use case for fetching one category by slug."""

    def __init__(self, category_service: CategoryService) -> None:
        self.category_service = category_service

    async def execute(self, request: GetCategoryRequest) -> GetCategoryResponse:
        """Fetch a category with its project count.

        Raises:
            NotFoundError: If no active category has this slug
        """
        category, count = await self.category_service.get_by_slug(request.slug)
        return GetCategoryResponse(
            category=CategoryResponse.from_category(category, count)
        )
