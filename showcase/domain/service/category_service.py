"""Category domain service."""

from typing import Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from showcase.domain.error import NotFoundError, ValidationError
from showcase.domain.model import Category
from showcase.domain.repository import CategoryRepository, ProjectRepository
from showcase.domain.value import CategoryId, Slug

from .base import Service


class CategoryService(Service):
    """Domain service for category operations."""

    def __init__(
        self,
        category_repository: CategoryRepository,
        project_repository: ProjectRepository,
    ) -> None:
        """Initialize category service.

        Args:
            category_repository: Category repository
            project_repository: Project repository, for per-category counts
        """
        self.category_repository = category_repository
        self.project_repository = project_repository

    async def list_active(self) -> list[tuple[Category, int]]:
        """Active categories in display order, each with its project count."""
        with logfire.span("category_service.list_active"):
            categories = await self.category_repository.find_active()
            counts = await self.project_repository.count_by_category()
            logfire.info("Categories listed", count=len(categories))
            return [(c, counts.get(c.id, 0)) for c in categories]

    async def find_by_slug(self, slug: str) -> Optional[Category]:
        """Category with this slug, or None if there is none.

        A string that is not a valid slug cannot name a category.
        """
        try:
            parsed = Slug(slug)
        except PydanticValidationError:
            return None
        return await self.category_repository.find_by_slug(parsed)

    async def get_by_slug(self, slug: str) -> tuple[Category, int]:
        """Get an active category and its project count.

        Raises:
            NotFoundError: If no active category has this slug
        """
        with logfire.span("category_service.get_by_slug", slug=slug):
            category = await self.find_by_slug(slug)
            if category is None or not category.is_active:
                logfire.warn("Category not found", slug=slug)
                raise NotFoundError("Category", slug)
            count = await self.project_repository.count(category_id=category.id)
            return category, count

    async def create(
        self,
        slug: str,
        name: str,
        description: Optional[str] = None,
        icon: Optional[str] = None,
        color: Optional[str] = None,
        gradient: Optional[str] = None,
        sort_order: int = 0,
    ) -> Category:
        """Create an active category.

        Raises:
            ValidationError: If a field is invalid
            ConflictError: If the slug is taken
        """
        with logfire.span("category_service.create", slug=slug):
            try:
                parsed_slug = Slug(slug)
            except PydanticValidationError as e:
                raise ValidationError("slug", e.errors()[0]["msg"]) from e

            try:
                category = Category(
                    id=CategoryId(uuid4()),
                    slug=parsed_slug,
                    name=name,
                    description=description,
                    icon=icon,
                    color=color,
                    gradient=gradient,
                    sort_order=sort_order,
                )
            except PydanticValidationError as e:
                error = e.errors()[0]
                field = ".".join(str(part) for part in error["loc"]) or "category"
                raise ValidationError(field, error["msg"]) from e

            saved = await self.category_repository.save(category)
            logfire.info("Category created", category_id=str(saved.id), slug=slug)
            return saved
