"""In-memory category repository for testing."""

from typing import List, Optional

from showcase.domain.error import ConflictError
from showcase.domain.model.category import Category
from showcase.domain.repository.category import CategoryRepository
from showcase.domain.value import CategoryId, Slug


class InMemoryCategoryRepository(CategoryRepository):
    """In-memory implementation of CategoryRepository for testing."""

    def __init__(self) -> None:
        self._categories: dict[CategoryId, Category] = {}

    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        """Find a category by ID."""
        return self._categories.get(category_id)

    async def find_by_slug(self, slug: Slug) -> Optional[Category]:
        """Find a category by slug."""
        for category in self._categories.values():
            if category.slug == slug:
                return category
        return None

    async def find_active(self) -> List[Category]:
        """List active categories by sort_order, then name."""
        active = [c for c in self._categories.values() if c.is_active]
        return sorted(active, key=lambda c: (c.sort_order, c.name))

    async def save(self, category: Category) -> Category:
        """Create a category."""
        for existing in self._categories.values():
            if existing.slug == category.slug and existing.id != category.id:
                raise ConflictError("Category", "slug", category.slug.root)
        self._categories[category.id] = category
        return category
