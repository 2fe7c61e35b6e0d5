"""Category repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from showcase.domain.model.category import Category
from showcase.domain.value import CategoryId, Slug


class CategoryRepository(ABC):
    """Repository for Category entities."""

    @abstractmethod
    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        """Find a category by ID.

        Args:
            category_id: The category's unique identifier

        Returns:
            The category if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Category]:
        """Find a category by slug, active or not.

        Args:
            slug: Category slug

        Returns:
            The category if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_active(self) -> List[Category]:
        """List active categories by sort_order, then name.

        Returns:
            Active categories
        """
        pass

    @abstractmethod
    async def save(self, category: Category) -> Category:
        """Create a category.

        Args:
            category: The category to save

        Returns:
            The saved category

        Raises:
            ConflictError: If the slug is taken
            StorageError: If the store fails
        """
        pass
