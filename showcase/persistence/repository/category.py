"""PostgreSQL implementation of Category repository."""

from typing import List, Optional

import logfire
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from showcase.domain.error import ConflictError, StorageError
from showcase.domain.model import Category
from showcase.domain.repository import CategoryRepository
from showcase.domain.value import CategoryId, Slug
from showcase.persistence.mappers import category_to_dict, row_to_category
from showcase.persistence.repository.errors import violated_constraint
from showcase.persistence.tables import UQ_CATEGORIES_SLUG, categories_table


class PostgresCategoryRepository(CategoryRepository):
    """PostgreSQL implementation of CategoryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        """Find a category by ID."""
        stmt = select(categories_table).where(categories_table.c.id == category_id)
        return await self._fetch_one(stmt)

    async def find_by_slug(self, slug: Slug) -> Optional[Category]:
        """Find a category by slug."""
        stmt = select(categories_table).where(categories_table.c.slug == slug.root)
        return await self._fetch_one(stmt)

    async def find_active(self) -> List[Category]:
        """List active categories by sort_order, then name."""
        with logfire.span("category_repository.find_active"):
            stmt = (
                select(categories_table)
                .where(categories_table.c.is_active.is_(True))
                .order_by(categories_table.c.sort_order, categories_table.c.name)
            )
            try:
                result = await self.session.execute(stmt)
            except SQLAlchemyError as e:
                raise StorageError(f"Category listing failed: {e}") from e
            return [row_to_category(dict(row)) for row in result.mappings().all()]

    async def save(self, category: Category) -> Category:
        """Create a category."""
        with logfire.span("category_repository.save", slug=category.slug.root):
            stmt = categories_table.insert().values(**category_to_dict(category))
            try:
                async with self.session.begin_nested():
                    await self.session.execute(stmt)
            except IntegrityError as e:
                if violated_constraint(e, (UQ_CATEGORIES_SLUG,)) == UQ_CATEGORIES_SLUG:
                    raise ConflictError("Category", "slug", category.slug.root) from e
                raise StorageError(f"Category insert rejected: {e.orig}") from e
            except SQLAlchemyError as e:
                raise StorageError(f"Category insert failed: {e}") from e
            return category

    async def _fetch_one(self, stmt) -> Optional[Category]:
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError(f"Category lookup failed: {e}") from e
        row = result.mappings().first()
        return row_to_category(dict(row)) if row else None
