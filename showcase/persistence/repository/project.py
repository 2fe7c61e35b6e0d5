"""PostgreSQL implementation of Project repository."""

from typing import Dict, List, Optional

import logfire
from sqlalchemy import Select, desc, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from showcase.domain.error import ConflictError, StorageError
from showcase.domain.model import Project
from showcase.domain.repository import ProjectRepository
from showcase.domain.value import AccountId, CategoryId, ProjectId, Slug
from showcase.persistence.mappers import project_to_dict, row_to_project
from showcase.persistence.repository.errors import violated_constraint
from showcase.persistence.tables import UQ_PROJECTS_SLUG, projects_table


class PostgresProjectRepository(ProjectRepository):
    """PostgreSQL implementation of ProjectRepository.

    The atomic increment calls the `increment_project_views(uuid)` SQL
    function created by the migrations. If the function is missing or the
    call fails, StorageError is raised and the caller may fall back to
    `get_views`/`set_views`.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        """Find a project by ID."""
        with logfire.span("project_repository.find_by_id", project_id=str(project_id)):
            stmt = select(projects_table).where(projects_table.c.id == project_id)
            try:
                result = await self.session.execute(stmt)
            except SQLAlchemyError as e:
                raise StorageError(f"Project lookup failed: {e}") from e
            row = result.mappings().first()
            return row_to_project(dict(row)) if row else None

    async def find_by_owner(self, owner_id: AccountId) -> List[Project]:
        """Find all projects owned by an account, newest first."""
        with logfire.span("project_repository.find_by_owner", owner_id=str(owner_id)):
            stmt = (
                select(projects_table)
                .where(projects_table.c.owner_id == owner_id)
                .order_by(desc(projects_table.c.created_at))
            )
            try:
                result = await self.session.execute(stmt)
            except SQLAlchemyError as e:
                raise StorageError(f"Project listing failed: {e}") from e
            return [row_to_project(dict(row)) for row in result.mappings().all()]

    async def find_all(
        self,
        owner_id: Optional[AccountId] = None,
        category_id: Optional[CategoryId] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Project]:
        """Find projects, newest first, with optional filters."""
        with logfire.span(
            "project_repository.find_all",
            owner_id=str(owner_id) if owner_id else None,
            category_id=str(category_id) if category_id else None,
            limit=limit,
            offset=offset,
        ):
            stmt = (
                self._filtered(select(projects_table), owner_id, category_id)
                .order_by(desc(projects_table.c.created_at), projects_table.c.id)
                .limit(limit)
                .offset(offset)
            )
            try:
                result = await self.session.execute(stmt)
            except SQLAlchemyError as e:
                raise StorageError(f"Project listing failed: {e}") from e
            return [row_to_project(dict(row)) for row in result.mappings().all()]

    async def count(
        self,
        owner_id: Optional[AccountId] = None,
        category_id: Optional[CategoryId] = None,
    ) -> int:
        """Count projects matching the filters."""
        stmt = self._filtered(
            select(func.count()).select_from(projects_table), owner_id, category_id
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError(f"Project count failed: {e}") from e
        return result.scalar() or 0

    async def count_by_category(self) -> Dict[CategoryId, int]:
        """Number of projects in each category that has any."""
        stmt = (
            select(projects_table.c.category_id, func.count())
            .where(projects_table.c.category_id.is_not(None))
            .group_by(projects_table.c.category_id)
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError(f"Category counts failed: {e}") from e
        return {CategoryId(category_id): n for category_id, n in result.all()}

    async def slug_exists(self, slug: Slug) -> bool:
        """Check whether a slug is taken."""
        stmt = (
            select(func.count())
            .select_from(projects_table)
            .where(projects_table.c.slug == slug.root)
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError(f"Slug lookup failed: {e}") from e
        exists = (result.scalar() or 0) > 0
        logfire.debug("Slug existence check", slug=slug.root, exists=exists)
        return exists

    async def save(self, project: Project) -> Project:
        """Create a project."""
        with logfire.span("project_repository.save", project_id=str(project.id)):
            stmt = projects_table.insert().values(**project_to_dict(project))
            try:
                async with self.session.begin_nested():
                    await self.session.execute(stmt)
            except IntegrityError as e:
                if violated_constraint(e, (UQ_PROJECTS_SLUG,)) == UQ_PROJECTS_SLUG:
                    raise ConflictError("Project", "slug", project.slug.root) from e
                raise StorageError(f"Project insert rejected: {e.orig}") from e
            except SQLAlchemyError as e:
                raise StorageError(f"Project insert failed: {e}") from e
            return project

    async def increment_views(self, project_id: ProjectId) -> Optional[int]:
        """Atomically increment the view count by 1."""
        with logfire.span(
            "project_repository.increment_views", project_id=str(project_id)
        ):
            stmt = select(func.increment_project_views(project_id))
            try:
                # Savepoint keeps the transaction usable for the fallback path
                async with self.session.begin_nested():
                    result = await self.session.execute(stmt)
                    views = result.scalar()
            except SQLAlchemyError as e:
                raise StorageError(f"Atomic view increment failed: {e}") from e
            return views

    async def get_views(self, project_id: ProjectId) -> Optional[int]:
        """Read the current view count."""
        stmt = select(projects_table.c.views).where(projects_table.c.id == project_id)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError(f"View count read failed: {e}") from e
        return result.scalar_one_or_none()

    async def set_views(self, project_id: ProjectId, views: int) -> bool:
        """Overwrite the view count."""
        stmt = (
            projects_table.update()
            .where(projects_table.c.id == project_id)
            .values(views=views, updated_at=func.now())
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError(f"View count write failed: {e}") from e
        return result.rowcount > 0

    @staticmethod
    def _filtered(
        stmt: Select,
        owner_id: Optional[AccountId],
        category_id: Optional[CategoryId],
    ) -> Select:
        if owner_id is not None:
            stmt = stmt.where(projects_table.c.owner_id == owner_id)
        if category_id is not None:
            stmt = stmt.where(projects_table.c.category_id == category_id)
        return stmt
