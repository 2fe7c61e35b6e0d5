"""Project domain service."""

import re
from typing import Optional
from uuid import uuid4

import logfire

from showcase.domain.error import ConflictError, NotFoundError
from showcase.domain.model import Account, Project
from showcase.domain.repository import ProjectRepository
from showcase.domain.value import AccountId, CategoryId, ProjectId, Slug
from showcase.domain.value.types import SLUG_MAX_LENGTH

from .base import Service

MAX_SLUG_ATTEMPTS = 100


class ProjectService(Service):
    """Domain service for project operations."""

    def __init__(self, project_repository: ProjectRepository) -> None:
        """Initialize project service.

        Args:
            project_repository: Project repository
        """
        self.project_repository = project_repository

    async def get_by_id(self, project_id: ProjectId) -> Project:
        """Get a project by ID.

        Raises:
            NotFoundError: If project not found
        """
        with logfire.span("project_service.get_by_id", project_id=str(project_id)):
            project = await self.project_repository.find_by_id(project_id)
            if not project:
                logfire.warn("Project not found", project_id=str(project_id))
                raise NotFoundError("Project", str(project_id))
            return project

    async def list_for_owner(self, owner: Account) -> list[Project]:
        """List an account's projects, newest first."""
        with logfire.span("project_service.list_for_owner", owner_id=str(owner.id)):
            projects = await self.project_repository.find_by_owner(owner.id)
            logfire.info(
                "Projects listed", owner_id=str(owner.id), count=len(projects)
            )
            return projects

    async def browse(
        self,
        owner_id: Optional[AccountId] = None,
        category_id: Optional[CategoryId] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> tuple[list[Project], int]:
        """One page of projects, newest first, and the total across all pages.

        Args:
            owner_id: Only projects owned by this account
            category_id: Only projects in this category
            limit: Page size
            offset: Number of projects to skip

        Returns:
            The page and the number of projects matching the filters
        """
        with logfire.span("project_service.browse", limit=limit, offset=offset):
            total = await self.project_repository.count(
                owner_id=owner_id, category_id=category_id
            )
            projects = await self.project_repository.find_all(
                owner_id=owner_id,
                category_id=category_id,
                limit=limit,
                offset=offset,
            )
            logfire.info("Projects browsed", count=len(projects), total=total)
            return projects, total

    async def submit(
        self,
        owner: Account,
        title: str,
        description: str,
        website_url: Optional[str] = None,
        category_id: Optional[CategoryId] = None,
    ) -> Project:
        """Create a project owned by `owner` with a fresh slug.

        Args:
            owner: Submitting account
            title: Project title
            description: Project description
            website_url: Optional project website
            category_id: Optional category the project is listed under

        Returns:
            Saved project, with zero views
        """
        project_id = ProjectId(uuid4())
        with logfire.span(
            "project_service.submit", project_id=str(project_id), title=title
        ):
            slug = await self.generate_unique_slug(title, project_id)
            project = Project(
                id=project_id,
                owner_id=owner.id,
                title=title,
                slug=slug,
                description=description,
                website_url=website_url,
                category_id=category_id,
            )
            saved = await self.project_repository.save(project)
            logfire.info("Project submitted", project_id=str(saved.id), slug=slug.root)
            return saved

    async def generate_unique_slug(self, title: str, project_id: ProjectId) -> Slug:
        """Generate a unique slug from a title.

        Handles collisions by appending numeric suffixes.

        Args:
            title: Project title to slugify
            project_id: Project ID (used for fallback if title produces empty slug)

        Returns:
            Unique slug for the project

        Raises:
            ConflictError: If no free slug was found within the attempt bound
        """
        base_slug_str = self._slugify(title)

        if not base_slug_str:
            fallback = f"project-{project_id.hex[:8]}"
            logfire.info(
                "Using fallback slug for empty title",
                project_id=str(project_id),
                slug=fallback,
            )
            return Slug(fallback)

        slug_str = base_slug_str
        for counter in range(1, MAX_SLUG_ATTEMPTS + 1):
            if not await self.project_repository.slug_exists(Slug(slug_str)):
                logfire.info(
                    "Generated unique slug",
                    project_id=str(project_id),
                    slug=slug_str,
                    had_collision=counter > 1,
                )
                return Slug(slug_str)
            suffix = f"-{counter}"
            # Keep within the slug length limit
            slug_str = base_slug_str[: SLUG_MAX_LENGTH - len(suffix)].rstrip("-") + suffix

        raise ConflictError("Project", "slug", base_slug_str)

    @staticmethod
    def _slugify(title: str) -> str:
        """Convert title to URL-safe slug format.

        Lowercases, collapses runs of non-alphanumerics into single hyphens,
        strips leading/trailing hyphens and truncates to the slug limit.
        """
        slug = re.sub(r"[^a-z0-9]+", "-", title.lower())
        return slug.strip("-")[:SLUG_MAX_LENGTH].rstrip("-")
