"""Project repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from showcase.domain.model.project import Project
from showcase.domain.value import AccountId, CategoryId, ProjectId, Slug


class ProjectRepository(ABC):
    """Repository for Project aggregate.

    Defines the contract for project persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        """Find a project by ID.

        Args:
            project_id: The project's unique identifier

        Returns:
            The project if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_owner(self, owner_id: AccountId) -> List[Project]:
        """Find all projects owned by an account, newest first.

        Args:
            owner_id: Owner's account ID

        Returns:
            List of projects
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        owner_id: Optional[AccountId] = None,
        category_id: Optional[CategoryId] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Project]:
        """Find projects, newest first, with optional filters.

        Args:
            owner_id: Only projects owned by this account
            category_id: Only projects in this category
            limit: Maximum number of projects to return
            offset: Number of projects to skip

        Returns:
            One page of projects
        """
        pass

    @abstractmethod
    async def count(
        self,
        owner_id: Optional[AccountId] = None,
        category_id: Optional[CategoryId] = None,
    ) -> int:
        """Count projects matching the same filters as `find_all`.

        Args:
            owner_id: Only projects owned by this account
            category_id: Only projects in this category

        Returns:
            Number of matching projects
        """
        pass

    @abstractmethod
    async def count_by_category(self) -> Dict[CategoryId, int]:
        """Number of projects in each category that has any.

        Returns:
            Mapping of category ID to project count
        """
        pass

    @abstractmethod
    async def slug_exists(self, slug: Slug) -> bool:
        """Check whether a slug is taken.

        Args:
            slug: Slug to look up

        Returns:
            True if a project holds this slug
        """
        pass

    @abstractmethod
    async def save(self, project: Project) -> Project:
        """Create a project.

        Args:
            project: The project to save

        Returns:
            The saved project
        """
        pass

    @abstractmethod
    async def increment_views(self, project_id: ProjectId) -> Optional[int]:
        """Atomically increment the view count by 1.

        Read and write happen as one store-side operation, so concurrent
        calls never lose an update.

        Args:
            project_id: The project ID

        Returns:
            The new view count, or None if the project does not exist

        Raises:
            StorageError: If the atomic operation is unavailable or fails
        """
        pass

    @abstractmethod
    async def get_views(self, project_id: ProjectId) -> Optional[int]:
        """Read the current view count.

        Args:
            project_id: The project ID

        Returns:
            The view count, or None if the project does not exist

        Raises:
            StorageError: If the read fails
        """
        pass

    @abstractmethod
    async def set_views(self, project_id: ProjectId, views: int) -> bool:
        """Overwrite the view count.

        Args:
            project_id: The project ID
            views: New view count

        Returns:
            True if a row was updated, False if the project does not exist

        Raises:
            StorageError: If the write fails
        """
        pass
