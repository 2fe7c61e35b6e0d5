"""In-memory project repository for testing."""

from collections import Counter
from typing import Dict, List, Optional

from showcase.domain.error import ConflictError, StorageError
from showcase.domain.model.project import Project
from showcase.domain.repository.project import ProjectRepository
from showcase.domain.value import AccountId, CategoryId, ProjectId, Slug


class InMemoryProjectRepository(ProjectRepository):
    """In-memory implementation of ProjectRepository for testing.

    Set `atomic_available` to False to make `increment_views` fail the
    way a store without the atomic operation would.
    """

    def __init__(self, atomic_available: bool = True) -> None:
        self._projects: dict[ProjectId, Project] = {}
        self.atomic_available = atomic_available

    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        """Find a project by ID."""
        return self._projects.get(project_id)

    async def find_by_owner(self, owner_id: AccountId) -> List[Project]:
        """Find all projects owned by an account, newest first."""
        projects = [p for p in self._projects.values() if p.owner_id == owner_id]
        return sorted(projects, key=lambda p: p.created_at, reverse=True)

    async def find_all(
        self,
        owner_id: Optional[AccountId] = None,
        category_id: Optional[CategoryId] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Project]:
        """Find projects, newest first, with optional filters."""
        projects = sorted(
            self._matching(owner_id, category_id),
            key=lambda p: p.created_at,
            reverse=True,
        )
        return projects[offset : offset + limit]

    async def count(
        self,
        owner_id: Optional[AccountId] = None,
        category_id: Optional[CategoryId] = None,
    ) -> int:
        """Count projects matching the filters."""
        return len(self._matching(owner_id, category_id))

    async def count_by_category(self) -> Dict[CategoryId, int]:
        """Number of projects in each category that has any."""
        return dict(
            Counter(
                p.category_id
                for p in self._projects.values()
                if p.category_id is not None
            )
        )

    async def slug_exists(self, slug: Slug) -> bool:
        """Check whether a slug is taken."""
        return any(p.slug == slug for p in self._projects.values())

    async def save(self, project: Project) -> Project:
        """Create a project."""
        for existing in self._projects.values():
            if existing.slug == project.slug and existing.id != project.id:
                raise ConflictError("Project", "slug", project.slug.root)
        self._projects[project.id] = project
        return project

    async def increment_views(self, project_id: ProjectId) -> Optional[int]:
        """Atomically increment the view count by 1."""
        if not self.atomic_available:
            raise StorageError("increment_project_views is not available")
        project = self._projects.get(project_id)
        if project is None:
            return None
        updated = project.model_copy(update={"views": project.views + 1})
        self._projects[project_id] = updated
        return updated.views

    async def get_views(self, project_id: ProjectId) -> Optional[int]:
        """Read the current view count."""
        project = self._projects.get(project_id)
        return project.views if project else None

    async def set_views(self, project_id: ProjectId, views: int) -> bool:
        """Overwrite the view count."""
        project = self._projects.get(project_id)
        if project is None:
            return False
        self._projects[project_id] = project.model_copy(update={"views": views})
        return True

    def _matching(
        self, owner_id: Optional[AccountId], category_id: Optional[CategoryId]
    ) -> List[Project]:
        return [
            p
            for p in self._projects.values()
            if (owner_id is None or p.owner_id == owner_id)
            and (category_id is None or p.category_id == category_id)
        ]
