"""Project view counting."""

from dataclasses import dataclass

import logfire

from showcase.domain.error import NotFoundError, StorageError
from showcase.domain.repository import ProjectRepository
from showcase.domain.value import ProjectId, ViewConsistency

from .base import Service


@dataclass(frozen=True)
class ViewCount:
    """Result of a view increment.

    `consistency` tells the caller which path produced `views`:
    ATOMIC is exact, BEST_EFFORT may have lost concurrent updates.
    """

    project_id: ProjectId
    views: int
    consistency: ViewConsistency


class EngagementCounter(Service):
    """Advances a project's view counter by exactly one per call.

    Two paths:

    - Atomic: a single store-side increment. Exact under any concurrency.
    - Best effort: read the count, add one, write it back. Used only when
      the atomic operation raises StorageError. Two concurrent fallback
      calls for the same project can both read N and both write N + 1, so
      one visit is lost. Results from this path are tagged BEST_EFFORT.
    """

    def __init__(self, project_repository: ProjectRepository) -> None:
        """Initialize engagement counter.

        Args:
            project_repository: Project repository
        """
        self.project_repository = project_repository

    async def increment(self, project_id: ProjectId) -> ViewCount:
        """Count one view of a project.

        Args:
            project_id: Project ID

        Returns:
            The new view count and the consistency of the path that produced it

        Raises:
            NotFoundError: If the project does not exist (either path)
            StorageError: If both the atomic and the fallback path fail
        """
        with logfire.span("engagement_counter.increment", project_id=str(project_id)):
            try:
                views = await self.project_repository.increment_views(project_id)
            except StorageError as e:
                logfire.warn(
                    "Atomic view increment failed, falling back to read-modify-write",
                    project_id=str(project_id),
                    error=str(e),
                )
                return await self._increment_best_effort(project_id)

            if views is None:
                logfire.warn("View on non-existent project", project_id=str(project_id))
                raise NotFoundError("Project", str(project_id))

            logfire.info("View counted", project_id=str(project_id), views=views)
            return ViewCount(
                project_id=project_id,
                views=views,
                consistency=ViewConsistency.ATOMIC,
            )

    async def _increment_best_effort(self, project_id: ProjectId) -> ViewCount:
        """Read-modify-write increment. Not safe for concurrent callers."""
        current = await self.project_repository.get_views(project_id)
        if current is None:
            logfire.warn("View on non-existent project", project_id=str(project_id))
            raise NotFoundError("Project", str(project_id))

        views = current + 1
        updated = await self.project_repository.set_views(project_id, views)
        if not updated:
            # Deleted between the read and the write
            raise NotFoundError("Project", str(project_id))

        logfire.info(
            "View counted on fallback path",
            project_id=str(project_id),
            views=views,
        )
        return ViewCount(
            project_id=project_id,
            views=views,
            consistency=ViewConsistency.BEST_EFFORT,
        )
