"""Increment project views use case."""

from uuid import UUID

from pydantic import BaseModel

from showcase.domain.error import NotFoundError
from showcase.domain.service import EngagementCounter
from showcase.domain.value import ProjectId, ViewConsistency


class IncrementViewsRequest(BaseModel):
    """Increment views request."""

    project_id: str


class IncrementViewsResponse(BaseModel):
    """Increment views response."""

    success: bool = True
    project_id: str
    views: int
    consistency: ViewConsistency


class IncrementViewsUseCase:
    """Use case for counting one view of a project."""

    def __init__(self, engagement_counter: EngagementCounter) -> None:
        """Initialize increment views use case.

        Args:
            engagement_counter: View counting domain service
        """
        self.engagement_counter = engagement_counter

    async def execute(self, request: IncrementViewsRequest) -> IncrementViewsResponse:
        """Count one view.

        Raises:
            NotFoundError: If the project does not exist or the ID is malformed
            StorageError: If both increment paths fail
        """
        try:
            project_id = ProjectId(UUID(request.project_id))
        except ValueError as e:
            # A malformed ID cannot name an existing project
            raise NotFoundError("Project", request.project_id) from e

        count = await self.engagement_counter.increment(project_id)
        return IncrementViewsResponse(
            project_id=str(count.project_id),
            views=count.views,
            consistency=count.consistency,
        )
