"""Get project use case."""

from uuid import UUID

from pydantic import BaseModel

from showcase.domain.error import NotFoundError
from showcase.domain.service import ProjectService
from showcase.domain.value import ProjectId

from .submit_project import ProjectResponse


class GetProjectRequest(BaseModel):
    """Get project request."""

    project_id: str


class GetProjectResponse(BaseModel):
    """Get project response."""

    project: ProjectResponse


class GetProjectUseCase:
    """Use case for fetching a single project."""

    def __init__(self, project_service: ProjectService) -> None:
        self.project_service = project_service

    async def execute(self, request: GetProjectRequest) -> GetProjectResponse:
        """Fetch one project.

        Raises:
            NotFoundError: If the project does not exist or the ID is malformed
        """
        try:
            project_id = ProjectId(UUID(request.project_id))
        except ValueError as e:
            raise NotFoundError("Project", request.project_id) from e

        project = await self.project_service.get_by_id(project_id)
        return GetProjectResponse(project=ProjectResponse.from_project(project))
