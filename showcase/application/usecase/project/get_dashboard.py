"""Get dashboard use case."""

from pydantic import BaseModel

from showcase.application.usecase.account import AccountResponse
from showcase.domain.service import AccountService, ProjectService

from .submit_project import ProjectResponse


class GetDashboardRequest(BaseModel):
    """Get dashboard request."""

    auth_id: str


class DashboardStats(BaseModel):
    """Aggregates over the caller's projects."""

    project_count: int
    total_views: int


class GetDashboardResponse(BaseModel):
    """Get dashboard response."""

    profile: AccountResponse
    projects: list[ProjectResponse]  # Newest first
    stats: DashboardStats


class GetDashboardUseCase:
    """Use case for the signed-in account's dashboard."""

    def __init__(
        self, account_service: AccountService, project_service: ProjectService
    ) -> None:
        self.account_service = account_service
        self.project_service = project_service

    async def execute(self, request: GetDashboardRequest) -> GetDashboardResponse:
        """Load profile, projects and stats.

        Raises:
            NotFoundError: If the session subject has no account
        """
        account = await self.account_service.get_by_auth_id(request.auth_id)
        projects = await self.project_service.list_for_owner(account)

        return GetDashboardResponse(
            profile=AccountResponse.from_account(account),
            projects=[ProjectResponse.from_project(p) for p in projects],
            stats=DashboardStats(
                project_count=len(projects),
                total_views=sum(p.views for p in projects),
            ),
        )
