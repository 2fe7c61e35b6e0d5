"""List projects use case."""

import logfire
from pydantic import BaseModel, Field

from showcase.domain.service import AccountService, CategoryService, ProjectService

from .submit_project import ProjectResponse

DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 100


class ListProjectsRequest(BaseModel):
    """List projects request."""

    username: str | None = None  # Owner handle
    category: str | None = None  # Category slug
    limit: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)
    offset: int = Field(default=0, ge=0)


class ListProjectsResponse(BaseModel):
    """List projects response."""

    projects: list[ProjectResponse]  # Newest first
    total: int
    limit: int
    offset: int
    has_more: bool


class ListProjectsUseCase:
    """Use case for browsing projects with filtering and pagination."""

    def __init__(
        self,
        account_service: AccountService,
        category_service: CategoryService,
        project_service: ProjectService,
    ) -> None:
        """Initialize list projects use case.

        Args:
            account_service: Account domain service, resolves the owner filter
            category_service: Category domain service, resolves the category filter
            project_service: Project domain service
        """
        self.account_service = account_service
        self.category_service = category_service
        self.project_service = project_service

    async def execute(self, request: ListProjectsRequest) -> ListProjectsResponse:
        """Execute list projects flow.

        A filter naming an unknown account or category matches nothing, so
        the result is an empty page rather than an error.
        """
        with logfire.span(
            "list_projects.execute",
            username=request.username,
            category=request.category,
            limit=request.limit,
            offset=request.offset,
        ):
            owner_id = None
            if request.username:
                owner = await self.account_service.find_by_handle(request.username)
                if owner is None:
                    return self._empty(request)
                owner_id = owner.id

            category_id = None
            if request.category:
                category = await self.category_service.find_by_slug(request.category)
                if category is None:
                    return self._empty(request)
                category_id = category.id

            projects, total = await self.project_service.browse(
                owner_id=owner_id,
                category_id=category_id,
                limit=request.limit,
                offset=request.offset,
            )

            return ListProjectsResponse(
                projects=[ProjectResponse.from_project(p) for p in projects],
                total=total,
                limit=request.limit,
                offset=request.offset,
                has_more=request.offset + request.limit < total,
            )

    @staticmethod
    def _empty(request: ListProjectsRequest) -> ListProjectsResponse:
        logfire.info(
            "Project filter matches nothing",
            username=request.username,
            category=request.category,
        )
        return ListProjectsResponse(
            projects=[],
            total=0,
            limit=request.limit,
            offset=request.offset,
            has_more=False,
        )
