"""Submit project use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from showcase.domain.error import NotFoundError, ValidationError
from showcase.domain.model import Project
from showcase.domain.service import AccountService, CategoryService, ProjectService


class SubmitProjectRequest(BaseModel):
    """Submit project request."""

    auth_id: str  # Subject of the resolved session
    title: str
    description: str
    website_url: str | None = None
    category_slug: str | None = None


class ProjectResponse(BaseModel):
    """Project as returned to callers."""

    id: str
    owner_id: str
    title: str
    slug: str
    description: str
    website_url: str | None
    category_id: str | None = None
    views: int
    created_at: datetime

    @classmethod
    def from_project(cls, project: Project) -> "ProjectResponse":
        return cls(
            id=str(project.id),
            owner_id=str(project.owner_id),
            title=project.title,
            slug=project.slug.root,
            description=project.description,
            website_url=project.website_url,
            category_id=str(project.category_id) if project.category_id else None,
            views=project.views,
            created_at=project.created_at,
        )


class SubmitProjectResponse(BaseModel):
    """Submit project response."""

    success: bool = True
    project: ProjectResponse


class SubmitProjectUseCase:
    """Use case for listing a new project."""

    def __init__(
        self,
        account_service: AccountService,
        category_service: CategoryService,
        project_service: ProjectService,
    ) -> None:
        """Initialize submit project use case.

        Args:
            account_service: Account domain service
            category_service: Category domain service
            project_service: Project domain service
        """
        self.account_service = account_service
        self.category_service = category_service
        self.project_service = project_service

    async def execute(self, request: SubmitProjectRequest) -> SubmitProjectResponse:
        """Execute submit flow.

        Raises:
            NotFoundError: If the session subject has no account, or the
                category slug names no category
            ValidationError: If the project fields are invalid
        """
        owner = await self.account_service.get_by_auth_id(request.auth_id)

        category_id = None
        if request.category_slug:
            category = await self.category_service.find_by_slug(request.category_slug)
            if category is None:
                raise NotFoundError("Category", request.category_slug)
            category_id = category.id

        with logfire.span(
            "submit_project.execute", owner=owner.handle.root, title=request.title
        ):
            try:
                project = await self.project_service.submit(
                    owner=owner,
                    title=request.title,
                    description=request.description,
                    website_url=request.website_url,
                    category_id=category_id,
                )
            except PydanticValidationError as e:
                error = e.errors()[0]
                field = ".".join(str(part) for part in error["loc"]) or "project"
                raise ValidationError(field, error["msg"]) from e

            return SubmitProjectResponse(project=ProjectResponse.from_project(project))
