"""Project routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, Response, status
from pydantic import BaseModel, Field

from showcase.application.usecase.project import (
    GetProjectRequest,
    GetProjectResponse,
    GetProjectUseCase,
    IncrementViewsRequest,
    IncrementViewsResponse,
    IncrementViewsUseCase,
    ListProjectsRequest,
    ListProjectsResponse,
    ListProjectsUseCase,
    SubmitProjectRequest,
    SubmitProjectResponse,
    SubmitProjectUseCase,
)
from showcase.application.usecase.project.list_projects import MAX_PAGE_SIZE
from showcase.config import AuthSettings
from showcase.domain.error import (
    ConflictError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from showcase.domain.service import SessionService
from showcase.interface.api.session import require_session

router = APIRouter(prefix="/api/projects", tags=["projects"], route_class=DishkaRoute)


class SubmitProjectAPIRequest(BaseModel):
    """API request for submitting a project."""

    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1, max_length=5000)
    website_url: str | None = None
    category_slug: str | None = Field(default=None, max_length=100)


@router.post(
    "", response_model=SubmitProjectResponse, status_code=status.HTTP_201_CREATED
)
async def submit_project(
    request: SubmitProjectAPIRequest,
    http_request: Request,
    response: Response,
    submit_project_use_case: FromDishka[SubmitProjectUseCase],
    session_service: FromDishka[SessionService],
    auth_settings: FromDishka[AuthSettings],
) -> SubmitProjectResponse:
    """List a new project owned by the signed-in account.

    Requires authentication.

    Raises:
        HTTPException: 401 without a session, 404 if the account was never
            provisioned or the category does not exist,
            400 on invalid fields
    """
    auth_id = require_session(http_request, response, session_service, auth_settings)

    try:
        return await submit_project_use_case.execute(
            SubmitProjectRequest(
                auth_id=auth_id,
                title=request.title,
                description=request.description,
                website_url=request.website_url,
                category_slug=request.category_slug,
            )
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except (ValidationError, ConflictError) as e:
        logfire.warn("Project submission rejected", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except StorageError as e:
        logfire.error("Project submission storage failure", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to submit project",
        )


@router.post("/{project_id}/view", response_model=IncrementViewsResponse)
async def increment_views(
    project_id: str,
    increment_views_use_case: FromDishka[IncrementViewsUseCase],
) -> IncrementViewsResponse:
    """Count one view of a project.

    No authentication required.

    Args:
        project_id: Project UUID
        increment_views_use_case: Increment views use case from DI

    Returns:
        New view count and whether it is exact ("atomic") or may have lost
        concurrent updates ("best_effort")

    Raises:
        HTTPException: 404 if the project does not exist, 500 on storage failure
    """
    try:
        return await increment_views_use_case.execute(
            IncrementViewsRequest(project_id=project_id)
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except StorageError as e:
        logfire.error(
            "View increment failed", project_id=project_id, error=str(e)
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to increment views",
        )


@router.get("", response_model=ListProjectsResponse)
async def list_projects(
    list_projects_use_case: FromDishka[ListProjectsUseCase],
    username: str | None = None,
    category: str | None = None,
    limit: int = 50,
    offset: int = 0,
) -> ListProjectsResponse:
    """Browse projects, newest first.

    No authentication required.

    Args:
        list_projects_use_case: List projects use case from DI
        username: Only projects owned by this handle (optional)
        category: Only projects in the category with this slug (optional)
        limit: Maximum number of projects to return
        offset: Number of projects to skip

    Returns:
        One page of projects, the total and whether more pages follow

    Raises:
        HTTPException: 400 on invalid pagination, 500 on storage failure
    """
    if limit < 1 or limit > MAX_PAGE_SIZE:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Limit must be between 1 and {MAX_PAGE_SIZE}",
        )
    if offset < 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Offset must be non-negative",
        )

    try:
        return await list_projects_use_case.execute(
            ListProjectsRequest(
                username=username,
                category=category,
                limit=limit,
                offset=offset,
            )
        )
    except StorageError as e:
        logfire.error("Project listing failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list projects",
        )


@router.get("/{project_id}", response_model=GetProjectResponse)
async def get_project(
    project_id: str,
    get_project_use_case: FromDishka[GetProjectUseCase],
) -> GetProjectResponse:
    """Get a single project.

    No authentication required.

    Raises:
        HTTPException: 404 if the project does not exist, 500 on storage failure
    """
    try:
        return await get_project_use_case.execute(
            GetProjectRequest(project_id=project_id)
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except StorageError as e:
        logfire.error("Project lookup failed", project_id=project_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load project",
        )
