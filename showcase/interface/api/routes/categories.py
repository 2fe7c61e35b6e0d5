"""Category routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, Response, status
from pydantic import BaseModel, Field

from showcase.application.usecase.category import (
    CreateCategoryRequest,
    CreateCategoryResponse,
    CreateCategoryUseCase,
    GetCategoryRequest,
    GetCategoryResponse,
    GetCategoryUseCase,
    ListCategoriesResponse,
    ListCategoriesUseCase,
)
from showcase.config import AuthSettings
from showcase.domain.error import (
    ConflictError,
    NotAuthorizedError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from showcase.domain.service import SessionService
from showcase.interface.api.session import require_session

router = APIRouter(
    prefix="/api/categories", tags=["categories"], route_class=DishkaRoute
)


class CreateCategoryAPIRequest(BaseModel):
    """API request for creating a category."""

    name: str = Field(min_length=1, max_length=100)
    slug: str = Field(min_length=1, max_length=100)
    description: str | None = None
    icon: str | None = None
    color: str | None = None
    gradient: str | None = None
    sort_order: int = 0


@router.get("", response_model=ListCategoriesResponse)
async def list_categories(
    list_categories_use_case: FromDishka[ListCategoriesUseCase],
) -> ListCategoriesResponse:
    """Active categories in display order, each with its project count.

    Raises:
        HTTPException: 500 on storage failure
    """
    try:
        return await list_categories_use_case.execute()
    except StorageError as e:
        logfire.error("Category listing failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list categories",
        )


@router.get("/{slug}", response_model=GetCategoryResponse)
async def get_category(
    slug: str,
    get_category_use_case: FromDishka[GetCategoryUseCase],
) -> GetCategoryResponse:
    """Get a category by slug.

    Raises:
        HTTPException: 404 if no category has this slug
    """
    try:
        return await get_category_use_case.execute(GetCategoryRequest(slug=slug))
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except StorageError as e:
        logfire.error("Category lookup failed", slug=slug, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load category",
        )


@router.post(
    "", response_model=CreateCategoryResponse, status_code=status.HTTP_201_CREATED
)
async def create_category(
    request: CreateCategoryAPIRequest,
    http_request: Request,
    response: Response,
    create_category_use_case: FromDishka[CreateCategoryUseCase],
    session_service: FromDishka[SessionService],
    auth_settings: FromDishka[AuthSettings],
) -> CreateCategoryResponse:
    """Add a category.

    Requires an admin session.

    Raises:
        HTTPException: 401 without a session, 403 for non-admins, 404 if the
            account was never provisioned, 400 on invalid fields, 409 if the
            slug is taken
    """
    auth_id = require_session(http_request, response, session_service, auth_settings)

    try:
        return await create_category_use_case.execute(
            CreateCategoryRequest(
                auth_id=auth_id,
                name=request.name,
                slug=request.slug,
                description=request.description,
                icon=request.icon,
                color=request.color,
                gradient=request.gradient,
                sort_order=request.sort_order,
            )
        )
    except NotAuthorizedError as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(e),
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValidationError as e:
        logfire.warn("Category creation rejected", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except ConflictError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )
    except StorageError as e:
        logfire.error("Category creation storage failure", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create category",
        )
