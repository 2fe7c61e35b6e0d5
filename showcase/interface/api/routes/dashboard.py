"""Dashboard routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, Response, status

from showcase.application.usecase.project import (
    GetDashboardRequest,
    GetDashboardResponse,
    GetDashboardUseCase,
)
from showcase.config import AuthSettings
from showcase.domain.error import NotFoundError
from showcase.domain.service import SessionService
from showcase.interface.api.session import require_session

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"], route_class=DishkaRoute)


@router.get("", response_model=GetDashboardResponse)
async def get_dashboard(
    http_request: Request,
    response: Response,
    get_dashboard_use_case: FromDishka[GetDashboardUseCase],
    session_service: FromDishka[SessionService],
    auth_settings: FromDishka[AuthSettings],
) -> GetDashboardResponse:
    """Profile, projects and stats of the signed-in account.

    Raises:
        HTTPException: 401 without a session, 404 if the account was never provisioned
    """
    auth_id = require_session(http_request, response, session_service, auth_settings)

    try:
        return await get_dashboard_use_case.execute(GetDashboardRequest(auth_id=auth_id))
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
