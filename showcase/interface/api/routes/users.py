"""Account provisioning routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from showcase.application.usecase.account import (
    ProvisionAccountRequest,
    ProvisionAccountResponse,
    ProvisionAccountUseCase,
)
from showcase.domain.error import ConflictError, StorageError, ValidationError
from showcase.util.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"], route_class=DishkaRoute)


class ProvisionAccountAPIRequest(BaseModel):
    """API request for provisioning an account.

    Accepts camelCase (`authId`) or snake_case (`auth_id`) keys.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    auth_id: str | None = None
    email: str | None = None
    handle: str | None = None
    display_name: str | None = None
    avatar_url: str | None = None
    role: str | None = None


@router.post("", response_model=ProvisionAccountResponse)
async def provision_account(
    request: ProvisionAccountAPIRequest,
    provision_account_use_case: FromDishka[ProvisionAccountUseCase],
) -> ProvisionAccountResponse:
    """Create the account for a signed-in subject, or return the existing one.

    Args:
        request: Subject, email and optional profile fields
        provision_account_use_case: Provision account use case from DI

    Returns:
        The subject's account

    Raises:
        HTTPException: 400 on missing fields, 409 on conflicts, 500 on storage failure

    Example:
        POST /api/users
        {"authId": "u1", "email": "alice@x.com"}

        Response:
        {"success": true, "account": {"handle": "alice", ...}}
    """
    try:
        return await provision_account_use_case.execute(
            ProvisionAccountRequest(**request.model_dump())
        )
    except ValidationError as e:
        logfire.warn("Account provisioning rejected", field=e.field, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except ConflictError as e:
        logfire.warn("Account provisioning conflict", field=e.field, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )
    except StorageError as e:
        logger.error("Account provisioning failed: %s", e)
        logfire.error("Account provisioning storage failure", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create user",
        )
