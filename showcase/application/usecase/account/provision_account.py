"""Provision account use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from showcase.domain.error import ValidationError
from showcase.domain.model import Account
from showcase.domain.service import IdentityAllocator, NewAccount
from showcase.domain.value import AccountRole, Email


class ProvisionAccountRequest(BaseModel):
    """Provision account request.

    `auth_id` and `email` are optional here so that their absence is
    reported as a field-level ValidationError rather than a schema error.
    """

    auth_id: str | None = None
    email: str | None = None
    handle: str | None = None
    display_name: str | None = None
    avatar_url: str | None = None
    role: str | None = None


class AccountResponse(BaseModel):
    """Account as returned to callers."""

    id: str
    auth_id: str
    email: str
    handle: str
    display_name: str | None
    avatar_url: str | None
    role: AccountRole
    created_at: datetime

    @classmethod
    def from_account(cls, account: Account) -> "AccountResponse":
        return cls(
            id=str(account.id),
            auth_id=account.auth_id,
            email=account.email.root,
            handle=account.handle.root,
            display_name=account.display_name,
            avatar_url=account.avatar_url,
            role=account.role,
            created_at=account.created_at,
        )


class ProvisionAccountResponse(BaseModel):
    """Provision account response."""

    success: bool = True
    account: AccountResponse


class ProvisionAccountUseCase:
    """Use case for provisioning the account of a newly signed-in subject.

    Idempotent per `auth_id`: calling it again returns the same account.
    """

    def __init__(
        self,
        identity_allocator: IdentityAllocator,
        default_role: AccountRole = AccountRole.SUBMITTER,
    ) -> None:
        """Initialize provision account use case.

        Args:
            identity_allocator: Handle allocation domain service
            default_role: Role given when the request names none
        """
        self.identity_allocator = identity_allocator
        self.default_role = default_role

    async def execute(
        self, request: ProvisionAccountRequest
    ) -> ProvisionAccountResponse:
        """Execute provisioning flow.

        Steps:
        1. Fail fast on a missing or blank auth_id or email
        2. Validate email and role
        3. Allocate a handle and insert the account (via IdentityAllocator)

        Args:
            request: Provision account request

        Returns:
            Provision account response with the account

        Raises:
            ValidationError: If a required field is missing or malformed
            ConflictError: If the email is taken or no handle is free
            StorageError: If the store fails
        """
        new_account = self._validate(request)

        with logfire.span("provision_account.execute", auth_id=new_account.auth_id):
            account = await self.identity_allocator.allocate(new_account)
            return ProvisionAccountResponse(
                account=AccountResponse.from_account(account)
            )

    def _validate(self, request: ProvisionAccountRequest) -> NewAccount:
        auth_id = (request.auth_id or "").strip()
        if not auth_id:
            raise ValidationError("auth_id", "is required")

        raw_email = (request.email or "").strip()
        if not raw_email:
            raise ValidationError("email", "is required")

        try:
            email = Email(raw_email)
        except PydanticValidationError as e:
            raise ValidationError("email", e.errors()[0]["msg"]) from e

        role = self.default_role
        if request.role:
            try:
                role = AccountRole(request.role)
            except ValueError as e:
                raise ValidationError(
                    "role", f"must be one of {[r.value for r in AccountRole]}"
                ) from e

        return NewAccount(
            auth_id=auth_id,
            email=email,
            desired_handle=(request.handle or "").strip() or None,
            display_name=request.display_name or None,
            avatar_url=request.avatar_url or None,
            role=role,
        )
