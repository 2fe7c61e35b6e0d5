"""Account domain service."""

from typing import Optional

import logfire
from pydantic import ValidationError as PydanticValidationError

from showcase.domain.error import NotFoundError
from showcase.domain.model import Account
from showcase.domain.repository import AccountRepository
from showcase.domain.value import Handle

from .base import Service


class AccountService(Service):
    """Domain service for account lookups."""

    def __init__(self, account_repository: AccountRepository) -> None:
        """Initialize account service.

        Args:
            account_repository: Account repository
        """
        self.account_repository = account_repository

    async def get_by_auth_id(self, auth_id: str) -> Account:
        """Get the account provisioned for an auth subject.

        Args:
            auth_id: External auth subject

        Returns:
            Account entity

        Raises:
            NotFoundError: If the subject was never provisioned
        """
        with logfire.span("account_service.get_by_auth_id", auth_id=auth_id):
            account = await self.account_repository.find_by_auth_id(auth_id)
            if not account:
                logfire.warn("Account not found", auth_id=auth_id)
                raise NotFoundError("Account", auth_id)
            logfire.info(
                "Account found", auth_id=auth_id, handle=account.handle.root
            )
            return account

    async def find_by_handle(self, handle: str) -> Optional[Account]:
        """Account with this handle, or None if there is none.

        A string that is not a valid handle cannot name an account.
        """
        try:
            parsed = Handle(handle)
        except PydanticValidationError:
            return None
        return await self.account_repository.find_by_handle(parsed)
