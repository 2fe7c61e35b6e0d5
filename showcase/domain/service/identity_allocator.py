"""Handle allocation for newly provisioned accounts."""

import re
from typing import Optional
from uuid import uuid4

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from showcase.domain.error import (
    ConflictError,
    HandleAllocationError,
    StorageError,
    ValidationError,
)
from showcase.domain.model import Account
from showcase.domain.repository import AccountRepository
from showcase.domain.value import AccountId, AccountRole, Email, Handle
from showcase.domain.value.types import HANDLE_MAX_LENGTH

from .base import Service

DEFAULT_MAX_ATTEMPTS = 100

# Used when nothing of the email's local part survives clean-up
FALLBACK_HANDLE_BASE = "user"

_DISALLOWED_HANDLE_CHARS = re.compile(r"[\s/@]")


class NewAccount(BaseModel):
    """Validated input for account provisioning."""

    auth_id: str
    email: Email
    desired_handle: Optional[str] = None
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None
    role: AccountRole = AccountRole.SUBMITTER


class IdentityAllocator(Service):
    """Finds a free handle for a new account and inserts it.

    The existence check before each insert only saves a round trip; two
    allocations can pass it for the same candidate at once. The store's
    unique constraint decides, and a handle conflict at insert time moves on to
    the next candidate: base, base1, base2, ...
    """

    def __init__(
        self,
        account_repository: AccountRepository,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        """Initialize identity allocator.

        Args:
            account_repository: Account repository
            max_attempts: Number of handle candidates to try before giving up
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.account_repository = account_repository
        self.max_attempts = max_attempts

    async def allocate(self, new_account: NewAccount) -> Account:
        """Return the account for `new_account.auth_id`, creating it if needed.

        Args:
            new_account: Provisioning input

        Returns:
            The existing account for the auth subject, or the newly created one

        Raises:
            ValidationError: If no valid handle base can be derived
            ConflictError: If the email belongs to another auth subject
            HandleAllocationError: If every candidate within the bound is taken
            StorageError: If the store fails
        """
        with logfire.span(
            "identity_allocator.allocate", auth_id=new_account.auth_id
        ):
            existing = await self.account_repository.find_by_auth_id(
                new_account.auth_id
            )
            if existing:
                logfire.info(
                    "Account already provisioned",
                    auth_id=new_account.auth_id,
                    account_id=str(existing.id),
                )
                return existing

            base = self._base_handle(new_account)

            for attempt in range(self.max_attempts):
                candidate = self._candidate(base, attempt)

                if await self.account_repository.handle_exists(candidate):
                    logfire.debug(
                        "Handle taken, trying next suffix",
                        base=base,
                        candidate=candidate.root,
                        attempt=attempt,
                    )
                    continue

                result = await self.account_repository.insert(
                    self._build(new_account, candidate)
                )
                if not result.is_conflict:
                    if result.account is None:
                        raise StorageError(
                            f"Insert of '{candidate.root}' reported success "
                            "without an account"
                        )
                    logfire.info(
                        "Account provisioned",
                        account_id=str(result.account.id),
                        handle=candidate.root,
                        attempts=attempt + 1,
                    )
                    return result.account

                if result.conflict_field == "handle":
                    logfire.info(
                        "Handle claimed concurrently, trying next suffix",
                        candidate=candidate.root,
                        attempt=attempt,
                    )
                    continue

                if result.conflict_field == "auth_id":
                    # Same subject provisioned by a concurrent request
                    winner = await self.account_repository.find_by_auth_id(
                        new_account.auth_id
                    )
                    if winner is None:
                        raise StorageError(
                            f"auth_id conflict for {new_account.auth_id} "
                            "but no account found"
                        )
                    logfire.info(
                        "Account provisioned concurrently",
                        auth_id=new_account.auth_id,
                        account_id=str(winner.id),
                    )
                    return winner

                logfire.warn(
                    "Account insert rejected",
                    auth_id=new_account.auth_id,
                    conflict_field=result.conflict_field,
                )
                raise ConflictError(
                    "Account",
                    result.conflict_field or "unknown",
                    new_account.email.root
                    if result.conflict_field == "email"
                    else candidate.root,
                )

            logfire.error(
                "Handle allocation exhausted",
                base=base,
                max_attempts=self.max_attempts,
            )
            raise HandleAllocationError(base, self.max_attempts)

    @staticmethod
    def _base_handle(new_account: NewAccount) -> str:
        """Caller-supplied handle, else the email's local part.

        A supplied handle must already be valid. A local part is cleaned
        up instead: characters a handle may not hold are dropped and the
        result is cut to the handle length limit.
        """
        if not new_account.desired_handle:
            base = _DISALLOWED_HANDLE_CHARS.sub("", new_account.email.local_part)
            return base[:HANDLE_MAX_LENGTH] or FALLBACK_HANDLE_BASE

        base = new_account.desired_handle.strip()
        try:
            Handle(base)
        except PydanticValidationError as e:
            raise ValidationError(
                "handle",
                f"cannot derive a handle from '{base}': {e.errors()[0]['msg']}",
            ) from e
        return base

    @staticmethod
    def _candidate(base: str, attempt: int) -> Handle:
        """Handle to try on the given attempt.

        Attempt 0 is the base itself; attempt n appends n, trimming the base
        so the result stays within the handle length limit.
        """
        if attempt == 0:
            return Handle(base)
        suffix = str(attempt)
        return Handle(base[: HANDLE_MAX_LENGTH - len(suffix)] + suffix)

    @staticmethod
    def _build(new_account: NewAccount, handle: Handle) -> Account:
        return Account(
            id=AccountId(uuid4()),
            auth_id=new_account.auth_id,
            email=new_account.email,
            handle=handle,
            display_name=new_account.display_name or new_account.email.local_part,
            avatar_url=new_account.avatar_url,
            role=new_account.role,
        )
