"""Account repository interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from showcase.domain.model.account import Account
from showcase.domain.value import AccountId, Handle


class InsertStatus(str, Enum):
    """Outcome of an insert attempt."""

    INSERTED = "inserted"
    CONFLICT = "conflict"


@dataclass(frozen=True)
class InsertResult:
    """Tagged result of `AccountRepository.insert`.

    On CONFLICT, `conflict_field` names the unique column that rejected the
    row ("handle", "auth_id" or "email").
    """

    status: InsertStatus
    account: Optional[Account] = None
    conflict_field: Optional[str] = None

    @classmethod
    def inserted(cls, account: Account) -> "InsertResult":
        return cls(status=InsertStatus.INSERTED, account=account)

    @classmethod
    def conflict(cls, field: str) -> "InsertResult":
        return cls(status=InsertStatus.CONFLICT, conflict_field=field)

    @property
    def is_conflict(self) -> bool:
        return self.status == InsertStatus.CONFLICT


class AccountRepository(ABC):
    """Repository for Account aggregate.

    Implementations must enforce uniqueness of `auth_id`, `email` and
    `handle` at insert time and report violations through `InsertResult`
    rather than by raising.
    """

    @abstractmethod
    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID.

        Args:
            account_id: The account's unique identifier

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_auth_id(self, auth_id: str) -> Optional[Account]:
        """Find an account by its external auth subject.

        Args:
            auth_id: External auth subject

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_handle(self, handle: Handle) -> Optional[Account]:
        """Find an account by its public handle.

        Args:
            handle: Account handle

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def handle_exists(self, handle: Handle) -> bool:
        """Check whether a handle is taken.

        The answer may be stale by the time the caller acts on it.

        Args:
            handle: Handle to look up

        Returns:
            True if an account holds this handle
        """
        pass

    @abstractmethod
    async def insert(self, account: Account) -> InsertResult:
        """Insert a new account.

        Args:
            account: Account to insert

        Returns:
            INSERTED with the stored account, or CONFLICT naming the
            violated unique field

        Raises:
            StorageError: If the store fails for any other reason
        """
        pass
