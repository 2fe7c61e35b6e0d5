"""In-memory account repository for testing."""

from typing import Optional

from showcase.domain.model.account import Account
from showcase.domain.repository.account import AccountRepository, InsertResult
from showcase.domain.value import AccountId, Handle


class InMemoryAccountRepository(AccountRepository):
    """In-memory implementation of AccountRepository for testing.

    Uniqueness checks and the write in `insert` run without yielding to
    the event loop, so concurrent tasks see them as one step.
    """

    def __init__(self) -> None:
        self._accounts: dict[AccountId, Account] = {}

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID."""
        return self._accounts.get(account_id)

    async def find_by_auth_id(self, auth_id: str) -> Optional[Account]:
        """Find an account by its external auth subject."""
        for account in self._accounts.values():
            if account.auth_id == auth_id:
                return account
        return None

    async def find_by_handle(self, handle: Handle) -> Optional[Account]:
        """Find an account by its public handle."""
        for account in self._accounts.values():
            if account.handle == handle:
                return account
        return None

    async def handle_exists(self, handle: Handle) -> bool:
        """Check whether a handle is taken."""
        return any(a.handle == handle for a in self._accounts.values())

    async def insert(self, account: Account) -> InsertResult:
        """Insert a new account, reporting the first violated unique field."""
        for existing in self._accounts.values():
            if existing.auth_id == account.auth_id:
                return InsertResult.conflict("auth_id")
            if existing.email == account.email:
                return InsertResult.conflict("email")
            if existing.handle == account.handle:
                return InsertResult.conflict("handle")
        self._accounts[account.id] = account
        return InsertResult.inserted(account)
