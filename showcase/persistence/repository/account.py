"""PostgreSQL implementation of Account repository."""

from typing import Optional

import logfire
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from showcase.domain.error import StorageError
from showcase.domain.model import Account
from showcase.domain.repository import AccountRepository, InsertResult
from showcase.domain.value import AccountId, Handle
from showcase.persistence.mappers import account_to_dict, row_to_account
from showcase.persistence.repository.errors import violated_constraint
from showcase.persistence.tables import (
    UQ_ACCOUNTS_AUTH_ID,
    UQ_ACCOUNTS_EMAIL,
    UQ_ACCOUNTS_HANDLE,
    accounts_table,
)

_CONFLICT_FIELDS = {
    UQ_ACCOUNTS_AUTH_ID: "auth_id",
    UQ_ACCOUNTS_EMAIL: "email",
    UQ_ACCOUNTS_HANDLE: "handle",
}


class PostgresAccountRepository(AccountRepository):
    """PostgreSQL implementation of AccountRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID."""
        stmt = select(accounts_table).where(accounts_table.c.id == account_id)
        return await self._fetch_one(stmt)

    async def find_by_auth_id(self, auth_id: str) -> Optional[Account]:
        """Find an account by its external auth subject."""
        stmt = select(accounts_table).where(accounts_table.c.auth_id == auth_id)
        return await self._fetch_one(stmt)

    async def find_by_handle(self, handle: Handle) -> Optional[Account]:
        """Find an account by its public handle."""
        stmt = select(accounts_table).where(accounts_table.c.handle == handle.root)
        return await self._fetch_one(stmt)

    async def handle_exists(self, handle: Handle) -> bool:
        """Check whether a handle is taken."""
        stmt = (
            select(func.count())
            .select_from(accounts_table)
            .where(accounts_table.c.handle == handle.root)
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError(f"Handle lookup failed: {e}") from e
        return (result.scalar() or 0) > 0

    async def insert(self, account: Account) -> InsertResult:
        """Insert a new account.

        The insert runs inside a savepoint so a unique violation leaves the
        surrounding transaction usable for the next attempt.
        """
        with logfire.span("account_repository.insert", handle=account.handle.root):
            stmt = accounts_table.insert().values(**account_to_dict(account))
            try:
                async with self.session.begin_nested():
                    await self.session.execute(stmt)
            except IntegrityError as e:
                constraint = violated_constraint(e, tuple(_CONFLICT_FIELDS))
                field = _CONFLICT_FIELDS.get(constraint or "")
                if field is None:
                    raise StorageError(f"Account insert rejected: {e.orig}") from e
                logfire.debug(
                    "Account insert conflict", field=field, constraint=constraint
                )
                return InsertResult.conflict(field)
            except SQLAlchemyError as e:
                raise StorageError(f"Account insert failed: {e}") from e

            return InsertResult.inserted(account)

    async def _fetch_one(self, stmt) -> Optional[Account]:
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError(f"Account lookup failed: {e}") from e
        row = result.mappings().first()
        return row_to_account(dict(row)) if row else None
