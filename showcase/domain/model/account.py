"""Account aggregate root.

Accounts are provisioned once per external auth subject, the first time
that subject signs in.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from showcase.domain.model.common import DomainModel
from showcase.domain.value import AccountId, AccountRole, Email, Handle


class Account(DomainModel):
    """Account aggregate root.

    `auth_id`, `email` and `handle` are each unique across all accounts;
    the store's constraints are the authority for that.
    """

    id: AccountId
    auth_id: str = Field(min_length=1, max_length=255)
    email: Email
    handle: Handle
    display_name: Optional[str] = Field(default=None, max_length=255)
    avatar_url: Optional[str] = None
    role: AccountRole = AccountRole.SUBMITTER
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
