"""Session value held by the auth collaborator."""

from datetime import datetime

from showcase.domain.model.common import DomainModel


class Session(DomainModel):
    """A resolved session.

    Only the subject and expiry are visible here; the token's encoding is
    owned by the auth collaborator.
    """

    auth_id: str
    issued_at: datetime
    expires_at: datetime
