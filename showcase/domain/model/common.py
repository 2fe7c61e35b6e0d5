"""Base model for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable base for accounts, categories, projects and sessions.

    Changes go through `model_copy(update=...)`.
    """

    model_config = ConfigDict(frozen=True)
