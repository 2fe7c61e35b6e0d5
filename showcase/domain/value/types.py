"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

import re
from enum import Enum

from pydantic import field_validator

from showcase.domain.value.common import RootValueObject

HANDLE_MAX_LENGTH = 64
SLUG_MAX_LENGTH = 100


class AccountRole(str, Enum):
    """Role of an account in the directory."""

    SUBMITTER = "submitter"
    CREATOR = "creator"
    ADMIN = "admin"


class ViewConsistency(str, Enum):
    """Consistency guarantee attached to a view count update.

    ATOMIC counts come from a single store-side increment and are exact
    under concurrency. BEST_EFFORT counts come from a read-modify-write and
    may lose updates when visits to the same project race.
    """

    ATOMIC = "atomic"
    BEST_EFFORT = "best_effort"


class Handle(RootValueObject[str]):
    """Public unique username of an account.

    Handles appear in project URLs, so they may not contain whitespace,
    slashes or "@".
    """

    @field_validator("root")
    @classmethod
    def validate_handle_format(cls, v: str) -> str:
        """Validate handle length and characters."""
        if len(v) < 1 or len(v) > HANDLE_MAX_LENGTH:
            raise ValueError(f"Handle must be 1-{HANDLE_MAX_LENGTH} characters")
        if re.search(r"[\s/@]", v):
            raise ValueError("Handle may not contain whitespace, '/' or '@'")
        return v


class Email(RootValueObject[str]):
    """Account email address."""

    @field_validator("root")
    @classmethod
    def validate_email_format(cls, v: str) -> str:
        """Validate there is exactly one '@' with text on both sides."""
        local, sep, domain = v.partition("@")
        if not sep or not local or not domain or "@" in domain:
            raise ValueError("Email must look like local@domain")
        if len(v) > 255:
            raise ValueError("Email must be at most 255 characters")
        return v

    @property
    def local_part(self) -> str:
        """Text before the '@'."""
        return self.root.partition("@")[0]


class Slug(RootValueObject[str]):
    """URL-safe slug for projects.

    Lowercase, alphanumeric with hyphens, 1-100 characters.
    Examples: 'open-wallet-kit', 'dao-toolbox-2'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        if len(v) > SLUG_MAX_LENGTH:
            raise ValueError(f"Slug must be 1-{SLUG_MAX_LENGTH} characters")
        return v
