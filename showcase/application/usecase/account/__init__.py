"""Account use cases."""

from .provision_account import (
    AccountResponse,
    ProvisionAccountRequest,
    ProvisionAccountResponse,
    ProvisionAccountUseCase,
)

__all__ = [
    "AccountResponse",
    "ProvisionAccountRequest",
    "ProvisionAccountResponse",
    "ProvisionAccountUseCase",
]
