"""Create category use case."""

import logfire
from pydantic import BaseModel

from showcase.domain.error import NotAuthorizedError
from showcase.domain.service import AccountService, CategoryService
from showcase.domain.value import AccountRole

from .list_categories import CategoryResponse


class CreateCategoryRequest(BaseModel):
    """Create category request."""

    auth_id: str  # Subject of the resolved session
    name: str
    slug: str
    description: str | None = None
    icon: str | None = None
    color: str | None = None
    gradient: str | None = None
    sort_order: int = 0


class CreateCategoryResponse(BaseModel):
    """Create category response."""

    success: bool = True
    category: CategoryResponse


class CreateCategoryUseCase:
    """Use case for adding a category. Admins only."""

    def __init__(
        self, account_service: AccountService, category_service: CategoryService
    ) -> None:
        """Initialize create category use case.

        Args:
            account_service: Account domain service
            category_service: Category domain service
        """
        self.account_service = account_service
        self.category_service = category_service

    async def execute(self, request: CreateCategoryRequest) -> CreateCategoryResponse:
        """Execute create flow.

        Raises:
            NotFoundError: If the session subject has no account
            NotAuthorizedError: If the account is not an admin
            ValidationError: If a field is invalid
            ConflictError: If the slug is taken
        """
        account = await self.account_service.get_by_auth_id(request.auth_id)
        if account.role != AccountRole.ADMIN:
            logfire.warn(
                "Category creation refused",
                handle=account.handle.root,
                role=account.role.value,
            )
            raise NotAuthorizedError("create categories", account.handle.root)

        category = await self.category_service.create(
            slug=request.slug,
            name=request.name,
            description=request.description,
            icon=request.icon,
            color=request.color,
            gradient=request.gradient,
            sort_order=request.sort_order,
        )
        # A new category has no projects yet
        return CreateCategoryResponse(
            category=CategoryResponse.from_category(category, 0)
        )
