"""Category use cases."""

from .create_category import (
    CreateCategoryRequest,
    CreateCategoryResponse,
    CreateCategoryUseCase,
)
from .get_category import GetCategoryRequest, GetCategoryResponse, GetCategoryUseCase
from .list_categories import (
    CategoryResponse,
    ListCategoriesResponse,
    ListCategoriesUseCase,
)

__all__ = [
    "CategoryResponse",
    "CreateCategoryRequest",
    "CreateCategoryResponse",
    "CreateCategoryUseCase",
    "GetCategoryRequest",
    "GetCategoryResponse",
    "GetCategoryUseCase",
    "ListCategoriesResponse",
    "ListCategoriesUseCase",
]
