"""Project use cases."""

from .get_dashboard import (
    DashboardStats,
    GetDashboardRequest,
    GetDashboardResponse,
    GetDashboardUseCase,
)
from .get_project import GetProjectRequest, GetProjectResponse, GetProjectUseCase
from .increment_views import (
    IncrementViewsRequest,
    IncrementViewsResponse,
    IncrementViewsUseCase,
)
from .list_projects import (
    ListProjectsRequest,
    ListProjectsResponse,
    ListProjectsUseCase,
)
from .submit_project import (
    ProjectResponse,
    SubmitProjectRequest,
    SubmitProjectResponse,
    SubmitProjectUseCase,
)

__all__ = [
    "DashboardStats",
    "GetDashboardRequest",
    "GetDashboardResponse",
    "GetDashboardUseCase",
    "GetProjectRequest",
    "GetProjectResponse",
    "GetProjectUseCase",
    "IncrementViewsRequest",
    "IncrementViewsResponse",
    "IncrementViewsUseCase",
    "ListProjectsRequest",
    "ListProjectsResponse",
    "ListProjectsUseCase",
    "ProjectResponse",
    "SubmitProjectRequest",
    "SubmitProjectResponse",
    "SubmitProjectUseCase",
]
