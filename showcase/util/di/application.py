"""Application layer DI providers."""

from dishka import Scope, provide

from showcase.application.usecase.account import ProvisionAccountUseCase
from showcase.application.usecase.category import (
    CreateCategoryUseCase,
    GetCategoryUseCase,
    ListCategoriesUseCase,
)
from showcase.application.usecase.project import (
    GetDashboardUseCase,
    GetProjectUseCase,
    IncrementViewsUseCase,
    ListProjectsUseCase,
    SubmitProjectUseCase,
)
from showcase.config import ProvisioningSettings
from showcase.domain.service import (
    AccountService,
    CategoryService,
    EngagementCounter,
    IdentityAllocator,
    ProjectService,
)
from showcase.domain.value import AccountRole
from showcase.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Account use cases
    @provide(scope=Scope.REQUEST)
    def get_provision_account_use_case(
        self,
        identity_allocator: IdentityAllocator,
        provisioning: ProvisioningSettings,
    ) -> ProvisionAccountUseCase:
        """Provide provision account use case."""
        return ProvisionAccountUseCase(
            identity_allocator=identity_allocator,
            default_role=AccountRole(provisioning.default_role),
        )

    # Project use cases
    @provide(scope=Scope.REQUEST)
    def get_increment_views_use_case(
        self, engagement_counter: EngagementCounter
    ) -> IncrementViewsUseCase:
        """Provide increment views use case."""
        return IncrementViewsUseCase(engagement_counter=engagement_counter)

    @provide(scope=Scope.REQUEST)
    def get_submit_project_use_case(
        self,
        account_service: AccountService,
        category_service: CategoryService,
        project_service: ProjectService,
    ) -> SubmitProjectUseCase:
        """Provide submit project use case."""
        return SubmitProjectUseCase(
            account_service=account_service,
            category_service=category_service,
            project_service=project_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_dashboard_use_case(
        self, account_service: AccountService, project_service: ProjectService
    ) -> GetDashboardUseCase:
        """Provide get dashboard use case."""
        return GetDashboardUseCase(
            account_service=account_service, project_service=project_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_projects_use_case(
        self,
        account_service: AccountService,
        category_service: CategoryService,
        project_service: ProjectService,
    ) -> ListProjectsUseCase:
        """Provide list projects use case."""
        return ListProjectsUseCase(
            account_service=account_service,
            category_service=category_service,
            project_service=project_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_project_use_case(
        self, project_service: ProjectService
    ) -> GetProjectUseCase:
        """Provide get project use case."""
        return GetProjectUseCase(project_service=project_service)

    # Category use cases
    @provide(scope=Scope.REQUEST)
    def get_list_categories_use_case(
        self, category_service: CategoryService
    ) -> ListCategoriesUseCase:
        """Provide list categories use case."""
        return ListCategoriesUseCase(category_service=category_service)

    @provide(scope=Scope.REQUEST)
    def get_get_category_use_case(
        self, category_service: CategoryService
    ) -> GetCategoryUseCase:
        """Provide get category use case."""
        return GetCategoryUseCase(category_service=category_service)

    @provide(scope=Scope.REQUEST)
    def get_create_category_use_case(
        self, account_service: AccountService, category_service: CategoryService
    ) -> CreateCategoryUseCase:
        """Provide create category use case."""
        return CreateCategoryUseCase(
            account_service=account_service, category_service=category_service
        )
