"""Domain layer DI providers."""

from dishka import Scope, provide

from showcase.config import AuthSettings, ProvisioningSettings, RoutingSettings
from showcase.domain.repository import (
    AccountRepository,
    CategoryRepository,
    ProjectRepository,
)
from showcase.domain.service import (
    AccountService,
    CategoryService,
    EngagementCounter,
    IdentityAllocator,
    ProjectService,
    SessionGate,
    SessionService,
)
from showcase.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Services backed by repositories are REQUEST-scoped to align with the
    repository/session lifecycle. Session handling holds no per-request
    state and is APP-scoped so the gate middleware can reach it outside
    a request scope.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_session_service(self, auth_settings: AuthSettings) -> SessionService:
        """Provide session resolution domain service."""
        return SessionService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_session_gate(
        self, session_service: SessionService, routing: RoutingSettings
    ) -> SessionGate:
        """Provide session-gated routing policy."""
        return SessionGate(session_service=session_service, routing=routing)

    @provide
    def get_identity_allocator(
        self,
        account_repository: AccountRepository,
        provisioning: ProvisioningSettings,
    ) -> IdentityAllocator:
        """Provide handle allocation domain service."""
        return IdentityAllocator(
            account_repository=account_repository,
            max_attempts=provisioning.max_handle_attempts,
        )

    @provide
    def get_engagement_counter(
        self, project_repository: ProjectRepository
    ) -> EngagementCounter:
        """Provide view counting domain service."""
        return EngagementCounter(project_repository=project_repository)

    @provide
    def get_account_service(
        self, account_repository: AccountRepository
    ) -> AccountService:
        """Provide account domain service."""
        return AccountService(account_repository=account_repository)

    @provide
    def get_project_service(
        self, project_repository: ProjectRepository
    ) -> ProjectService:
        """Provide project domain service."""
        return ProjectService(project_repository=project_repository)

    @provide
    def get_category_service(
        self,
        category_repository: CategoryRepository,
        project_repository: ProjectRepository,
    ) -> CategoryService:
        """Provide category domain service."""
        return CategoryService(
            category_repository=category_repository,
            project_repository=project_repository,
        )
