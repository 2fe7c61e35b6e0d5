"""Domain services."""

from .account_service import AccountService
from .base import Service
from .category_service import CategoryService
from .engagement_counter import EngagementCounter, ViewCount
from .identity_allocator import IdentityAllocator, NewAccount
from .project_service import ProjectService
from .session_gate import GateAction, GateDecision, RouteClass, SessionGate
from .session_service import SessionResolution, SessionService

__all__ = [
    "AccountService",
    "CategoryService",
    "EngagementCounter",
    "GateAction",
    "GateDecision",
    "IdentityAllocator",
    "NewAccount",
    "ProjectService",
    "RouteClass",
    "Service",
    "SessionGate",
    "SessionResolution",
    "SessionService",
    "ViewCount",
]
