"""Client for the showcase HTTP API."""

from .client import ShowcaseApiClient, ViewCountResult
from .view_tracker import ViewTracker

__all__ = [
    "ShowcaseApiClient",
    "ViewCountResult",
    "ViewTracker",
]
