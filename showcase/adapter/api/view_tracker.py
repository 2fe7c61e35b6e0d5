"""Debounced, once-per-mount view tracking."""

import asyncio
from typing import Callable, Optional

import logfire

from showcase.adapter.error import ApiClientError

from .client import ShowcaseApiClient

DEFAULT_DELAY_SECONDS = 2.0


class ViewTracker:
    """Counts one view of a project per mount.

    `mount` schedules an increment after `delay` seconds. `unmount` before
    the delay elapses cancels it, so the request is never sent. Once the
    delay has elapsed the displayed count goes up by one straight away and
    the server's count is handed to `on_view_incremented`; a typical
    callback is `tracker.reconcile`. Without a callback the optimistic
    count stays as it is.

    API failures and callback errors are logged and dropped: tracking
    never raises into the page that owns the tracker.
    """

    def __init__(
        self,
        client: ShowcaseApiClient,
        project_id: str,
        initial_views: int = 0,
        delay: float = DEFAULT_DELAY_SECONDS,
        on_view_incremented: Optional[Callable[[int], None]] = None,
    ) -> None:
        self.client = client
        self.project_id = project_id
        self.delay = delay
        self.on_view_incremented = on_view_incremented
        self._views = initial_views
        self._has_tracked = False
        self._task: Optional[asyncio.Task] = None

    @property
    def views(self) -> int:
        """Count to display."""
        return self._views

    @property
    def has_tracked(self) -> bool:
        return self._has_tracked

    def mount(self) -> None:
        """Schedule the increment. Must be called from a running event loop."""
        if self._has_tracked or self._task is not None:
            return
        self._task = asyncio.get_running_loop().create_task(self._track())

    def unmount(self) -> None:
        """Cancel the increment if it has not fired yet."""
        if self._task is not None and not self._has_tracked:
            self._task.cancel()

    def reconcile(self, views: int) -> None:
        """Replace the displayed count with the server's."""
        self._views = views

    async def wait(self) -> None:
        """Wait for the scheduled increment, if any, to finish."""
        if self._task is None:
            return
        await asyncio.wait([self._task])

    async def _track(self) -> None:
        await asyncio.sleep(self.delay)

        # One-shot from here on, even if the request fails
        self._has_tracked = True
        self._views += 1

        try:
            result = await self.client.increment_views(self.project_id)
        except ApiClientError as e:
            logfire.warn(
                "View tracking failed",
                project_id=self.project_id,
                status_code=e.status_code,
                error=str(e),
            )
            return

        if self.on_view_incremented is None:
            return
        try:
            self.on_view_incremented(result.views)
        except Exception as e:
            # Nobody awaits this task, so a raising callback would go unseen
            logfire.error(
                "View tracking callback failed",
                project_id=self.project_id,
                error=str(e),
                error_type=type(e).__name__,
            )
