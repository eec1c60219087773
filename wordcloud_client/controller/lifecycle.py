import asyncio
import contextlib

from wordcloud_client.api.base import BaseWordCountApi
from wordcloud_client.config.settings import Settings
from wordcloud_client.controller.fetcher import ResultFetcher
from wordcloud_client.controller.poller import StatusPoller
from wordcloud_client.controller.scope import TrackingScope
from wordcloud_client.controller.state import ControllerState, StateSnapshot
from wordcloud_client.controller.upload import UploadController
from wordcloud_client.display.render import RenderParams, build_render_params
from wordcloud_client.display.viewport import ViewportTracker
from wordcloud_client.export.clipboard import BaseClipboard
from wordcloud_client.export.exporter import ResultExporter
from wordcloud_client.files.selection import FileSelection, SelectedFile
from wordcloud_client.jobs.models import JobResult, JobStatus
from wordcloud_client.logging.logger import Log
from wordcloud_client.notifications.base import BaseNotifier

NOTHING_TO_COPY_MESSAGE = "There are no word counts to copy yet."


class LifecycleController:
    """Upload -> track -> fetch, over one owned state object.

    Publishing an identifier cancels every loop bound to the previous one, so
    at most one status loop and one result loop are live at any time.
    """

    def __init__(
        self,
        *,
        api: BaseWordCountApi,
        notifier: BaseNotifier,
        clipboard: BaseClipboard,
        settings: Settings,
        selection: FileSelection | None = None,
        viewport: ViewportTracker | None = None,
    ) -> None:
        self._api = api
        self._notifier = notifier
        self._settings = settings
        self._selection = selection
        self._viewport = viewport
        self._state = ControllerState()
        self._scope = TrackingScope("", self._state.version)
        self._fetch_scope: TrackingScope | None = None
        self._poll_task: asyncio.Task[JobStatus | None] | None = None

        self._uploader = UploadController(
            api,
            self._state,
            notifier,
            selection=selection,
            on_start=self._abandon_tracking,
            on_identifier=self.publish_identifier,
        )
        self._poller = StatusPoller(
            api,
            self._state,
            notifier,
            interval_seconds=settings.status_poll_interval_seconds,
            timeout_seconds=settings.poll_timeout_seconds,
        )
        self._fetcher = ResultFetcher(
            api,
            self._state,
            notifier,
            interval_seconds=settings.result_poll_interval_seconds,
            timeout_seconds=settings.poll_timeout_seconds,
        )
        self._exporter = ResultExporter(clipboard, notifier)

    @property
    def state(self) -> ControllerState:
        return self._state

    @property
    def selection(self) -> FileSelection | None:
        return self._selection

    def snapshot(self) -> StateSnapshot:
        return self._state.snapshot()

    async def upload(self, file: SelectedFile | None = None) -> str | None:
        """Upload a file; on success its identifier is published and tracked."""
        return await self._uploader.submit(file)

    def publish_identifier(self, identifier: str) -> None:
        """Make ``identifier`` the tracked job and start polling its status.

        Must be called from inside a running event loop when ``identifier``
        is non-empty. The identifier is used verbatim.
        """
        self._cancel_loops()
        version = self._state.publish(identifier)
        self._scope = TrackingScope(identifier, version)
        if not identifier:
            return
        Log.info(f"Tracking job {identifier}")
        self._poll_task = asyncio.get_running_loop().create_task(
            self._poller.poll(identifier, version, self._scope)
        )

    async def wait_for_status(self) -> JobStatus | None:
        """Wait for the active status loop and return its terminal status."""
        if self._poll_task is None:
            return None
        return await self._poll_task

    async def fetch_result(self) -> JobResult | None:
        """Fetch the result for the tracked identifier, retrying while it processes.

        A second call supersedes a fetch that is still waiting.
        """
        if self._fetch_scope is not None:
            self._fetch_scope.cancel()
        scope = self._scope.child()
        self._fetch_scope = scope
        return await self._fetcher.fetch(scope.identifier, scope.version, scope)

    def copy_result(self) -> bool:
        result = self._state.snapshot().result
        if result is None or not result.has_data:
            self._notifier.warn(NOTHING_TO_COPY_MESSAGE)
            return False
        return self._exporter.copy_result(result)

    def render_params(self, viewport_width: int | None = None) -> RenderParams:
        """Render input for the current result, sized to the live viewport width."""
        if viewport_width is None:
            viewport_width = self._viewport.refresh() if self._viewport is not None else 0
        return build_render_params(self._state.snapshot().result, viewport_width, self._settings)

    async def aclose(self) -> None:
        task = self._poll_task
        self._cancel_loops()
        if task is not None and not task.done():
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task
        await self._api.aclose()

    def _abandon_tracking(self) -> None:
        if self._scope.identifier:
            Log.info(f"New upload started, abandoning {self._scope.identifier}")
        self._cancel_loops()
        self._scope = TrackingScope("", self._state.version)

    def _cancel_loops(self) -> None:
        self._scope.cancel()
        self._fetch_scope = None
        self._poll_task = None
