from wordcloud_client.api.base import BaseWordCountApi
from wordcloud_client.api.exceptions import ApiError
from wordcloud_client.controller.scope import Deadline, TrackingScope
from wordcloud_client.controller.state import ControllerState, Operation, OperationStatus
from wordcloud_client.jobs.exceptions import ResultValidationError
from wordcloud_client.jobs.models import JobStatus
from wordcloud_client.logging.logger import Log
from wordcloud_client.notifications.base import BaseNotifier


class StatusPoller:
    """Poll loop: query status -> wait -> repeat, until a terminal status."""

    def __init__(
        self,
        api: BaseWordCountApi,
        state: ControllerState,
        notifier: BaseNotifier,
        *,
        interval_seconds: float,
        timeout_seconds: float | None = None,
    ) -> None:
        self._api = api
        self._state = state
        self._notifier = notifier
        self._interval_seconds = interval_seconds
        self._timeout_seconds = timeout_seconds

    async def poll(
        self, identifier: str, version: int, scope: TrackingScope
    ) -> JobStatus | None:
        """Track ``identifier`` until it completes or fails.

        Returns the terminal status, or None when the loop stopped early
        (transport error, deadline, or a newer identifier took over).
        """
        if not identifier:
            return None
        deadline = Deadline(self._timeout_seconds)
        self._state.set_operation(version, Operation.POLL, OperationStatus.RUNNING)
        checks = 0
        while True:
            try:
                status = await self._api.get_status(identifier)
            except (ApiError, ResultValidationError) as exc:
                if scope.cancelled:
                    return None
                Log.error(f"Status check for {identifier} failed: {exc}")
                self._state.set_operation(version, Operation.POLL, OperationStatus.ERROR)
                self._notifier.error(f"Error checking upload status: {exc}")
                return None

            checks += 1
            if scope.cancelled or not self._state.is_current(version):
                Log.debug(f"Status loop for {identifier} superseded after {checks} checks")
                return None
            self._state.record_status(version, status)

            if status.is_terminal:
                Log.info(f"Job {identifier} is {status.value} after {checks} status checks")
                self._state.set_operation(version, Operation.POLL, OperationStatus.DONE)
                self._report(status)
                return status

            if deadline.expired:
                Log.warning(f"Gave up on {identifier} after {deadline.seconds}s")
                self._state.set_operation(version, Operation.POLL, OperationStatus.ERROR)
                self._notifier.error(
                    f"Stopped checking upload status after {deadline.seconds:g}s"
                )
                return None

            if not await scope.sleep(self._interval_seconds):
                return None

    def _report(self, status: JobStatus) -> None:
        message = f"File upload {status.value.lower()}"
        if status is JobStatus.COMPLETED:
            self._notifier.success(message)
        else:
            self._notifier.error(message)
