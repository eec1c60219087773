from wordcloud_client.api.base import BaseWordCountApi
from wordcloud_client.api.exceptions import ApiError
from wordcloud_client.controller.scope import Deadline, TrackingScope
from wordcloud_client.controller.state import ControllerState, Operation, OperationStatus
from wordcloud_client.jobs.exceptions import ResultValidationError
from wordcloud_client.jobs.models import JobResult, JobStatus
from wordcloud_client.logging.logger import Log
from wordcloud_client.notifications.base import BaseNotifier

NO_IDENTIFIER_MESSAGE = "Enter an identifier before submitting."


class ResultFetcher:
    """Retrieves a job's result, waiting and retrying while the job is still processing."""

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

    async def fetch(
        self, identifier: str, version: int, scope: TrackingScope
    ) -> JobResult | None:
        """Return the first result whose status is not PROCESSING.

        Each intermediate payload is stored as the current result as soon as
        it arrives. Returns None if the loop stopped before a terminal payload.
        """
        if not identifier:
            self._notifier.warn(NO_IDENTIFIER_MESSAGE)
            return None
        deadline = Deadline(self._timeout_seconds)
        attempts = 0
        while True:
            try:
                result = await self._api.get_result(identifier)
            except (ApiError, ResultValidationError) as exc:
                if scope.cancelled:
                    return None
                Log.error(f"Result request for {identifier} failed: {exc}")
                self._state.set_operation(version, Operation.FETCH, OperationStatus.ERROR)
                self._notifier.error(f"Error sending request: {exc}")
                return None

            attempts += 1
            if scope.cancelled or not self._state.record_result(version, result):
                Log.debug(f"Result loop for {identifier} superseded after {attempts} requests")
                return None

            if result.upload_status is not JobStatus.PROCESSING:
                label = result.upload_status.value if result.upload_status else "unknown"
                Log.info(f"Result for {identifier} is {label} after {attempts} requests")
                self._state.set_operation(version, Operation.FETCH, OperationStatus.DONE)
                return result

            self._state.set_operation(version, Operation.FETCH, OperationStatus.RUNNING)
            if deadline.expired:
                Log.warning(f"Gave up waiting for result of {identifier}")
                self._state.set_operation(version, Operation.FETCH, OperationStatus.ERROR)
                self._notifier.error(f"Stopped waiting for result after {deadline.seconds:g}s")
                return None
            if not await scope.sleep(self._interval_seconds):
                return None
