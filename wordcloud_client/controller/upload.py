from collections.abc import Callable

from wordcloud_client.api.base import BaseWordCountApi
from wordcloud_client.api.exceptions import ApiError
from wordcloud_client.controller.state import ControllerState, Operation, OperationStatus
from wordcloud_client.files.exceptions import NoFileSelectedError
from wordcloud_client.files.selection import FileSelection, SelectedFile
from wordcloud_client.logging.logger import Log
from wordcloud_client.notifications.base import BaseNotifier

NO_FILE_MESSAGE = "Please select a file before uploading."
UPLOAD_FAILED_MESSAGE = "File upload failed. Please try again."


class UploadController:
    """Submits the selected file and publishes the identifier the service assigns."""

    def __init__(
        self,
        api: BaseWordCountApi,
        state: ControllerState,
        notifier: BaseNotifier,
        *,
        selection: FileSelection | None = None,
        on_start: Callable[[], None] | None = None,
        on_identifier: Callable[[str], None] | None = None,
    ) -> None:
        self._api = api
        self._state = state
        self._notifier = notifier
        self._selection = selection
        self._on_start = on_start
        self._on_identifier = on_identifier

    async def submit(self, file: SelectedFile | None = None) -> str | None:
        """Upload ``file`` (or the current selection) and return the job identifier.

        Returns None when nothing is selected or the upload fails; both cases
        are reported through the notifier.
        """
        try:
            selected = self._require_file(file)
        except NoFileSelectedError as exc:
            Log.warning(f"Upload rejected: {exc}")
            self._notifier.warn(str(exc))
            return None

        if self._on_start is not None:
            self._on_start()
        version = self._state.begin_upload()
        try:
            identifier = await self._api.upload(selected.name, selected.content)
        except ApiError as exc:
            Log.error(f"Upload of {selected.name} failed: {exc}")
            if self._state.set_operation(version, Operation.UPLOAD, OperationStatus.ERROR):
                self._state.fail(version, str(exc))
            self._notifier.error(UPLOAD_FAILED_MESSAGE)
            return None

        if not self._state.set_operation(version, Operation.UPLOAD, OperationStatus.DONE):
            Log.info(f"Upload {identifier} was superseded by a newer upload, not tracking it")
            return identifier
        if self._selection is not None:
            self._selection.clear()
        if self._on_identifier is not None:
            self._on_identifier(identifier)
        return identifier

    def _require_file(self, file: SelectedFile | None) -> SelectedFile:
        if file is None and self._selection is not None:
            file = self._selection.current
        if file is None:
            raise NoFileSelectedError(NO_FILE_MESSAGE)
        return file
