from dataclasses import dataclass
from pathlib import Path

from wordcloud_client.config.settings import Settings
from wordcloud_client.files.exceptions import (
    FileSelectionError,
    FileTooLargeError,
    UnsupportedFileTypeError,
)
from wordcloud_client.logging.logger import Log


@dataclass(frozen=True)
class SelectedFile:
    """A file picked for upload, held in memory."""

    name: str
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)

    @classmethod
    def from_path(cls, path: Path) -> "SelectedFile":
        try:
            return cls(name=path.name, content=path.read_bytes())
        except OSError as exc:
            raise FileSelectionError(f"Cannot read {path}: {exc}") from exc


class FileSelection:
    """Holds the current file selection and applies the accept filter and size ceiling.

    These checks belong to the selecting surface; the upload itself does not
    re-validate content.
    """

    def __init__(self, settings: Settings) -> None:
        self._accepted = {ext.lower() for ext in settings.accepted_extensions}
        self._max_size = settings.max_upload_size_bytes
        self._current: SelectedFile | None = None

    @property
    def current(self) -> SelectedFile | None:
        return self._current

    def select(self, path: Path) -> SelectedFile:
        """Validate and select a file from disk.

        Raises:
            UnsupportedFileTypeError: if the extension is not accepted.
            FileTooLargeError: if the file exceeds the size ceiling.
            FileSelectionError: if the file cannot be read.
        """
        if path.suffix.lower() not in self._accepted:
            raise UnsupportedFileTypeError(
                f"'{path.name}' is not accepted. Allowed: {sorted(self._accepted)}"
            )
        if path.exists() and path.stat().st_size > self._max_size:
            raise FileTooLargeError(
                f"'{path.name}' exceeds the maximum upload size of {self._max_size} bytes"
            )
        self._current = SelectedFile.from_path(path)
        Log.debug(f"Selected {self._current.name} ({self._current.size} bytes)")
        return self._current

    def clear(self) -> None:
        self._current = None
