import json

from wordcloud_client.export.clipboard import BaseClipboard
from wordcloud_client.export.exceptions import ClipboardError
from wordcloud_client.jobs.models import JobResult
from wordcloud_client.logging.logger import Log
from wordcloud_client.notifications.base import BaseNotifier


def serialize_word_counts(result: JobResult) -> str:
    """Render the word counts as JSON with 2-space indentation, in received order."""
    entries = [entry.to_payload() for entry in result.word_counts or ()]
    return json.dumps(entries, indent=2, ensure_ascii=False)


class ResultExporter:
    """Copies a result's word counts to the clipboard and reports the outcome."""

    def __init__(self, clipboard: BaseClipboard, notifier: BaseNotifier) -> None:
        self._clipboard = clipboard
        self._notifier = notifier

    def copy_result(self, result: JobResult) -> bool:
        """Return True when the text reached the clipboard.

        Callers only offer this action when ``result.has_data`` is true.
        """
        text = serialize_word_counts(result)
        try:
            self._clipboard.copy(text)
        except ClipboardError as exc:
            Log.warning(f"Clipboard copy failed: {exc}")
            self._notifier.error(f"Unable to copy text to clipboard. {exc}")
            return False
        Log.info(f"Copied {len(text)} characters of word counts to clipboard")
        self._notifier.success("Text successfully copied to clipboard")
        return True
