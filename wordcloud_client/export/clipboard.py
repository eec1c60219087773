from abc import ABC, abstractmethod

import pyperclip

from wordcloud_client.export.exceptions import ClipboardError


class BaseClipboard(ABC):
    """Contract for clipboard adapters."""

    @abstractmethod
    def copy(self, text: str) -> None:
        """Place text on the clipboard.

        Raises:
            ClipboardError: if the clipboard is unavailable or access is denied.
        """


class PyperclipClipboard(BaseClipboard):
    """System clipboard through pyperclip."""

    def copy(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(str(exc)) from exc
