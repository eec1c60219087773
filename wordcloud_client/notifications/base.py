from abc import ABC, abstractmethod

from wordcloud_client.notifications.models import DEFAULT_LIFE_MS, Notification, Severity

_SUMMARIES = {
    Severity.SUCCESS: "Success",
    Severity.WARN: "Warning",
    Severity.ERROR: "Error",
}


class BaseNotifier(ABC):
    """Contract for everything that shows notifications to the user."""

    def __init__(self, life_ms: int = DEFAULT_LIFE_MS) -> None:
        self._life_ms = life_ms

    @abstractmethod
    def notify(self, notification: Notification) -> None:
        """Show a notification. Must not raise."""

    def success(self, detail: str) -> None:
        self._emit(Severity.SUCCESS, detail)

    def warn(self, detail: str) -> None:
        self._emit(Severity.WARN, detail)

    def error(self, detail: str) -> None:
        self._emit(Severity.ERROR, detail)

    def _emit(self, severity: Severity, detail: str) -> None:
        self.notify(
            Notification(
                severity=severity,
                summary=_SUMMARIES[severity],
                detail=detail,
                life_ms=self._life_ms,
            )
        )
