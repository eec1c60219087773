from wordcloud_client.notifications.base import BaseNotifier
from wordcloud_client.notifications.models import DEFAULT_LIFE_MS, Notification, Severity


class RecordingNotifier(BaseNotifier):
    """Keeps every notification in memory, in emission order."""

    def __init__(self, life_ms: int = DEFAULT_LIFE_MS) -> None:
        super().__init__(life_ms)
        self.notifications: list[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)

    def by_severity(self, severity: Severity) -> list[Notification]:
        return [n for n in self.notifications if n.severity is severity]

    def details(self) -> list[str]:
        return [n.detail for n in self.notifications]
