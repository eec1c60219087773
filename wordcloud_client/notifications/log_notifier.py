from wordcloud_client.logging.logger import Log
from wordcloud_client.notifications.base import BaseNotifier
from wordcloud_client.notifications.models import Notification, Severity


class LogNotifier(BaseNotifier):
    """Shows notifications as log lines, at a level matching their severity."""

    def notify(self, notification: Notification) -> None:
        message = f"{notification.summary}: {notification.detail}"
        if notification.severity is Severity.ERROR:
            Log.error(message)
        elif notification.severity is Severity.WARN:
            Log.warning(message)
        else:
            Log.info(message)
