from wordcloud_client.notifications.base import BaseNotifier
from wordcloud_client.notifications.log_notifier import LogNotifier
from wordcloud_client.notifications.models import Notification, Severity
from wordcloud_client.notifications.recording_notifier import RecordingNotifier

__all__ = ["BaseNotifier", "LogNotifier", "Notification", "RecordingNotifier", "Severity"]
