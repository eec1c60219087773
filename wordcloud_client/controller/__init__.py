from wordcloud_client.controller.fetcher import ResultFetcher
from wordcloud_client.controller.lifecycle import LifecycleController
from wordcloud_client.controller.poller import StatusPoller
from wordcloud_client.controller.state import (
    ControllerState,
    Operation,
    OperationStatus,
    Phase,
    StateSnapshot,
)
from wordcloud_client.controller.upload import UploadController

__all__ = [
    "ControllerState",
    "LifecycleController",
    "Operation",
    "OperationStatus",
    "Phase",
    "ResultFetcher",
    "StateSnapshot",
    "StatusPoller",
    "UploadController",
]
