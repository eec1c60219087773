from dataclasses import dataclass
from enum import Enum

DEFAULT_LIFE_MS = 5000


class Severity(str, Enum):
    SUCCESS = "success"
    WARN = "warn"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    """A user-facing message. Rendering it (toast, console line) is up to the notifier."""

    severity: Severity
    summary: str
    detail: str
    life_ms: int = DEFAULT_LIFE_MS
