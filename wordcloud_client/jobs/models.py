from dataclasses import dataclass
from enum import Enum


class JobStatus(str, Enum):
    """Lifecycle status of a processing job as reported by the service."""

    PROCESSING = "PROCESSING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"

    @property
    def is_terminal(self) -> bool:
        return self is not JobStatus.PROCESSING


@dataclass(frozen=True)
class Job:
    """Identity and last observed status of one processing request."""

    identifier: str
    status: JobStatus | None = None


@dataclass(frozen=True)
class WordCount:
    """Frequency of a single token in the uploaded text."""

    word: str
    count: int

    def to_payload(self) -> dict[str, object]:
        return {"word": self.word, "count": self.count}


@dataclass(frozen=True)
class JobResult:
    """Result payload for a job.

    ``word_counts`` is ``None`` while the job is processing or after it failed.
    Its presence is the only signal that the payload can be displayed,
    regardless of ``upload_status``.
    """

    identifier: str | None
    upload_status: JobStatus | None
    word_counts: tuple[WordCount, ...] | None = None

    @property
    def has_data(self) -> bool:
        return self.word_counts is not None

    def to_payload(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "identifier": self.identifier,
            "uploadStatus": self.upload_status.value if self.upload_status else None,
        }
        if self.word_counts is not None:
            payload["wordCounts"] = [entry.to_payload() for entry in self.word_counts]
        return payload
