"""Single owner of the controller's mutable state.

Every flow (upload, status polling, result fetching) is started with the state
version current at that moment and passes it back on each write. Publishing a
new identifier or starting an upload bumps the version, so writes from loops
that belong to an older identifier are rejected instead of overwriting newer
state.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from wordcloud_client.jobs.models import Job, JobResult, JobStatus
from wordcloud_client.logging.logger import Log


class Phase(str, Enum):
    IDLE = "idle"
    UPLOADING = "uploading"
    TRACKING = "tracking"
    READY = "ready"
    FAILED = "failed"


class Operation(str, Enum):
    UPLOAD = "upload"
    POLL = "poll"
    FETCH = "fetch"


class OperationStatus(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    DONE = "done"
    ERROR = "error"


@dataclass(frozen=True)
class StateSnapshot:
    """Immutable view of the state for presentation."""

    version: int
    phase: Phase
    job: Job | None
    result: JobResult | None
    operations: Mapping[Operation, OperationStatus]
    error: str | None = None

    @property
    def identifier(self) -> str:
        return self.job.identifier if self.job is not None else ""

    @property
    def busy(self) -> bool:
        return any(status is OperationStatus.RUNNING for status in self.operations.values())

    @property
    def has_data(self) -> bool:
        return self.result is not None and self.result.has_data


class ControllerState:
    def __init__(self) -> None:
        self._version = 0
        self._phase = Phase.IDLE
        self._job: Job | None = None
        self._result: JobResult | None = None
        self._error: str | None = None
        self._operations = {op: OperationStatus.IDLE for op in Operation}

    @property
    def version(self) -> int:
        return self._version

    def is_current(self, version: int) -> bool:
        return version == self._version

    def snapshot(self) -> StateSnapshot:
        return StateSnapshot(
            version=self._version,
            phase=self._phase,
            job=self._job,
            result=self._result,
            operations=MappingProxyType(dict(self._operations)),
            error=self._error,
        )

    def begin_upload(self) -> int:
        """Start a new generation for an upload. Abandons the tracked job."""
        self._version += 1
        self._phase = Phase.UPLOADING
        self._job = None
        self._result = None
        self._error = None
        self._operations = {op: OperationStatus.IDLE for op in Operation}
        self._operations[Operation.UPLOAD] = OperationStatus.RUNNING
        Log.debug(f"State v{self._version}: uploading")
        return self._version

    def publish(self, identifier: str) -> int:
        """Start a new generation tracking ``identifier``; drops the previous result."""
        self._version += 1
        self._job = Job(identifier=identifier) if identifier else None
        self._phase = Phase.TRACKING if identifier else Phase.IDLE
        self._result = None
        self._error = None
        # An upload still in flight belongs to the old version and can no longer report back.
        if self._operations[Operation.UPLOAD] is OperationStatus.RUNNING:
            self._operations[Operation.UPLOAD] = OperationStatus.IDLE
        self._operations[Operation.POLL] = OperationStatus.IDLE
        self._operations[Operation.FETCH] = OperationStatus.IDLE
        Log.debug(f"State v{self._version}: tracking {identifier or '<none>'}")
        return self._version

    def set_operation(
        self, version: int, operation: Operation, status: OperationStatus
    ) -> bool:
        if not self._accept(version, f"{operation.value} -> {status.value}"):
            return False
        self._operations[operation] = status
        return True

    def record_status(self, version: int, status: JobStatus) -> bool:
        """Record an observed job status. Terminal statuses are final."""
        if not self._accept(version, f"status {status.value}"):
            return False
        if self._job is None:
            return False
        current = self._job.status
        if current is not None and current.is_terminal and status is not current:
            Log.debug(
                f"Ignoring status {status.value} for {self._job.identifier}: "
                f"already {current.value}"
            )
            return False
        self._job = Job(identifier=self._job.identifier, status=status)
        if status is JobStatus.FAILED:
            self._phase = Phase.FAILED
            self._error = "Job failed"
        return True

    def record_result(self, version: int, result: JobResult) -> bool:
        """Store the latest result payload, including intermediate processing echoes."""
        if not self._accept(version, "result"):
            return False
        self._result = result
        if result.upload_status is not None:
            self.record_status(version, result.upload_status)
        if result.has_data:
            self._phase = Phase.READY
        return True

    def fail(self, version: int, reason: str) -> bool:
        if not self._accept(version, f"failure ({reason})"):
            return False
        self._phase = Phase.FAILED
        self._error = reason
        return True

    def _accept(self, version: int, change: str) -> bool:
        if version == self._version:
            return True
        Log.debug(f"Rejected stale update v{version} (current v{self._version}): {change}")
        return False
