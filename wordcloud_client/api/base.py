from abc import ABC, abstractmethod

from wordcloud_client.jobs.models import JobResult, JobStatus


class BaseWordCountApi(ABC):
    """Contract for all processing-service adapters."""

    @abstractmethod
    async def upload(self, filename: str, content: bytes) -> str:
        """Submit a text file for processing.

        Args:
            filename: Name sent with the multipart ``file`` field.
            content: Raw file bytes.

        Returns:
            The opaque job identifier assigned by the service.

        Raises:
            ApiError: on any transport or service failure.
        """

    @abstractmethod
    async def get_status(self, identifier: str) -> JobStatus:
        """Return the current status of the job.

        Raises:
            ApiError: on any transport or service failure.
            ResultValidationError: if the status is not recognised.
        """

    @abstractmethod
    async def get_result(self, identifier: str) -> JobResult:
        """Return the result payload of the job, which may still be processing.

        Raises:
            ApiError: on any transport or service failure.
            ResultValidationError: if the payload is malformed.
        """

    async def aclose(self) -> None:
        """Release transport resources. Adapters without any keep the default."""
