from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from wordcloud_client.api.base import BaseWordCountApi
from wordcloud_client.config.settings import Settings
from wordcloud_client.jobs.models import JobResult, JobStatus, WordCount
from wordcloud_client.notifications.recording_notifier import RecordingNotifier


@pytest.fixture()
def settings() -> Settings:
    """Settings with no real waiting between polls."""
    return Settings(
        api_provider="example",
        status_poll_interval_seconds=0,
        result_poll_interval_seconds=0,
        example_processing_polls=2,
    )


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def api() -> MagicMock:
    """Processing-service adapter with every operation as an AsyncMock."""
    mock = MagicMock(spec=BaseWordCountApi)
    mock.upload = AsyncMock(return_value="job-42")
    mock.get_status = AsyncMock(return_value=JobStatus.COMPLETED)
    mock.get_result = AsyncMock()
    mock.aclose = AsyncMock()
    return mock


@pytest.fixture()
def notes_file(tmp_path: Path) -> Path:
    """A ~10 KB text file."""
    path = tmp_path / "notes.txt"
    path.write_text("the quick brown fox jumps over the lazy dog\n" * 230, encoding="utf-8")
    return path


def _make_result(
    status: JobStatus | None,
    word_counts: list[tuple[str, int]] | None = None,
    identifier: str = "job-42",
) -> JobResult:
    return JobResult(
        identifier=identifier,
        upload_status=status,
        word_counts=(
            tuple(WordCount(word=w, count=c) for w, c in word_counts)
            if word_counts is not None
            else None
        ),
    )


@pytest.fixture()
def make_result():  # type: ignore[no-untyped-def]
    """Factory for JobResult values."""
    return _make_result
