from collections.abc import Callable
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from wordcloud_client.api.httpx_adapter import HttpxApiAdapter
from wordcloud_client.config.settings import Settings
from wordcloud_client.controller.lifecycle import LifecycleController
from wordcloud_client.controller.scope import TrackingScope
from wordcloud_client.controller.state import Phase
from wordcloud_client.display.viewport import ViewportTracker
from wordcloud_client.files.selection import FileSelection
from wordcloud_client.jobs.models import JobStatus, WordCount
from wordcloud_client.notifications.models import Severity
from wordcloud_client.notifications.recording_notifier import RecordingNotifier

WORD_COUNTS = [{"word": "the", "count": 12}, {"word": "fox", "count": 4}, {"word": "dog", "count": 2}]


def _build(
    http_api: Callable[[], HttpxApiAdapter],
    settings: Settings,
    notifier: RecordingNotifier,
) -> LifecycleController:
    return LifecycleController(
        api=http_api(),
        notifier=notifier,
        clipboard=MagicMock(),
        settings=settings,
        selection=FileSelection(settings),
        viewport=ViewportTracker(lambda: 1000),
    )


@pytest.mark.integration
class TestUploadPollFetch:
    @pytest.mark.asyncio
    async def test_notes_scenario(
        self,
        service,  # type: ignore[no-untyped-def]
        http_api: Callable[[], HttpxApiAdapter],
        settings: Settings,
        notifier: RecordingNotifier,
        notes_file: Path,
    ) -> None:
        service.statuses = ["PROCESSING", "PROCESSING", "COMPLETED"]
        service.results = [
            {"identifier": "job-42", "uploadStatus": "COMPLETED", "wordCounts": WORD_COUNTS}
        ]
        controller = _build(http_api, settings, notifier)
        controller.selection.select(notes_file)  # type: ignore[union-attr]

        identifier = await controller.upload()
        status = await controller.wait_for_status()

        assert identifier == "job-42"
        assert status is JobStatus.COMPLETED
        status_calls = service.calls("GET", "/upload/status")
        assert len(status_calls) == 3
        assert all(r.url.params["identifier"] == "job-42" for r in status_calls)
        assert notifier.by_severity(Severity.SUCCESS)[0].detail == "File upload completed"
        assert controller.selection.current is None  # type: ignore[union-attr]

        result = await controller.fetch_result()

        assert result is not None
        assert result.identifier == "job-42"
        assert result.word_counts == (
            WordCount("the", 12),
            WordCount("fox", 4),
            WordCount("dog", 2),
        )
        snap = controller.snapshot()
        assert snap.phase is Phase.READY
        assert not snap.busy
        assert [wc.word for wc in controller.render_params().word_counts] == ["the", "fox", "dog"]
        await controller.aclose()

    @pytest.mark.asyncio
    async def test_fetch_before_job_finishes_retries_by_itself(
        self,
        service,  # type: ignore[no-untyped-def]
        http_api: Callable[[], HttpxApiAdapter],
        settings: Settings,
        notifier: RecordingNotifier,
    ) -> None:
        settings.result_poll_interval_seconds = 1.0
        service.statuses = ["COMPLETED"]
        service.results = [
            {"identifier": "job-42", "uploadStatus": "PROCESSING"},
            {"identifier": "job-42", "uploadStatus": "PROCESSING", "wordCounts": None},
            {"identifier": "job-42", "uploadStatus": "COMPLETED", "wordCounts": WORD_COUNTS},
        ]
        controller = _build(http_api, settings, notifier)
        controller.publish_identifier("job-42")

        with patch.object(TrackingScope, "sleep", AsyncMock(return_value=True)) as sleep:
            result = await controller.fetch_result()

        assert result is not None and result.has_data
        result_calls = service.calls("GET", "/upload")
        assert len(result_calls) == 3
        assert {r.url.params["identifier"] for r in result_calls} == {"job-42"}
        assert (1.0,) in [c.args for c in sleep.await_args_list]
        await controller.aclose()

    @pytest.mark.asyncio
    async def test_failed_job(
        self,
        service,  # type: ignore[no-untyped-def]
        http_api: Callable[[], HttpxApiAdapter],
        settings: Settings,
        notifier: RecordingNotifier,
        notes_file: Path,
    ) -> None:
        service.statuses = ["PROCESSING", "FAILED"]
        controller = _build(http_api, settings, notifier)
        controller.selection.select(notes_file)  # type: ignore[union-attr]

        await controller.upload()
        status = await controller.wait_for_status()

        assert status is JobStatus.FAILED
        assert len(service.calls("GET", "/upload/status")) == 2
        assert [n.detail for n in notifier.by_severity(Severity.ERROR)] == ["File upload failed"]
        assert controller.snapshot().phase is Phase.FAILED
        await controller.aclose()


@pytest.mark.integration
class TestTransportFailures:
    @pytest.mark.asyncio
    async def test_upload_failure(
        self,
        service,  # type: ignore[no-untyped-def]
        http_api: Callable[[], HttpxApiAdapter],
        settings: Settings,
        notifier: RecordingNotifier,
        notes_file: Path,
    ) -> None:
        service.fail_paths = {"/upload"}
        controller = _build(http_api, settings, notifier)
        controller.selection.select(notes_file)  # type: ignore[union-attr]

        assert await controller.upload() is None

        assert await controller.wait_for_status() is None
        assert notifier.details() == ["File upload failed. Please try again."]
        assert controller.selection.current is not None  # type: ignore[union-attr]
        assert not controller.snapshot().busy
        await controller.aclose()

    @pytest.mark.asyncio
    async def test_status_failure_stops_polling(
        self,
        service,  # type: ignore[no-untyped-def]
        http_api: Callable[[], HttpxApiAdapter],
        settings: Settings,
        notifier: RecordingNotifier,
    ) -> None:
        service.fail_paths = {"/upload/status"}
        controller = _build(http_api, settings, notifier)

        controller.publish_identifier("job-42")
        assert await controller.wait_for_status() is None

        assert len(service.calls("GET", "/upload/status")) == 1
        assert notifier.details()[0].startswith("Error checking upload status: ")
        assert not controller.snapshot().busy
        await controller.aclose()
