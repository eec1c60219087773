"""Example processing-service adapter.

Runs the whole service contract in-process: no network calls. Useful for
local development, demos, and tests that need a service with real state.
"""

import re
from collections import Counter
from dataclasses import dataclass

from wordcloud_client.api.base import BaseWordCountApi
from wordcloud_client.api.exceptions import ApiResponseError
from wordcloud_client.jobs.models import JobResult, JobStatus, WordCount

_WORD_RE = re.compile(r"[^\W\d_]+(?:'[^\W\d_]+)?")


@dataclass
class _ExampleJob:
    text: str
    polls_left: int
    status: JobStatus = JobStatus.PROCESSING
    word_counts: tuple[WordCount, ...] | None = None


class ExampleApiAdapter(BaseWordCountApi):
    """In-memory service that reports ``PROCESSING`` a fixed number of times.

    Every status or result call on a job counts as one observation. After
    ``processing_polls`` observations the job completes with word counts
    sorted by descending count. Empty or undecodable uploads fail.
    """

    def __init__(self, *, processing_polls: int = 2) -> None:
        self._processing_polls = processing_polls
        self._jobs: dict[str, _ExampleJob] = {}

    async def upload(self, filename: str, content: bytes) -> str:
        _ = filename
        identifier = f"job-{len(self._jobs) + 1}"
        try:
            text = content.decode("utf-8")
        except UnicodeDecodeError:
            text = ""
        self._jobs[identifier] = _ExampleJob(text=text, polls_left=self._processing_polls)
        return identifier

    async def get_status(self, identifier: str) -> JobStatus:
        return self._observe(identifier).status

    async def get_result(self, identifier: str) -> JobResult:
        job = self._observe(identifier)
        return JobResult(
            identifier=identifier,
            upload_status=job.status,
            word_counts=job.word_counts,
        )

    def _observe(self, identifier: str) -> _ExampleJob:
        job = self._jobs.get(identifier)
        if job is None:
            raise ApiResponseError(f"Unknown identifier: {identifier}")
        if job.status is not JobStatus.PROCESSING:
            return job
        if job.polls_left > 0:
            job.polls_left -= 1
            return job
        self._finish(job)
        return job

    @staticmethod
    def _finish(job: _ExampleJob) -> None:
        words = [match.group(0).lower() for match in _WORD_RE.finditer(job.text)]
        if not words:
            job.status = JobStatus.FAILED
            return
        ranked = sorted(Counter(words).items(), key=lambda item: (-item[1], item[0]))
        job.word_counts = tuple(WordCount(word=word, count=count) for word, count in ranked)
        job.status = JobStatus.COMPLETED
