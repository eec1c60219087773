"""Validates raw wire values from the processing service and builds job models."""

from typing import Any

from wordcloud_client.jobs.exceptions import ResultValidationError
from wordcloud_client.jobs.models import JobResult, JobStatus, WordCount


def parse_status(raw: Any) -> JobStatus:
    """Map a status string from the service onto ``JobStatus``.

    Raises:
        ResultValidationError: if the value is not a known status.
    """
    if not isinstance(raw, str):
        raise ResultValidationError(f"Status must be a string, got {type(raw).__name__}")
    try:
        return JobStatus(raw.strip().upper())
    except ValueError as exc:
        raise ResultValidationError(f"Unknown job status: {raw!r}") from exc


def build_result(payload: Any) -> JobResult:
    """Validate a result payload and build a ``JobResult``.

    The payload shape is ``{identifier, uploadStatus, wordCounts?}``. A missing
    or null ``wordCounts`` is kept as ``None``.

    Raises:
        ResultValidationError: on any validation failure.
    """
    if not isinstance(payload, dict):
        raise ResultValidationError("Result payload must be an object")
    identifier = _build_identifier(payload.get("identifier"))
    upload_status = _build_upload_status(payload.get("uploadStatus"))
    word_counts = _build_word_counts(payload.get("wordCounts"))
    return JobResult(
        identifier=identifier,
        upload_status=upload_status,
        word_counts=word_counts,
    )


def _build_identifier(raw: Any) -> str | None:
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise ResultValidationError("'identifier' must be a string or null")
    return raw


def _build_upload_status(raw: Any) -> JobStatus | None:
    if raw is None:
        return None
    return parse_status(raw)


def _build_word_counts(raw: Any) -> tuple[WordCount, ...] | None:
    if raw is None:
        return None
    if not isinstance(raw, list):
        raise ResultValidationError("'wordCounts' must be a list or null")
    return tuple(_build_word_count(item, i) for i, item in enumerate(raw))


def _build_word_count(raw: Any, index: int) -> WordCount:
    if not isinstance(raw, dict):
        raise ResultValidationError(f"Word count at index {index} must be an object")
    word = raw.get("word")
    if not isinstance(word, str):
        raise ResultValidationError(
            f"Word count at index {index}: 'word' must be a string"
        )
    count = raw.get("count")
    # bool is an int subclass
    if isinstance(count, bool) or not isinstance(count, int):
        raise ResultValidationError(
            f"Word count at index {index}: 'count' must be an integer"
        )
    return WordCount(word=word, count=count)
