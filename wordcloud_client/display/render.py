"""Input for the external word-cloud rendering component."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from wordcloud_client.config.settings import Settings
from wordcloud_client.jobs.models import JobResult, WordCount


@dataclass(frozen=True)
class RenderParams:
    width: float
    height: int
    show_controls: bool
    word_counts: list[WordCount] = field(default_factory=list)


def truncate_word_counts(
    word_counts: Sequence[WordCount] | None, limit: int = 100
) -> list[WordCount]:
    """Return the first ``min(n, limit)`` entries in their received order."""
    if word_counts is None:
        return []
    return list(word_counts[:limit])


def build_render_params(
    result: JobResult | None, viewport_width: int, settings: Settings
) -> RenderParams:
    word_counts = result.word_counts if result is not None else None
    return RenderParams(
        width=viewport_width / settings.render_width_divisor,
        height=settings.render_height,
        show_controls=True,
        word_counts=truncate_word_counts(word_counts, settings.display_word_limit),
    )
