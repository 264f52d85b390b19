"""Use case for notebook statistics."""

from collections import Counter
from dataclasses import dataclass, field
from datetime import date, datetime

from wordjotter.application.learning.protocols.vocabulary_store import VocabularyStoreProtocol
from wordjotter.domain.learning.services.review_scheduler import ReviewScheduler


@dataclass
class NotebookStats:
    """DTO summarizing the saved word collection."""

    total: int
    due: int
    by_language: dict[str, int] = field(default_factory=dict)
    by_mastery_level: dict[int, int] = field(default_factory=dict)


class GetNotebookStatsUseCase:
    """Use case for counting words by language, mastery level and due state."""

    def __init__(
        self,
        vocabulary_store: VocabularyStoreProtocol,
        review_scheduler: ReviewScheduler,
    ) -> None:
        self.vocabulary_store = vocabulary_store
        self.review_scheduler = review_scheduler

    def get_stats(self, now: date | datetime) -> NotebookStats:
        """
        Summarize the notebook.

        Every level of the interval table is reported, including empty ones.
        Stored levels outside the table are counted under their clamped level.
        """
        items = self.vocabulary_store.find_all()
        intervals = self.review_scheduler.intervals

        by_level = dict.fromkeys(range(intervals.level_count), 0)
        for item in items:
            by_level[intervals.clamp(item.mastery_level)] += 1

        return NotebookStats(
            total=len(items),
            due=sum(1 for item in items if self.review_scheduler.is_due(item, now)),
            by_language=dict(Counter(item.language for item in items)),
            by_mastery_level=by_level,
        )
