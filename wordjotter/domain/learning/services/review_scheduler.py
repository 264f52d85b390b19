"""
Domain service for spaced-repetition review scheduling.

This is a pure domain service with no infrastructure dependencies. The
current moment and the random source are always passed in, so the service
never reads the wall clock on its own.
"""

import random
from collections.abc import Iterable
from datetime import date, datetime, timedelta

from wordjotter.domain.learning.entities.vocabulary_item import VocabularyItem
from wordjotter.domain.learning.value_objects.review_intervals import ReviewIntervals


def review_day(now: date | datetime) -> date:
    """Reduce a moment to the calendar day it falls on."""
    if isinstance(now, datetime):
        return now.date()
    return now


class ReviewScheduler:
    """
    Decides which vocabulary items are due and reschedules them after review.

    Mastery levels index into the interval table. A correct answer moves an
    item one level up (saturating at the top level), a wrong answer sends it
    back to level 0. Setting failure_level_drop replaces the full reset with
    a step back of that many levels.
    """

    def __init__(
        self,
        intervals: ReviewIntervals | None = None,
        rng: random.Random | None = None,
        failure_level_drop: int | None = None,
    ) -> None:
        if failure_level_drop is not None and failure_level_drop <= 0:
            raise ValueError("failure_level_drop must be positive")
        self.intervals = intervals or ReviewIntervals()
        self.rng = rng or random.Random()
        self.failure_level_drop = failure_level_drop

    def is_due(self, item: VocabularyItem, now: date | datetime) -> bool:
        """
        Check whether an item should be presented today.

        Never-reviewed items are always due. Otherwise the review day is
        compared at day granularity, so anything scheduled for today counts
        regardless of time of day.
        """
        if item.next_review_at is None:
            return True
        return review_day(item.next_review_at) <= review_day(now)

    def select_due_items(
        self, all_items: Iterable[VocabularyItem], now: date | datetime
    ) -> list[VocabularyItem]:
        """
        Select the items due for review, in random order.

        Args:
            all_items: Full collection of items from the store
            now: Current moment

        Returns:
            Due items as a uniformly random permutation. The input is not
            modified.
        """
        due = [item for item in all_items if self.is_due(item, now)]
        self.rng.shuffle(due)
        return due

    def next_mastery_level(self, current_level: int, was_recalled_correctly: bool) -> int:
        """Apply the review-outcome transition to a (clamped) mastery level."""
        level = self.intervals.clamp(current_level)
        if was_recalled_correctly:
            return min(level + 1, self.intervals.max_level)
        if self.failure_level_drop is None:
            return 0
        return max(level - self.failure_level_drop, 0)

    def next_review_date(self, mastery_level: int, now: date | datetime) -> date:
        return review_day(now) + timedelta(days=self.intervals.days_for(mastery_level))

    def record_outcome(
        self, item: VocabularyItem, was_recalled_correctly: bool, now: date | datetime
    ) -> VocabularyItem:
        """
        Compute an item's mastery state after one review.

        Args:
            item: The reviewed item
            was_recalled_correctly: Whether the user recalled the word
            now: Moment of the review

        Returns:
            A copy of the item with its new mastery level and next review
            date. Persisting it is up to the caller.
        """
        level = self.next_mastery_level(item.mastery_level, was_recalled_correctly)
        return item.with_mastery_state(
            mastery_level=level,
            next_review_at=self.next_review_date(level, now),
        )
