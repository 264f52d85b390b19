"""Use case for recording a review outcome."""

from datetime import date, datetime

import structlog

from wordjotter.application.learning.protocols.vocabulary_store import VocabularyStoreProtocol
from wordjotter.domain.common.value_objects import VocabularyItemId
from wordjotter.domain.learning.entities.vocabulary_item import VocabularyItem
from wordjotter.domain.learning.services.review_scheduler import ReviewScheduler
from wordjotter.exceptions import VocabularyItemNotFoundError

logger = structlog.get_logger(__name__)


class RecordReviewOutcomeUseCase:
    """
    Use case for applying one flashcard answer to a word's mastery state.

    The read-modify-write against the store is not atomic. Callers that
    answer from several threads must serialize outcomes per word.
    """

    def __init__(
        self,
        vocabulary_store: VocabularyStoreProtocol,
        review_scheduler: ReviewScheduler,
    ) -> None:
        """Initialize use case with store and scheduler."""
        self.vocabulary_store = vocabulary_store
        self.review_scheduler = review_scheduler

    def record_outcome(
        self, item_id: int, was_recalled_correctly: bool, now: date | datetime
    ) -> VocabularyItem:
        """
        Record whether the user recalled a word and reschedule it.

        Args:
            item_id: ID of the reviewed word
            was_recalled_correctly: Whether the user knew the word
            now: Moment of the review

        Returns:
            The word with its new mastery level and next review date

        Raises:
            VocabularyItemNotFoundError: If the word does not exist
            StoreUnavailableError: If the store cannot be read or written
        """
        item_id_vo = VocabularyItemId(item_id)

        item = self.vocabulary_store.find_by_id(item_id_vo)
        if not item:
            raise VocabularyItemNotFoundError(item_id)

        reviewed = self.review_scheduler.record_outcome(item, was_recalled_correctly, now)
        assert reviewed.next_review_at is not None, "Reviewed item must have next_review_at"

        updated = self.vocabulary_store.update_mastery_state(
            item_id_vo, reviewed.mastery_level, reviewed.next_review_at
        )
        if not updated:
            # Deleted between the read and the write
            raise VocabularyItemNotFoundError(item_id)

        logger.info(
            "recorded_review_outcome",
            item_id=item_id,
            was_recalled_correctly=was_recalled_correctly,
            previous_level=item.mastery_level,
            mastery_level=reviewed.mastery_level,
            next_review_at=reviewed.next_review_at.isoformat(),
        )
        return reviewed
