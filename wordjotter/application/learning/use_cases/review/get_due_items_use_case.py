"""Use case for building a review session."""

from datetime import date, datetime

import structlog

from wordjotter.application.learning.protocols.vocabulary_store import VocabularyStoreProtocol
from wordjotter.domain.learning.entities.vocabulary_item import VocabularyItem
from wordjotter.domain.learning.services.review_scheduler import ReviewScheduler

logger = structlog.get_logger(__name__)


class GetDueItemsUseCase:
    """Use case for selecting the words due for review."""

    def __init__(
        self,
        vocabulary_store: VocabularyStoreProtocol,
        review_scheduler: ReviewScheduler,
    ) -> None:
        """Initialize use case with store and scheduler."""
        self.vocabulary_store = vocabulary_store
        self.review_scheduler = review_scheduler

    def get_due_items(self, now: date | datetime) -> list[VocabularyItem]:
        """
        Get the words to practice in a session, shuffled.

        Args:
            now: Current moment

        Returns:
            Due vocabulary items in random order

        Raises:
            StoreUnavailableError: If the store cannot be read. A partial due
                set is never returned.
        """
        items = self.vocabulary_store.find_all()
        due_items = self.review_scheduler.select_due_items(items, now)

        logger.info("selected_due_items", total=len(items), due=len(due_items))
        return due_items
