"""Protocol for the vocabulary store in learning context."""

from datetime import date
from typing import Protocol

from wordjotter.domain.common.value_objects import VocabularyItemId
from wordjotter.domain.learning.entities.vocabulary_item import VocabularyItem


class VocabularyStoreProtocol(Protocol):
    """
    Protocol for vocabulary store operations in learning context.

    Implementations raise StoreUnavailableError when the underlying storage
    cannot be read or written.
    """

    def find_all(self) -> list[VocabularyItem]:
        """
        Get every saved item.

        Returns:
            List of vocabulary items ordered by created_at DESC
        """
        ...

    def find_by_id(self, item_id: VocabularyItemId) -> VocabularyItem | None:
        """
        Find an item by ID.

        Args:
            item_id: The vocabulary item ID

        Returns:
            VocabularyItem entity if found, None otherwise
        """
        ...

    def find_by_category(self, category: str) -> list[VocabularyItem]:
        """
        Get all items in a category.

        Args:
            category: Category name

        Returns:
            List of vocabulary items ordered by created_at DESC
        """
        ...

    def save(self, item: VocabularyItem) -> VocabularyItem:
        """
        Insert a new item.

        Args:
            item: The vocabulary item to save

        Returns:
            Saved item with database-generated values
        """
        ...

    def update_mastery_state(
        self, item_id: VocabularyItemId, mastery_level: int, next_review_at: date
    ) -> bool:
        """
        Persist a new mastery state for an item.

        Args:
            item_id: The vocabulary item ID
            mastery_level: New mastery level
            next_review_at: Day the item becomes due again

        Returns:
            True if updated, False if the item does not exist
        """
        ...

    def delete(self, item_id: VocabularyItemId) -> bool:
        """
        Delete an item.

        Args:
            item_id: The vocabulary item ID

        Returns:
            True if deleted, False if not found
        """
        ...
