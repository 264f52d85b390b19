"""Repository for VocabularyItem domain entities."""

from datetime import date

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from wordjotter.domain.common.value_objects import VocabularyItemId
from wordjotter.domain.learning.entities.vocabulary_item import VocabularyItem
from wordjotter.infrastructure.common.store_errors import store_errors
from wordjotter.infrastructure.learning.mappers.vocabulary_item_mapper import (
    VocabularyItemMapper,
)
from wordjotter.models import SavedWord as SavedWordORM

STORE = "Vocabulary"


class VocabularyRepository:
    """Repository for VocabularyItem domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = VocabularyItemMapper()

    def find_all(self) -> list[VocabularyItem]:
        """
        Get every saved item.

        Returns:
            List of vocabulary items ordered by created_at DESC
        """
        stmt = select(SavedWordORM).order_by(
            SavedWordORM.created_at.desc(), SavedWordORM.id.desc()
        )
        with store_errors(self.db, STORE, "find_all"):
            orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_by_id(self, item_id: VocabularyItemId) -> VocabularyItem | None:
        """
        Find an item by ID.

        Args:
            item_id: The vocabulary item ID

        Returns:
            VocabularyItem entity if found, None otherwise
        """
        stmt = select(SavedWordORM).where(SavedWordORM.id == item_id.value)
        with store_errors(self.db, STORE, "find_by_id"):
            orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_category(self, category: str) -> list[VocabularyItem]:
        """
        Get all items in a category.

        Args:
            category: Category name

        Returns:
            List of vocabulary items ordered by created_at DESC
        """
        stmt = (
            select(SavedWordORM)
            .where(SavedWordORM.category == category)
            .order_by(SavedWordORM.created_at.desc(), SavedWordORM.id.desc())
        )
        with store_errors(self.db, STORE, "find_by_category"):
            orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save(self, item: VocabularyItem) -> VocabularyItem:
        """
        Insert a new item.

        Args:
            item: The unsaved vocabulary item

        Returns:
            Saved item with database-generated values
        """
        if item.id.is_persisted:
            raise ValueError(f"Word {item.id.value} is already saved")

        orm_model = self.mapper.to_orm(item)
        with store_errors(self.db, STORE, "save"):
            self.db.add(orm_model)
            self.db.commit()
            self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

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
        stmt = (
            update(SavedWordORM)
            .where(SavedWordORM.id == item_id.value)
            .values(mastery_level=mastery_level, next_review_at=next_review_at)
        )
        with store_errors(self.db, STORE, "update_mastery_state"):
            result = self.db.execute(stmt)
            self.db.commit()
        return bool(result.rowcount)

    def delete(self, item_id: VocabularyItemId) -> bool:
        """
        Delete an item.

        Args:
            item_id: The vocabulary item ID

        Returns:
            True if deleted, False if not found
        """
        with store_errors(self.db, STORE, "delete"):
            orm_model = self.db.get(SavedWordORM, item_id.value)
            if not orm_model:
                return False

            self.db.delete(orm_model)
            self.db.commit()
        return True
