"""Fixtures for learning use case tests: in-memory notebook stores."""

import random
from collections.abc import Callable
from datetime import date

import pytest

from wordjotter.domain.common.value_objects import QuickNoteId, VocabularyItemId
from wordjotter.domain.learning.entities import Language, QuickNote, VocabularyItem
from wordjotter.domain.learning.services import ReviewScheduler
from wordjotter.exceptions import StoreUnavailableError


class InMemoryVocabularyStore:
    """Dict-backed store that can be switched into a failing state."""

    def __init__(self, items: list[VocabularyItem] | None = None) -> None:
        self.items: dict[int, VocabularyItem] = {}
        self.next_id = 1
        self.unavailable = False
        self.mastery_updates: list[tuple[int, int, date]] = []
        for item in items or []:
            self.items[item.id.value] = item
            self.next_id = max(self.next_id, item.id.value + 1)

    def _check_available(self) -> None:
        if self.unavailable:
            raise StoreUnavailableError()

    def find_all(self) -> list[VocabularyItem]:
        self._check_available()
        return sorted(self.items.values(), key=lambda item: item.id.value, reverse=True)

    def find_by_id(self, item_id: VocabularyItemId) -> VocabularyItem | None:
        self._check_available()
        return self.items.get(item_id.value)

    def find_by_category(self, category: str) -> list[VocabularyItem]:
        return [item for item in self.find_all() if item.category == category]

    def save(self, item: VocabularyItem) -> VocabularyItem:
        self._check_available()
        item.id = VocabularyItemId(self.next_id)
        self.next_id += 1
        self.items[item.id.value] = item
        return item

    def update_mastery_state(
        self, item_id: VocabularyItemId, mastery_level: int, next_review_at: date
    ) -> bool:
        self._check_available()
        item = self.items.get(item_id.value)
        if item is None:
            return False
        self.items[item_id.value] = item.with_mastery_state(mastery_level, next_review_at)
        self.mastery_updates.append((item_id.value, mastery_level, next_review_at))
        return True

    def delete(self, item_id: VocabularyItemId) -> bool:
        self._check_available()
        return self.items.pop(item_id.value, None) is not None


class InMemoryQuickNoteStore:
    """Dict-backed quick note store."""

    def __init__(self, notes: list[QuickNote] | None = None) -> None:
        self.notes: dict[int, QuickNote] = {}
        self.next_id = 1
        self.unavailable = False
        for note in notes or []:
            self.notes[note.id.value] = note
            self.next_id = max(self.next_id, note.id.value + 1)

    def _check_available(self) -> None:
        if self.unavailable:
            raise StoreUnavailableError()

    def find_all(self, include_processed: bool = False) -> list[QuickNote]:
        self._check_available()
        notes = sorted(self.notes.values(), key=lambda note: note.id.value, reverse=True)
        return [note for note in notes if include_processed or not note.processed]

    def find_by_id(self, note_id: QuickNoteId) -> QuickNote | None:
        self._check_available()
        return self.notes.get(note_id.value)

    def save(self, note: QuickNote) -> QuickNote:
        self._check_available()
        note.id = QuickNoteId(self.next_id)
        self.next_id += 1
        self.notes[note.id.value] = note
        return note

    def mark_processed(self, note_id: QuickNoteId) -> bool:
        self._check_available()
        note = self.notes.get(note_id.value)
        if note is None:
            return False
        note.processed = True
        return True

    def delete(self, note_id: QuickNoteId) -> bool:
        self._check_available()
        return self.notes.pop(note_id.value, None) is not None


def make_item(
    id: int,
    word: str | None = None,
    language: Language = "en",
    category: str = "default",
    mastery_level: int = 0,
    next_review_at: date | None = None,
) -> VocabularyItem:
    return VocabularyItem.create_with_id(
        id=VocabularyItemId(id),
        word=word or f"word-{id}",
        language=language,
        definition=None,
        phonetic=None,
        example=None,
        notes="",
        category=category,
        mastery_level=mastery_level,
        next_review_at=next_review_at,
        created_at=None,
    )


@pytest.fixture
def item_factory() -> Callable[..., VocabularyItem]:
    return make_item


@pytest.fixture
def store_factory() -> Callable[..., InMemoryVocabularyStore]:
    return InMemoryVocabularyStore


@pytest.fixture
def scheduler() -> ReviewScheduler:
    return ReviewScheduler(rng=random.Random(99))


def make_note(
    id: int,
    word: str | None = None,
    language: Language = "en",
    processed: bool = False,
) -> QuickNote:
    return QuickNote.create_with_id(
        id=QuickNoteId(id),
        word=word or f"note-{id}",
        language=language,
        notes="",
        processed=processed,
        created_at=None,
    )


@pytest.fixture
def note_factory() -> Callable[..., QuickNote]:
    return make_note


@pytest.fixture
def quick_note_store_factory() -> Callable[..., InMemoryQuickNoteStore]:
    return InMemoryQuickNoteStore
