"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

from collections.abc import Callable, Generator  # noqa: E402
from datetime import date  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from wordjotter import models  # noqa: E402
from wordjotter.database import Base, get_db  # noqa: E402
from wordjotter.main import app  # noqa: E402

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Create test engine
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def make_saved_word(db_session: Session) -> Callable[..., models.SavedWord]:
    """Insert a saved word row directly into the database."""

    def _make(
        word: str = "sana",
        language: str = "fi",
        category: str = "default",
        mastery_level: int = 0,
        next_review_at: date | None = None,
    ) -> models.SavedWord:
        saved_word = models.SavedWord(
            word=word,
            language=language,
            category=category,
            mastery_level=mastery_level,
            next_review_at=next_review_at,
        )
        db_session.add(saved_word)
        db_session.commit()
        db_session.refresh(saved_word)
        return saved_word

    return _make


@pytest.fixture
def make_quick_note(db_session: Session) -> Callable[..., models.QuickNote]:
    """Insert a quick note row directly into the database."""

    def _make(
        word: str = "sisu",
        language: str = "fi",
        notes: str = "",
        processed: bool = False,
    ) -> models.QuickNote:
        quick_note = models.QuickNote(
            word=word, language=language, notes=notes, processed=processed
        )
        db_session.add(quick_note)
        db_session.commit()
        db_session.refresh(quick_note)
        return quick_note

    return _make
