"""Tests for review session API endpoints."""

from collections.abc import Callable
from datetime import timedelta

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from wordjotter import models
from wordjotter.config import get_settings
from wordjotter.infrastructure.common.clock import local_now


class TestGetDueWords:
    """Test suite for GET /review/due endpoint."""

    def test_only_due_words_returned(
        self, client: TestClient, make_saved_word: Callable[..., models.SavedWord]
    ) -> None:
        today = local_now().date()
        tomorrow = today + timedelta(days=1)
        new_one = make_saved_word(word="kuu")
        new_two = make_saved_word(word="aurinko")
        make_saved_word(word="tähti", mastery_level=1, next_review_at=tomorrow)
        make_saved_word(word="pilvi", mastery_level=2, next_review_at=tomorrow)
        make_saved_word(word="sade", mastery_level=4, next_review_at=tomorrow)

        response = client.get("/api/v1/review/due")

        assert response.status_code == status.HTTP_200_OK
        words = response.json()["words"]
        assert {w["id"] for w in words} == {new_one.id, new_two.id}

    def test_due_today_and_overdue_included(
        self, client: TestClient, make_saved_word: Callable[..., models.SavedWord]
    ) -> None:
        today = local_now().date()
        due_today = make_saved_word(word="today", language="en", next_review_at=today)
        overdue = make_saved_word(
            word="overdue", language="en", next_review_at=today - timedelta(days=4)
        )
        make_saved_word(word="later", language="en", next_review_at=today + timedelta(days=3))

        response = client.get("/api/v1/review/due")

        assert response.status_code == status.HTTP_200_OK
        assert {w["id"] for w in response.json()["words"]} == {due_today.id, overdue.id}

    def test_no_words(self, client: TestClient) -> None:
        response = client.get("/api/v1/review/due")
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"words": []}

    def test_due_date_follows_configured_timezone(
        self,
        client: TestClient,
        make_saved_word: Callable[..., models.SavedWord],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr(get_settings(), "TIMEZONE", "Pacific/Kiritimati")
        local_today = local_now().date()
        saved_word = make_saved_word(next_review_at=local_today)
        make_saved_word(word="huomenna", next_review_at=local_today + timedelta(days=1))

        response = client.get("/api/v1/review/due")

        assert [w["id"] for w in response.json()["words"]] == [saved_word.id]


class TestRecordReviewOutcome:
    """Test suite for POST /review/:id/outcome endpoint."""

    def test_correct_answer(
        self,
        client: TestClient,
        db_session: Session,
        make_saved_word: Callable[..., models.SavedWord],
    ) -> None:
        today = local_now().date()
        saved_word = make_saved_word(mastery_level=2, next_review_at=today)

        response = client.post(
            f"/api/v1/review/{saved_word.id}/outcome",
            json={"was_recalled_correctly": True},
        )

        assert response.status_code == status.HTTP_200_OK
        word = response.json()["word"]
        assert word["mastery_level"] == 3
        assert word["next_review_at"] == (today + timedelta(days=14)).isoformat()

        db_session.expire_all()
        db_word = db_session.get(models.SavedWord, saved_word.id)
        assert db_word.mastery_level == 3
        assert db_word.next_review_at == today + timedelta(days=14)

    def test_wrong_answer_resets(
        self,
        client: TestClient,
        db_session: Session,
        make_saved_word: Callable[..., models.SavedWord],
    ) -> None:
        today = local_now().date()
        saved_word = make_saved_word(mastery_level=4, next_review_at=today)

        response = client.post(
            f"/api/v1/review/{saved_word.id}/outcome",
            json={"was_recalled_correctly": False},
        )

        assert response.status_code == status.HTTP_200_OK
        word = response.json()["word"]
        assert word["mastery_level"] == 0
        assert word["next_review_at"] == (today + timedelta(days=1)).isoformat()

    def test_reviewed_word_leaves_due_set(
        self, client: TestClient, make_saved_word: Callable[..., models.SavedWord]
    ) -> None:
        saved_word = make_saved_word()

        client.post(
            f"/api/v1/review/{saved_word.id}/outcome",
            json={"was_recalled_correctly": False},
        )
        response = client.get("/api/v1/review/due")

        assert response.json() == {"words": []}

    def test_word_not_found(
        self,
        client: TestClient,
        db_session: Session,
        make_saved_word: Callable[..., models.SavedWord],
    ) -> None:
        saved_word = make_saved_word(mastery_level=2)

        response = client.post(
            "/api/v1/review/99999/outcome",
            json={"was_recalled_correctly": True},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        db_session.expire_all()
        db_word = db_session.get(models.SavedWord, saved_word.id)
        assert db_word.mastery_level == 2
        assert db_word.next_review_at is None

    def test_missing_outcome(
        self, client: TestClient, make_saved_word: Callable[..., models.SavedWord]
    ) -> None:
        saved_word = make_saved_word()
        response = client.post(f"/api/v1/review/{saved_word.id}/outcome", json={})
        assert response.status_code == 422

    def test_invalid_word_id(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/review/0/outcome",
            json={"was_recalled_correctly": True},
        )
        assert response.status_code == 422
