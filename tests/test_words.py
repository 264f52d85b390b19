"""Tests for words API endpoints."""

from collections.abc import Callable
from datetime import timedelta

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from wordjotter import models
from wordjotter.infrastructure.common.clock import local_now


class TestSaveWord:
    """Test suite for POST /words endpoint."""

    def test_save_word_success(self, client: TestClient, db_session: Session) -> None:
        response = client.post(
            "/api/v1/words",
            json={
                "word": "ephemeral",
                "language": "en",
                "definition": "Lasting for a very short time",
                "phonetic": "/əˈfem(ə)rəl/",
                "example": "Fame is ephemeral.",
                "category": "adjective",
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["success"] is True
        word = data["word"]
        assert word["word"] == "ephemeral"
        assert word["language"] == "en"
        assert word["category"] == "adjective"
        assert word["mastery_level"] == 0
        assert word["next_review_at"] is None

        db_word = db_session.query(models.SavedWord).filter_by(id=word["id"]).first()
        assert db_word is not None
        assert db_word.definition == "Lasting for a very short time"
        assert db_word.next_review_at is None

    def test_save_word_default_category(self, client: TestClient) -> None:
        response = client.post("/api/v1/words", json={"word": "kirja", "language": "fi"})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["word"]["category"] == "default"
        assert response.json()["word"]["notes"] == ""

    def test_save_word_empty_word(self, client: TestClient) -> None:
        response = client.post("/api/v1/words", json={"word": "", "language": "en"})
        assert response.status_code == 422

    def test_save_word_blank_word(self, client: TestClient) -> None:
        response = client.post("/api/v1/words", json={"word": "   ", "language": "en"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_save_word_unsupported_language(self, client: TestClient) -> None:
        response = client.post("/api/v1/words", json={"word": "Hund", "language": "de"})
        assert response.status_code == 422


class TestGetWords:
    """Test suite for GET /words endpoints."""

    def test_get_words(
        self, client: TestClient, make_saved_word: Callable[..., models.SavedWord]
    ) -> None:
        make_saved_word(word="talo")
        make_saved_word(word="house", language="en")

        response = client.get("/api/v1/words")

        assert response.status_code == status.HTTP_200_OK
        words = response.json()["words"]
        assert {w["word"] for w in words} == {"talo", "house"}

    def test_get_words_by_category(
        self, client: TestClient, make_saved_word: Callable[..., models.SavedWord]
    ) -> None:
        make_saved_word(word="run", language="en", category="verb")
        make_saved_word(word="dog", language="en", category="noun")

        response = client.get("/api/v1/words", params={"category": "verb"})

        assert response.status_code == status.HTTP_200_OK
        assert [w["word"] for w in response.json()["words"]] == ["run"]

    def test_get_words_empty(self, client: TestClient) -> None:
        response = client.get("/api/v1/words")
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"words": []}

    def test_get_recent_words(
        self, client: TestClient, make_saved_word: Callable[..., models.SavedWord]
    ) -> None:
        for i in range(7):
            make_saved_word(word=f"sana{i}")

        response = client.get("/api/v1/words/recent")

        assert response.status_code == status.HTTP_200_OK
        assert len(response.json()["words"]) == 5

    def test_get_recent_words_with_limit(
        self, client: TestClient, make_saved_word: Callable[..., models.SavedWord]
    ) -> None:
        for i in range(4):
            make_saved_word(word=f"sana{i}")

        response = client.get("/api/v1/words/recent", params={"limit": 2})

        assert response.status_code == status.HTTP_200_OK
        assert len(response.json()["words"]) == 2


class TestNotebookStats:
    """Test suite for GET /words/stats endpoint."""

    def test_stats(
        self, client: TestClient, make_saved_word: Callable[..., models.SavedWord]
    ) -> None:
        today = local_now().date()
        make_saved_word(word="talo")
        make_saved_word(word="kissa", mastery_level=3, next_review_at=today + timedelta(days=5))
        make_saved_word(word="house", language="en", mastery_level=1, next_review_at=today)

        response = client.get("/api/v1/words/stats")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["total"] == 3
        assert data["due"] == 2
        assert data["by_language"] == {"fi": 2, "en": 1}
        assert data["by_mastery_level"] == {"0": 1, "1": 1, "2": 0, "3": 1, "4": 0, "5": 0}


class TestDeleteWord:
    """Test suite for DELETE /words/:id endpoint."""

    def test_delete_word(
        self,
        client: TestClient,
        db_session: Session,
        make_saved_word: Callable[..., models.SavedWord],
    ) -> None:
        saved_word = make_saved_word()
        word_id = saved_word.id

        response = client.delete(f"/api/v1/words/{word_id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["success"] is True
        db_session.expire_all()
        assert db_session.get(models.SavedWord, word_id) is None

    def test_delete_word_not_found(self, client: TestClient) -> None:
        response = client.delete("/api/v1/words/99999")
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Word with id 99999 not found"
