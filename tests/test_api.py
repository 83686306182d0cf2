"""Tests for the progress, translation and health API endpoints."""

from fastapi import status
from fastapi.testclient import TestClient

from tests.conftest import FakeTranslator, make_settings
from vocab_companion.main import create_app
from vocab_companion.services.translator import GoogleTranslator


class TestHealth:
    def test_api_health(self, client: TestClient) -> None:
        response = client.get("/api/health")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "ok"
        assert "timestamp" in data

    def test_root_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "ok"
        assert "timestamp" in data


class TestProgressEndpoints:
    def test_unknown_user_returns_zero_record(self, client: TestClient) -> None:
        response = client.get("/api/progress/ghost")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["userId"] == "ghost"
        assert data["cardsStudied"] == 0
        assert data["score"] == 0
        assert data["studyStreak"] == 0
        assert data["masteredWords"] == []

    def test_create_then_update_same_day(self, client: TestClient) -> None:
        response = client.post(
            "/api/progress",
            json={"userId": "u1", "cardsStudied": 5, "score": 10, "masteredWords": ["puella"]},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["cardsStudied"] == 5
        assert data["score"] == 10
        assert data["studyStreak"] == 1
        assert data["masteredWords"] == ["puella"]
        assert data["createdAt"] is not None

        response = client.post("/api/progress", json={"userId": "u1", "masteredWords": ["puer"]})

        data = response.json()
        assert data["cardsStudied"] == 5
        assert data["masteredWords"] == ["puella", "puer"]
        assert data["studyStreak"] == 2

        stored = client.get("/api/progress/u1").json()
        assert stored["masteredWords"] == ["puella", "puer"]
        assert stored["studyStreak"] == 2

    def test_zero_counts_keep_previous_values(self, client: TestClient) -> None:
        client.post("/api/progress", json={"userId": "u1", "cardsStudied": 7, "score": 3})

        data = client.post("/api/progress", json={"userId": "u1", "cardsStudied": 0, "score": 0}).json()

        assert data["cardsStudied"] == 7
        assert data["score"] == 3

    def test_missing_user_id(self, client: TestClient) -> None:
        response = client.post("/api/progress", json={"cardsStudied": 1})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "userId is required"}

    def test_negative_count_rejected(self, client: TestClient) -> None:
        response = client.post("/api/progress", json={"userId": "u1", "cardsStudied": -1})

        assert response.status_code == 422


class TestTranslateEndpoint:
    def test_translate_success_and_history(self, client: TestClient, translator: FakeTranslator) -> None:
        response = client.post("/api/translate", json={"text": "the girl loves the farmer", "userId": "u1"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "translation": "puella agricolam amat",
            "original": "the girl loves the farmer",
            "source": "en",
            "target": "la",
        }

        client.post("/api/translate", json={"text": "water", "userId": "u1", "source": "en", "target": "it"})

        history = client.get("/api/translations/u1").json()
        assert [h["sourceText"] for h in history] == ["water", "the girl loves the farmer"]
        assert history[0]["translatedText"] == "[it] water"
        assert history[0]["targetLang"] == "it"

    def test_translate_without_text(self, client: TestClient, translator: FakeTranslator) -> None:
        response = client.post("/api/translate", json={"userId": "u1"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Text is required"}
        assert translator.calls == []

    def test_anonymous_history(self, client: TestClient) -> None:
        client.post("/api/translate", json={"text": "water"})

        history = client.get("/api/translations/anonymous").json()
        assert len(history) == 1
        assert history[0]["userId"] == "anonymous"

    def test_history_is_capped(self, client: TestClient) -> None:
        for i in range(55):
            client.post("/api/translate", json={"text": f"word {i}", "userId": "u9"})

        history = client.get("/api/translations/u9").json()
        assert len(history) == 50
        assert history[0]["sourceText"] == "word 54"

    def test_provider_failure(self) -> None:
        app = create_app(settings=make_settings(), translator=FakeTranslator(error="Daily Limit Exceeded"))
        with TestClient(app) as client:
            response = client.post("/api/translate", json={"text": "water", "userId": "u1"})

            assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
            assert response.json() == {"error": "Translation failed", "message": "Daily Limit Exceeded"}
            assert client.get("/api/translations/u1").json() == []

    def test_missing_api_key(self) -> None:
        app = create_app(settings=make_settings(google_translate_api_key=None))
        with TestClient(app) as client:
            response = client.post("/api/translate", json={"text": "water", "userId": "u1"})

            assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
            data = response.json()
            assert data["error"] == "API key not configured"
            assert "GOOGLE_TRANSLATE_API_KEY" in data["translation"]
            assert client.get("/api/translations/u1").json() == []

    def test_default_translator_comes_from_settings(self) -> None:
        translator = GoogleTranslator.from_settings(make_settings(google_translate_api_key="k"))

        assert translator.configured
        assert translator.api_key == "k"
