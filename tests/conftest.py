"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator, Generator
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from vocab_companion.core.config import Settings
from vocab_companion.core.exceptions import TranslationUnavailable
from vocab_companion.db.session import Database
from vocab_companion.main import create_app
from vocab_companion.services.history_log import HistoryLog
from vocab_companion.services.progress_store import ProgressStore

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

T0 = datetime(2026, 3, 2, 9, 0, tzinfo=timezone.utc)


class FakeTranslator:
    """In-memory stand-in for the translation provider."""

    def __init__(self, translations: dict[str, str] | None = None, error: str | None = None) -> None:
        self.translations = translations or {}
        self.error = error
        self.calls: list[tuple[str, str, str]] = []

    async def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        self.calls.append((text, source_lang, target_lang))
        if self.error is not None:
            raise TranslationUnavailable(self.error)
        return self.translations.get(text, f"[{target_lang}] {text}")


class FakeClock:
    """Deterministic clock; advance() moves it forward."""

    def __init__(self, start: datetime = T0) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: Any) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


def make_settings(**overrides: Any) -> Settings:
    values: dict[str, Any] = {
        "database_url": TEST_DATABASE_URL,
        "environment": "test",
        "google_translate_api_key": None,
        "seed_vocabulary": True,
    }
    values.update(overrides)
    return Settings(**values)


@pytest_asyncio.fixture
async def database() -> AsyncGenerator[Database, None]:
    """Fresh in-memory database with all tables."""
    db = Database(TEST_DATABASE_URL)
    await db.connect()
    await db.create_all()
    try:
        yield db
    finally:
        await db.dispose()


@pytest_asyncio.fixture
async def file_database(tmp_path) -> AsyncGenerator[Database, None]:
    """Pooled database on a SQLite file, one connection per session."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'vocab.db'}")
    await db.connect()
    await db.create_all()
    try:
        yield db
    finally:
        await db.dispose()


@pytest_asyncio.fixture
async def bare_database() -> AsyncGenerator[Database, None]:
    """Connected database with no tables, so every statement fails."""
    db = Database(TEST_DATABASE_URL)
    await db.connect()
    try:
        yield db
    finally:
        await db.dispose()


@pytest.fixture
def store(database: Database) -> ProgressStore:
    return ProgressStore(database)


@pytest.fixture
def history(database: Database) -> HistoryLog:
    return HistoryLog(database)


@pytest.fixture
def translator() -> FakeTranslator:
    return FakeTranslator({"the girl loves the farmer": "puella agricolam amat"})


@pytest.fixture
def client(translator: FakeTranslator) -> Generator[TestClient, Any, None]:
    """Test client over an in-memory database and a fake translator."""
    app = create_app(settings=make_settings(), translator=translator)
    with TestClient(app) as test_client:
        yield test_client
