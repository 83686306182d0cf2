"""Append-only translation history, read back newest first."""
from dataclasses import dataclass, field
from datetime import datetime, timezone

import structlog
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from vocab_companion.core.exceptions import StorageUnavailable
from vocab_companion.db.session import Database
from vocab_companion.models.translation import TranslationHistory

logger = structlog.get_logger(__name__)

MAX_HISTORY_LIMIT = 50


@dataclass(frozen=True)
class HistoryEntry:
    user_id: str
    source_text: str
    translated_text: str
    source_lang: str = "en"
    target_lang: str = "la"
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


def _to_entry(row: TranslationHistory) -> HistoryEntry:
    ts = row.timestamp
    if ts is not None and ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return HistoryEntry(
        user_id=row.user_id,
        source_text=row.source_text,
        translated_text=row.translated_text,
        source_lang=row.source_lang,
        target_lang=row.target_lang,
        timestamp=ts,
    )


def clamp_limit(limit: int | None) -> int:
    if limit is None:
        return MAX_HISTORY_LIMIT
    return max(1, min(MAX_HISTORY_LIMIT, limit))


class HistoryLog:
    def __init__(self, database: Database) -> None:
        self._db = database

    async def append(self, entry: HistoryEntry) -> bool:
        """Store entry. Failures are logged and reported as False, never raised."""
        try:
            async with self._db.session() as session, session.begin():
                session.add(
                    TranslationHistory(
                        user_id=entry.user_id,
                        source_text=entry.source_text,
                        translated_text=entry.translated_text,
                        source_lang=entry.source_lang,
                        target_lang=entry.target_lang,
                        timestamp=entry.timestamp,
                    )
                )
        except Exception as e:
            # CancelledError still propagates; everything else is reported as False
            logger.warning("history_append_failed", user_id=entry.user_id, error=str(e), exc_info=True)
            return False
        return True

    async def list_by_user(self, user_id: str, limit: int | None = MAX_HISTORY_LIMIT) -> list[HistoryEntry]:
        """Up to limit entries for user_id (capped at 50), newest first."""
        stmt = (
            select(TranslationHistory)
            .where(TranslationHistory.user_id == user_id)
            .order_by(TranslationHistory.timestamp.desc(), TranslationHistory.id.desc())
            .limit(clamp_limit(limit))
        )
        try:
            async with self._db.session() as session:
                result = await session.execute(stmt)
                rows = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("history_read_failed", user_id=user_id, error=str(e))
            raise StorageUnavailable("Failed to fetch translation history") from e
        return [_to_entry(r) for r in rows]
