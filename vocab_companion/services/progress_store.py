"""Durable per-user progress records with a per-user atomic update path."""
import asyncio
import json
import weakref
from datetime import datetime, timezone
from typing import Awaitable, Callable

import structlog
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from vocab_companion.core.exceptions import StorageUnavailable
from vocab_companion.db.session import Database
from vocab_companion.models.progress import UserProgress
from vocab_companion.services.progress_engine import ProgressRecord

logger = structlog.get_logger(__name__)

UpdateFn = Callable[[ProgressRecord | None], ProgressRecord | Awaitable[ProgressRecord]]


def _aware(value: datetime | None) -> datetime | None:
    # SQLite drops tzinfo on the way back
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _to_record(row: UserProgress) -> ProgressRecord:
    return ProgressRecord(
        user_id=row.user_id,
        cards_studied=row.cards_studied,
        score=row.score,
        mastered_words=frozenset(json.loads(row.mastered_words_json or "[]")),
        study_streak=row.study_streak,
        last_studied=_aware(row.last_studied),
        created_at=_aware(row.created_at),
    )


def _copy_into(row: UserProgress, record: ProgressRecord) -> None:
    row.cards_studied = record.cards_studied
    row.score = record.score
    row.mastered_words_json = json.dumps(sorted(record.mastered_words))
    row.study_streak = record.study_streak
    row.last_studied = record.last_studied
    row.created_at = record.created_at


class ProgressStore:
    """One ProgressRecord per user_id.

    A bare get() followed by put() can lose a concurrent update: two callers
    read the same row and the later write drops the other's mastered words.
    update() holds a per-user lock across get -> compute -> put instead.
    Locks for different users never contend.
    """

    def __init__(self, database: Database) -> None:
        self._db = database
        self._locks: weakref.WeakValueDictionary[str, asyncio.Lock] = weakref.WeakValueDictionary()

    def lock_for(self, user_id: str) -> asyncio.Lock:
        lock = self._locks.get(user_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[user_id] = lock
        return lock

    async def get(self, user_id: str) -> ProgressRecord | None:
        try:
            async with self._db.session() as session:
                result = await session.execute(select(UserProgress).where(UserProgress.user_id == user_id))
                row = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("progress_read_failed", user_id=user_id, error=str(e))
            raise StorageUnavailable("Failed to fetch progress") from e
        return _to_record(row) if row is not None else None

    async def put(self, record: ProgressRecord) -> ProgressRecord:
        """Upsert the whole record in one transaction."""
        try:
            async with self._db.session() as session, session.begin():
                result = await session.execute(
                    select(UserProgress).where(UserProgress.user_id == record.user_id)
                )
                row = result.scalar_one_or_none()
                if row is None:
                    row = UserProgress(user_id=record.user_id)
                    session.add(row)
                _copy_into(row, record)
        except SQLAlchemyError as e:
            logger.error("progress_write_failed", user_id=record.user_id, error=str(e))
            raise StorageUnavailable("Failed to update progress") from e
        return record

    async def update(self, user_id: str, fn: UpdateFn) -> ProgressRecord:
        """Atomically replace user_id's record with fn(current)."""
        async with self.lock_for(user_id):
            current = await self.get(user_id)
            nxt = fn(current)
            if asyncio.iscoroutine(nxt):
                nxt = await nxt
            if nxt.user_id != user_id:
                raise ValueError(f"update for {user_id!r} produced a record for {nxt.user_id!r}")
            return await self.put(nxt)
