"""Read/write operations the API exposes over progress, history and translation."""
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

import structlog

from vocab_companion.core.exceptions import InvalidInput
from vocab_companion.services.history_log import MAX_HISTORY_LIMIT, HistoryEntry, HistoryLog
from vocab_companion.services.progress_engine import ProgressDelta, ProgressRecord, apply_delta, utcnow
from vocab_companion.services.progress_store import ProgressStore
from vocab_companion.services.translation_pipeline import (
    DEFAULT_SOURCE_LANG,
    DEFAULT_TARGET_LANG,
    TranslationPipeline,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class TranslationRequest:
    text: str | None
    source: str = DEFAULT_SOURCE_LANG
    target: str = DEFAULT_TARGET_LANG
    user_id: str | None = None


@dataclass(frozen=True)
class TranslationResult:
    translation: str
    original: str
    source: str
    target: str


class StudyService:
    def __init__(
        self,
        store: ProgressStore,
        history: HistoryLog,
        pipeline: TranslationPipeline,
        history_limit: int = MAX_HISTORY_LIMIT,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self.store = store
        self.history = history
        self.pipeline = pipeline
        self.history_limit = history_limit
        self.clock = clock

    async def get_progress(self, user_id: str) -> ProgressRecord:
        """Stored record, or a zero-valued one that is not persisted."""
        record = await self.store.get(user_id)
        return record if record is not None else ProgressRecord.empty(user_id)

    async def get_history(self, user_id: str) -> list[HistoryEntry]:
        return await self.history.list_by_user(user_id, self.history_limit)

    async def update_progress(self, user_id: str | None, delta: ProgressDelta) -> ProgressRecord:
        if not user_id:
            raise InvalidInput("userId")
        record = await self.store.update(
            user_id,
            lambda current: apply_delta(current, delta, user_id=user_id, now=self.clock()),
        )
        logger.info(
            "progress_updated",
            user_id=user_id,
            cards_studied=record.cards_studied,
            study_streak=record.study_streak,
            mastered=len(record.mastered_words),
        )
        return record

    async def translate(self, request: TranslationRequest) -> TranslationResult:
        source = request.source or DEFAULT_SOURCE_LANG
        target = request.target or DEFAULT_TARGET_LANG
        translation = await self.pipeline.record_translation(
            request.user_id, request.text, target_lang=target, source_lang=source
        )
        return TranslationResult(translation=translation, original=request.text, source=source, target=target)
