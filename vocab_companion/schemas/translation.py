"""Pydantic schemas for translate requests and history entries."""
from datetime import datetime

from vocab_companion.schemas.progress import CamelModel
from vocab_companion.services.history_log import HistoryEntry


class TranslateRequestSchema(CamelModel):
    text: str | None = None
    source: str = "en"
    target: str = "la"
    user_id: str | None = None


class TranslateOutSchema(CamelModel):
    translation: str
    original: str
    source: str
    target: str


class HistoryEntrySchema(CamelModel):
    user_id: str
    source_text: str
    translated_text: str
    source_lang: str
    target_lang: str
    timestamp: datetime

    @classmethod
    def from_entry(cls, entry: HistoryEntry) -> "HistoryEntrySchema":
        return cls(
            user_id=entry.user_id,
            source_text=entry.source_text,
            translated_text=entry.translated_text,
            source_lang=entry.source_lang,
            target_lang=entry.target_lang,
            timestamp=entry.timestamp,
        )
