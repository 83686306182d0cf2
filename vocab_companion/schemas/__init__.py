from vocab_companion.schemas.progress import ProgressOutSchema, ProgressUpdateSchema
from vocab_companion.schemas.translation import HistoryEntrySchema, TranslateOutSchema, TranslateRequestSchema
from vocab_companion.schemas.vocab import VocabInSchema, VocabOutSchema

__all__ = [
    "HistoryEntrySchema",
    "ProgressOutSchema",
    "ProgressUpdateSchema",
    "TranslateOutSchema",
    "TranslateRequestSchema",
    "VocabInSchema",
    "VocabOutSchema",
]
