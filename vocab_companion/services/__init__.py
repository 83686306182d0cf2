from vocab_companion.services.history_log import HistoryEntry, HistoryLog
from vocab_companion.services.progress_engine import ProgressDelta, ProgressRecord, apply_delta
from vocab_companion.services.progress_store import ProgressStore
from vocab_companion.services.seeding import seed_vocabulary
from vocab_companion.services.study_service import StudyService, TranslationRequest, TranslationResult
from vocab_companion.services.translation_pipeline import TranslationPipeline
from vocab_companion.services.translator import GoogleTranslator, Translator

__all__ = [
    "GoogleTranslator",
    "HistoryEntry",
    "HistoryLog",
    "ProgressDelta",
    "ProgressRecord",
    "ProgressStore",
    "StudyService",
    "TranslationPipeline",
    "TranslationRequest",
    "TranslationResult",
    "Translator",
    "apply_delta",
    "seed_vocabulary",
]
