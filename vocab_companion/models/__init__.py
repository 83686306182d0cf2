from vocab_companion.models.progress import UserProgress
from vocab_companion.models.translation import TranslationHistory
from vocab_companion.models.vocab import Vocab

__all__ = ["UserProgress", "TranslationHistory", "Vocab"]
