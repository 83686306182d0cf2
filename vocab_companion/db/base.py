"""SQLAlchemy declarative base and model imports for Alembic."""
from vocab_companion.db.session import Base

# Import all models so Alembic can see them
from vocab_companion.models.progress import UserProgress  # noqa: F401
from vocab_companion.models.translation import TranslationHistory  # noqa: F401
from vocab_companion.models.vocab import Vocab  # noqa: F401

__all__ = ["Base", "UserProgress", "TranslationHistory", "Vocab"]
