"""TranslationHistory model: one immutable row per successful translation."""
from sqlalchemy import Column, DateTime, Integer, String, Text

from vocab_companion.db.session import Base


class TranslationHistory(Base):
    __tablename__ = "translation_history"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(255), nullable=False, index=True)
    source_text = Column(Text, nullable=False)
    translated_text = Column(Text, nullable=False)
    source_lang = Column(String(16), nullable=False, default="en")
    target_lang = Column(String(16), nullable=False, default="la")
    timestamp = Column(DateTime(timezone=True), nullable=False, index=True)
