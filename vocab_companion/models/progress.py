"""UserProgress model: one row per user_id. Mastered words kept as a JSON list."""
from sqlalchemy import Column, DateTime, Integer, String, Text

from vocab_companion.db.session import Base


class UserProgress(Base):
    __tablename__ = "user_progress"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(255), unique=True, nullable=False, index=True)

    cards_studied = Column(Integer, nullable=False, default=0)
    score = Column(Integer, nullable=False, default=0)
    study_streak = Column(Integer, nullable=False, default=1)  # consecutive study days
    # SQLite has no native array type; sorted JSON list of words
    mastered_words_json = Column(Text, nullable=False, default="[]")

    last_studied = Column(DateTime(timezone=True), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
