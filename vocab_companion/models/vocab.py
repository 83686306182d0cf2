"""Vocab model: static catalog entry (Latin headword + English gloss)."""
from sqlalchemy import Column, Integer, String

from vocab_companion.db.session import Base


class Vocab(Base):
    __tablename__ = "vocab"

    id = Column(Integer, primary_key=True, autoincrement=True)
    latin = Column(String(255), nullable=False)  # dictionary form, e.g. "puella, puellae"
    english = Column(String(255), nullable=False)
    gender = Column(String(8), nullable=True)  # m | f | n
    part_of_speech = Column(String(32), nullable=True, index=True)
    declension = Column(String(16), nullable=True, index=True)
    difficulty = Column(String(32), nullable=False, default="beginner")
