"""Pydantic schemas for progress requests and responses (camelCase on the wire)."""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from vocab_companion.services.progress_engine import ProgressDelta, ProgressRecord


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProgressUpdateSchema(CamelModel):
    user_id: str | None = None
    cards_studied: int | None = Field(default=None, ge=0)
    score: int | None = Field(default=None, ge=0)
    mastered_words: list[str] | None = None

    def to_delta(self) -> ProgressDelta:
        return ProgressDelta.of(
            cards_studied=self.cards_studied,
            score=self.score,
            mastered_words=self.mastered_words,
        )


class ProgressOutSchema(CamelModel):
    user_id: str
    cards_studied: int
    score: int
    study_streak: int
    mastered_words: list[str]
    last_studied: datetime | None = None
    created_at: datetime | None = None

    @classmethod
    def from_record(cls, record: ProgressRecord) -> "ProgressOutSchema":
        return cls(
            user_id=record.user_id,
            cards_studied=record.cards_studied,
            score=record.score,
            study_streak=record.study_streak,
            mastered_words=sorted(record.mastered_words),
            last_studied=record.last_studied,
            created_at=record.created_at,
        )
