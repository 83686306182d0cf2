"""Pydantic schemas for the vocabulary catalog."""
from pydantic import Field

from vocab_companion.schemas.progress import CamelModel


class VocabInSchema(CamelModel):
    latin: str = Field(min_length=1)
    english: str = Field(min_length=1)
    gender: str | None = None
    part_of_speech: str | None = None
    declension: str | None = None
    difficulty: str = "beginner"


class VocabOutSchema(VocabInSchema):
    id: int

    model_config = CamelModel.model_config | {"from_attributes": True}
