"""Vocabulary catalog routes: list, random pick, filters, admin add."""
import random
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from vocab_companion.core.exceptions import StorageUnavailable
from vocab_companion.db.session import get_db
from vocab_companion.models.vocab import Vocab
from vocab_companion.schemas.vocab import VocabInSchema, VocabOutSchema

router = APIRouter(prefix="/api/vocab", tags=["vocab"])

DbSession = Annotated[AsyncSession, Depends(get_db)]


async def _all(db: AsyncSession, *criteria, failure: str) -> list[Vocab]:
    stmt = select(Vocab).order_by(Vocab.id)
    if criteria:
        stmt = stmt.where(*criteria)
    try:
        result = await db.execute(stmt)
    except SQLAlchemyError as e:
        raise StorageUnavailable(failure) from e
    return list(result.scalars().all())


@router.get("", response_model=list[VocabOutSchema])
async def list_vocab(db: DbSession):
    return await _all(db, failure="Failed to fetch vocabulary")


@router.get("/random", response_model=VocabOutSchema)
async def random_vocab(db: DbSession):
    """One random catalog entry."""
    try:
        count = (await db.execute(select(func.count(Vocab.id)))).scalar_one()
        if not count:
            raise HTTPException(status_code=404, detail="Vocabulary is empty")
        result = await db.execute(select(Vocab).order_by(Vocab.id).offset(random.randrange(count)).limit(1))
    except SQLAlchemyError as e:
        raise StorageUnavailable("Failed to fetch random vocabulary") from e
    return result.scalar_one()


@router.get("/declension/{declension}", response_model=list[VocabOutSchema])
async def vocab_by_declension(declension: str, db: DbSession):
    return await _all(db, Vocab.declension == declension, failure="Failed to fetch vocabulary by declension")


@router.get("/pos/{pos}", response_model=list[VocabOutSchema])
async def vocab_by_part_of_speech(pos: str, db: DbSession):
    return await _all(db, Vocab.part_of_speech == pos, failure="Failed to fetch vocabulary by part of speech")


@router.post("", response_model=VocabOutSchema, status_code=status.HTTP_201_CREATED)
async def add_vocab(body: VocabInSchema, db: DbSession):
    """Add a catalog entry (admin)."""
    vocab = Vocab(**body.model_dump())
    try:
        db.add(vocab)
        await db.commit()
        await db.refresh(vocab)
    except SQLAlchemyError as e:
        await db.rollback()
        raise StorageUnavailable("Failed to add vocabulary") from e
    return vocab
