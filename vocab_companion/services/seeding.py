"""Seed the vocabulary catalog with a starter word list when it is empty."""
import structlog
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from vocab_companion.models.vocab import Vocab

logger = structlog.get_logger(__name__)

STARTER_VOCAB = [
    {"latin": "agricola, agricolae", "english": "farmer", "gender": "m", "part_of_speech": "noun", "declension": "first"},
    {"latin": "anima, animae", "english": "breath; life force; soul", "gender": "f", "part_of_speech": "noun", "declension": "first"},
    {"latin": "dea, deae", "english": "goddess", "gender": "f", "part_of_speech": "noun", "declension": "first"},
    {"latin": "fāma, fāmae", "english": "report, rumor; reputation, fame", "gender": "f", "part_of_speech": "noun", "declension": "first"},
    {"latin": "fēmina, fēminae", "english": "woman; wife", "gender": "f", "part_of_speech": "noun", "declension": "first"},
    {"latin": "puella, puellae", "english": "girl", "gender": "f", "part_of_speech": "noun", "declension": "first"},
    {"latin": "puer, puerī", "english": "boy", "gender": "m", "part_of_speech": "noun", "declension": "second"},
    {"latin": "sum, esse", "english": "be; exist", "part_of_speech": "verb"},
    {"latin": "amō, amāre", "english": "love", "part_of_speech": "verb"},
    {"latin": "possum, posse", "english": "be able, can", "part_of_speech": "verb"},
]


async def seed_vocabulary(db: AsyncSession) -> int:
    """Insert STARTER_VOCAB if the catalog is empty. Returns rows inserted."""
    count = (await db.execute(select(func.count(Vocab.id)))).scalar_one()
    if count:
        return 0

    db.add_all([Vocab(**item) for item in STARTER_VOCAB])
    await db.commit()
    logger.info("vocabulary_seeded", count=len(STARTER_VOCAB))
    return len(STARTER_VOCAB)
