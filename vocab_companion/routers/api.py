"""API routes: JSON for progress, translation and translation history."""
from datetime import datetime, timezone
from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from vocab_companion.core.exceptions import TranslationUnavailable, TranslatorNotConfigured
from vocab_companion.schemas.progress import ProgressOutSchema, ProgressUpdateSchema
from vocab_companion.schemas.translation import HistoryEntrySchema, TranslateOutSchema, TranslateRequestSchema
from vocab_companion.services.study_service import StudyService, TranslationRequest

router = APIRouter(prefix="/api", tags=["api"])
logger = structlog.get_logger(__name__)


def get_study_service(request: Request) -> StudyService:
    return request.app.state.study_service


StudyServiceDep = Annotated[StudyService, Depends(get_study_service)]


@router.get("/health")
async def health():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


@router.get("/progress/{user_id}", response_model=ProgressOutSchema)
async def get_progress(user_id: str, service: StudyServiceDep):
    """Current progress, or a zero-valued record for unknown users."""
    record = await service.get_progress(user_id)
    return ProgressOutSchema.from_record(record)


@router.post("/progress", response_model=ProgressOutSchema)
async def update_progress(body: ProgressUpdateSchema, service: StudyServiceDep):
    """Apply one study session's results; returns the updated record."""
    record = await service.update_progress(body.user_id, body.to_delta())
    return ProgressOutSchema.from_record(record)


@router.post("/translate", response_model=TranslateOutSchema)
async def translate(body: TranslateRequestSchema, service: StudyServiceDep):
    """Translate text via the provider and record it in the user's history."""
    try:
        result = await service.translate(
            TranslationRequest(text=body.text, source=body.source, target=body.target, user_id=body.user_id)
        )
    except TranslatorNotConfigured as e:
        return JSONResponse(
            status_code=500,
            content={
                "error": e.message,
                "translation": "Please configure GOOGLE_TRANSLATE_API_KEY in .env file",
            },
        )
    except TranslationUnavailable as e:
        logger.error("translation_failed", error=e.message)
        return JSONResponse(status_code=500, content={"error": "Translation failed", "message": e.message})

    return TranslateOutSchema(
        translation=result.translation,
        original=result.original,
        source=result.source,
        target=result.target,
    )


@router.get("/translations/{user_id}", response_model=list[HistoryEntrySchema])
async def get_translations(user_id: str, service: StudyServiceDep):
    """Up to 50 most recent translations, newest first."""
    entries = await service.get_history(user_id)
    return [HistoryEntrySchema.from_entry(e) for e in entries]
