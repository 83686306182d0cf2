"""Vocab Companion - FastAPI app entry point."""
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from vocab_companion.core.config import Settings, configure_logging, get_settings
from vocab_companion.core.exceptions import VocabCompanionError
from vocab_companion.db import base  # noqa: F401  registers models on Base.metadata
from vocab_companion.db.session import Database
from vocab_companion.routers import api, vocab
from vocab_companion.services.history_log import HistoryLog
from vocab_companion.services.progress_store import ProgressStore
from vocab_companion.services.seeding import seed_vocabulary
from vocab_companion.services.study_service import StudyService
from vocab_companion.services.translation_pipeline import TranslationPipeline
from vocab_companion.services.translator import GoogleTranslator, Translator

logger = structlog.get_logger(__name__)


def build_study_service(database: Database, translator: Translator, settings: Settings) -> StudyService:
    history = HistoryLog(database)
    return StudyService(
        store=ProgressStore(database),
        history=history,
        pipeline=TranslationPipeline(translator, history),
        history_limit=settings.history_limit,
    )


def create_app(
    settings: Settings | None = None,
    database: Database | None = None,
    translator: Translator | None = None,
) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db = database or Database(settings.database_url)
        await db.connect()
        await db.create_all()
        if settings.seed_vocabulary:
            async with db.session() as session:
                await seed_vocabulary(session)

        owns_translator = translator is None
        tr = translator or GoogleTranslator.from_settings(settings)
        if isinstance(tr, GoogleTranslator) and not tr.configured:
            logger.warning("translator_not_configured", hint="set GOOGLE_TRANSLATE_API_KEY")

        app.state.db = db
        app.state.study_service = build_study_service(db, tr, settings)
        logger.info("startup_complete", database=db.url.split("://", 1)[0])

        yield

        if owns_translator:
            await tr.close()
        await db.dispose()

    app = FastAPI(
        title=settings.app_name,
        description="Flashcard progress, translation practice and history",
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(VocabCompanionError)
    async def vocab_companion_error_handler(request: Request, exc: VocabCompanionError):
        if exc.status_code >= 500:
            logger.error("request_failed", path=request.url.path, error=exc.message)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    app.include_router(api.router)
    app.include_router(vocab.router)

    app.add_api_route("/health", api.health, methods=["GET"])

    return app


configure_logging(get_settings().environment)
app = create_app()
