"""Translate, then record the result in the history log."""
import structlog

from vocab_companion.core.exceptions import InvalidInput, TranslationUnavailable
from vocab_companion.services.history_log import HistoryEntry, HistoryLog
from vocab_companion.services.translator import Translator

logger = structlog.get_logger(__name__)

ANONYMOUS_USER = "anonymous"
DEFAULT_SOURCE_LANG = "en"
DEFAULT_TARGET_LANG = "la"


class TranslationPipeline:
    def __init__(self, translator: Translator, history: HistoryLog) -> None:
        self.translator = translator
        self.history = history

    async def record_translation(
        self,
        user_id: str | None,
        source_text: str | None,
        target_lang: str = DEFAULT_TARGET_LANG,
        source_lang: str = DEFAULT_SOURCE_LANG,
    ) -> str:
        """Return the translation of source_text; log it to history on success.

        A provider failure raises TranslationUnavailable and writes nothing.
        A history failure is logged and the translation is still returned.
        Cancellation during the provider call also writes nothing.
        """
        if not source_text or not source_text.strip():
            raise InvalidInput("text", "Text is required")

        try:
            translated = await self.translator.translate(source_text, source_lang, target_lang)
        except TranslationUnavailable:
            raise
        except Exception as e:
            # third-party translators may raise anything; normalize it
            logger.error("translator_failed", error=str(e))
            raise TranslationUnavailable(str(e) or type(e).__name__) from e

        user = user_id or ANONYMOUS_USER
        stored = await self.history.append(
            HistoryEntry(
                user_id=user,
                source_text=source_text,
                translated_text=translated,
                source_lang=source_lang,
                target_lang=target_lang,
            )
        )
        if not stored:
            logger.warning("translation_not_recorded", user_id=user)
        return translated
