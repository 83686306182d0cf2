"""Google Translate v2 client.

Any object with an async ``translate(text, source_lang, target_lang) -> str``
method can stand in for GoogleTranslator; tests use in-memory fakes.
"""
from typing import Protocol

import httpx
import structlog

from vocab_companion.core.config import Settings
from vocab_companion.core.exceptions import TranslationUnavailable, TranslatorNotConfigured

logger = structlog.get_logger(__name__)


class Translator(Protocol):
    async def translate(self, text: str, source_lang: str, target_lang: str) -> str: ...


class GoogleTranslator:
    def __init__(
        self,
        api_key: str | None,
        url: str = "https://translation.googleapis.com/language/translate/v2",
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.api_key = api_key
        self.url = url
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Settings) -> "GoogleTranslator":
        return cls(
            api_key=settings.google_translate_api_key,
            url=settings.google_translate_url,
            timeout=settings.translate_timeout_seconds,
        )

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    async def close(self) -> None:
        await self._client.aclose()

    async def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        if not self.configured:
            raise TranslatorNotConfigured()

        try:
            response = await self._client.post(
                self.url,
                params={"key": self.api_key},
                json={"q": text, "source": source_lang, "target": target_lang, "format": "text"},
            )
            response.raise_for_status()
            return response.json()["data"]["translations"][0]["translatedText"]
        except httpx.HTTPStatusError as e:
            message = _provider_message(e.response) or str(e)
            logger.error("translate_http_error", status=e.response.status_code, error=message)
            raise TranslationUnavailable(message) from e
        except httpx.HTTPError as e:
            logger.error("translate_transport_error", error=str(e))
            raise TranslationUnavailable(str(e) or type(e).__name__) from e
        except (KeyError, IndexError, TypeError, ValueError) as e:
            logger.error("translate_bad_response", error=repr(e))
            raise TranslationUnavailable("Unexpected response from translation provider") from e


def _provider_message(response: httpx.Response) -> str | None:
    """Pull error.message out of a Google API error body, if there is one."""
    try:
        return response.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        return None
