"""Translation service using the public Google Translate endpoint"""
import logging
from typing import Any, Optional, Protocol

import httpx

from app.errors import (
    GatewayError,
    TranslationError,
    UpstreamContentError,
    UpstreamProtocolError,
    UpstreamTransportError,
)
from app.models.response import TranslateResponse, TranslationResult

logger = logging.getLogger(__name__)


class TranslationProvider(Protocol):
    async def translate(self, text: str, source: str, target: str) -> TranslationResult:
        ...


class GoogleTranslateClient:
    """Thin client for ``translate.googleapis.com/translate_a/single``"""

    def __init__(
        self,
        api_url: str = "https://translate.googleapis.com/translate_a/single",
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Args:
            api_url: Endpoint URL
            timeout: Request timeout in seconds; None keeps the httpx default
            transport: Optional httpx transport (used by tests)
        """
        self.api_url = api_url
        self.timeout = timeout
        self._transport = transport

    async def translate(self, text: str, source: str, target: str) -> TranslationResult:
        """
        Translate ``text`` from ``source`` to ``target``.

        Raises:
            TranslationError: on any transport, HTTP or parsing failure
        """
        params = {
            "client": "gtx",
            "sl": source,
            "tl": target,
            "dt": "t",
            "q": text,
        }
        client_kwargs = {"transport": self._transport}
        if self.timeout is not None:
            client_kwargs["timeout"] = self.timeout

        try:
            async with httpx.AsyncClient(**client_kwargs) as client:
                response = await client.get(self.api_url, params=params)
                response.raise_for_status()
            return self._parse_response(response.json())
        except httpx.HTTPStatusError as e:
            cause = UpstreamProtocolError(
                f"Translation API Error: {e.response.status_code} - {e.response.reason_phrase}",
                status_code=e.response.status_code,
                reason=e.response.reason_phrase
            )
            raise TranslationError(cause.message, cause) from e
        except httpx.RequestError as e:
            cause = UpstreamTransportError("No response from translation service")
            raise TranslationError(cause.message, cause) from e
        except ValueError as e:
            cause = UpstreamContentError("Invalid response from translation service")
            raise TranslationError(cause.message, cause) from e
        except GatewayError as e:
            raise TranslationError(e.message, e) from e

    def _parse_response(self, payload: Any) -> TranslationResult:
        """
        Extract the translation from the nested-list response.

        Shape: ``[[["hola", "hello", ...], ...], null, "en", ...]``; the
        translation is the concatenation of the first item of every segment.
        """
        if not isinstance(payload, list) or not payload or not isinstance(payload[0], list):
            raise UpstreamContentError("Unrecognized translation response")

        translated = "".join(
            segment[0]
            for segment in payload[0]
            if isinstance(segment, list) and segment and isinstance(segment[0], str)
        )

        source_language = None
        if len(payload) > 2 and isinstance(payload[2], str):
            source_language = payload[2]

        return TranslationResult(text=translated, source_language=source_language)


class TranslationService:
    """Maps provider output onto the API's translate response"""

    def __init__(self, provider: TranslationProvider):
        self.provider = provider

    async def translate(self, text: str, source: str, target: str) -> TranslateResponse:
        """
        Translate a single text.

        No retries and no length limit; any provider failure propagates to
        the caller.
        """
        logger.info(f"Translating {len(text)} chars {source} -> {target}")
        result = await self.provider.translate(text, source, target)
        logger.debug(f"Provider detected source language: {result.source_language}")
        return TranslateResponse(translatedText=result.text, to=target)
