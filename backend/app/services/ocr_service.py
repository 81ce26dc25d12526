"""OCR service backed by the OCR.space HTTP API"""
import logging
import re
import time
from typing import Optional

import httpx

from app.errors import (
    ErrorKind,
    GatewayError,
    UpstreamContentError,
    UpstreamProtocolError,
    UpstreamTransportError,
)
from app.models.ocr_space import (
    OCRSpaceOutcome,
    ParsedSuccess,
    ProcessingError,
    classify_response,
)
from app.models.response import OCRResult
from app.utils.confidence import estimate_confidence

logger = logging.getLogger(__name__)

DATA_URL_PREFIX = re.compile(r"^data:image/\w+;base64,")

# OCR.space does not report the detected language back to us
DEFAULT_LANGUAGE = "eng"


def to_jpeg_data_url(image_data: str) -> str:
    """
    Strip any ``data:image/*;base64,`` prefix and re-wrap the payload as JPEG.

    The upstream is always told the image is JPEG, whatever type the caller
    declared.
    """
    payload = DATA_URL_PREFIX.sub("", image_data, count=1)
    return f"data:image/jpeg;base64,{payload}"


class OCRSpaceService:
    """Service for recognizing text in images through OCR.space"""

    def __init__(
        self,
        api_key: Optional[str],
        api_url: str = "https://api.ocr.space/parse/image",
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Args:
            api_key: OCR.space API key, sent in the ``apikey`` header
            api_url: Parse endpoint URL
            timeout: Seconds to wait for the upstream before giving up
            transport: Optional httpx transport (used by tests)
        """
        self.api_key = api_key or ""
        self.api_url = api_url
        self.timeout = timeout
        self._transport = transport

        if not self.api_key:
            logger.warning("OCR_SPACE_API_KEY not set; OCR requests will be rejected by the provider")

    def build_form(self, image_data: str) -> dict:
        """Multipart form fields for a single-image parse request"""
        return {
            "base64Image": to_jpeg_data_url(image_data),
            "language": "auto",
            "isOverlayRequired": "false",
            "detectOrientation": "true",
            "scale": "true",
            "OCREngine": "2",
        }

    async def recognize(self, image_data: str) -> OCRResult:
        """
        Run OCR on a data-URL encoded image.

        Never raises: every failure is folded into an ``OCRResult`` with
        ``success=False``. ``processingTime`` is filled on every path.

        Args:
            image_data: Base64 image, with or without a data-URL prefix

        Returns:
            OCRResult
        """
        start_time = time.monotonic()

        def elapsed_ms() -> int:
            return int((time.monotonic() - start_time) * 1000)

        try:
            payload = await self._post(image_data)
            outcome = classify_response(payload)
            result = self._to_result(outcome, elapsed_ms())
        except GatewayError as e:
            result = OCRResult(
                success=False,
                error=e.message,
                error_kind=e.kind,
                processingTime=elapsed_ms()
            )
        except Exception as e:
            logger.error(f"OCR service error: {e}", exc_info=True)
            result = OCRResult(
                success=False,
                error=str(e) or "Unknown OCR error",
                error_kind=ErrorKind.UNEXPECTED,
                processingTime=elapsed_ms()
            )

        if result.success:
            logger.info(
                f"OCR succeeded: {len(result.text or '')} chars, "
                f"confidence {result.confidence} in {result.processingTime}ms"
            )
        else:
            logger.warning(
                f"OCR failed ({result.error_kind.value if result.error_kind else 'unknown'}): "
                f"{result.error} after {result.processingTime}ms"
            )
        return result

    async def _post(self, image_data: str):
        """Send the parse request and return the decoded JSON body"""
        # (None, value) tuples make httpx encode plain fields as multipart/form-data
        files = {name: (None, value) for name, value in self.build_form(image_data).items()}
        headers = {"apikey": self.api_key}

        logger.debug(f"Sending image to OCR.space ({len(image_data)} chars)")
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(self.api_url, files=files, headers=headers)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            reason = e.response.reason_phrase
            raise UpstreamProtocolError(
                f"OCR API Error: {status_code} - {reason}",
                status_code=status_code,
                reason=reason
            ) from e
        except httpx.RequestError as e:
            logger.error(f"No response from OCR.space: {e!r}")
            raise UpstreamTransportError("No response from OCR service") from e

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamContentError("Unrecognized OCR response") from e

    def _to_result(self, outcome: OCRSpaceOutcome, processing_time: int) -> OCRResult:
        """Map a classified provider outcome onto the uniform result type"""
        if isinstance(outcome, ParsedSuccess):
            return OCRResult(
                success=True,
                text=outcome.text,
                confidence=estimate_confidence(outcome.exit_code, outcome.text),
                language=DEFAULT_LANGUAGE,
                processingTime=processing_time
            )

        # ParseFailure, NoResults and Unrecognized are all content problems
        if isinstance(outcome, ProcessingError):
            kind = ErrorKind.UPSTREAM_PROTOCOL
        else:
            kind = ErrorKind.UPSTREAM_CONTENT

        return OCRResult(
            success=False,
            error=outcome.message,
            error_kind=kind,
            processingTime=processing_time
        )
