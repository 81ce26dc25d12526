"""FastAPI dependencies resolving the services built at startup"""
from fastapi import Request

from app.services.ocr_service import OCRSpaceService
from app.services.translation_service import TranslationService


def get_ocr_service(request: Request) -> OCRSpaceService:
    return request.app.state.ocr_service


def get_translation_service(request: Request) -> TranslationService:
    return request.app.state.translation_service


async def rate_limit(request: Request) -> None:
    """Count this request against the caller's window; raises RateLimitExceeded"""
    client_key = request.client.host if request.client else "unknown"
    await request.app.state.rate_limiter.hit(client_key)
