"""Text translation endpoint router"""
import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.dependencies import get_translation_service, rate_limit
from app.errors import TranslationError
from app.models.request import TranslateRequest
from app.models.response import ErrorResponse, TranslateResponse
from app.services.translation_service import TranslationService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/translate", dependencies=[Depends(rate_limit)])


@router.post(
    "",
    response_model=TranslateResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)
async def translate_text(
    request: TranslateRequest,
    translation_service: TranslationService = Depends(get_translation_service)
):
    """
    Translate text between two languages.

    Language codes are passed through to the provider unchecked.
    """
    missing = request.missing_fields()
    if missing:
        logger.info(f"Translate request missing fields: {missing}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(
                error="Missing required fields: text, from, and to languages are required"
            ).model_dump(exclude_none=True)
        )

    try:
        return await translation_service.translate(request.text, request.from_, request.to)
    except TranslationError as e:
        logger.error(f"Translation failed ({e.kind.value}): {e.message}")
        return _translation_failed(e)
    except Exception as e:
        logger.error(f"Translation failed: {e}", exc_info=True)
        return _translation_failed(e)


def _translation_failed(error: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(
            error="Translation failed",
            details=str(error) or "Unknown error"
        ).model_dump(exclude_none=True)
    )
