"""Image upload / OCR endpoint router"""
import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.config import settings
from app.dependencies import get_ocr_service
from app.errors import ErrorKind
from app.models.request import ImageUploadRequest
from app.models.response import ErrorResponse, UploadFailureResponse, UploadSuccessResponse
from app.services.ocr_service import OCRSpaceService
from app.utils.validation import validate_image

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/upload")


@router.post(
    "",
    response_model=UploadSuccessResponse,
    responses={
        400: {"model": ErrorResponse},
        422: {"model": UploadFailureResponse},
        500: {"model": UploadFailureResponse},
    }
)
async def upload_image(
    request: ImageUploadRequest,
    ocr_service: OCRSpaceService = Depends(get_ocr_service)
):
    """
    Recognize text in an uploaded image:
    1. Validate the data URL (format and size), before any network call
    2. Send it to the OCR provider
    3. Return the recognized text, or the provider's error
    """
    try:
        validation = validate_image(request.image, max_size_mb=settings.max_image_size_mb)
        if not validation.isValid:
            logger.info(f"Rejected upload ({ErrorKind.VALIDATION.value}/{validation.code}): {validation.error}")
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content=ErrorResponse(
                    error="Invalid image",
                    message=validation.error
                ).model_dump(exclude_none=True)
            )

        result = await ocr_service.recognize(request.image)

        if result.success:
            return UploadSuccessResponse(
                text=result.text or "",
                confidence=result.confidence or 0,
                language=result.language or "",
                processingTime=result.processingTime
            )

        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=UploadFailureResponse(
                error=result.error or "OCR processing failed",
                message="OCR processing failed"
            ).model_dump()
        )

    except Exception as e:
        logger.error(f"Upload error: {e}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=UploadFailureResponse(
                error="Internal server error",
                message=str(e) or "Unknown error occurred"
            ).model_dump()
        )
