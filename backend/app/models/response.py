"""Response models for the translation and upload API"""
from pydantic import BaseModel, Field
from typing import Literal, Optional

from app.errors import ErrorKind


class TranslateResponse(BaseModel):
    """Response model for /api/translate endpoint"""

    translatedText: str = Field(description="Translated text")
    to: str = Field(description="Target language code")

    model_config = {
        "json_schema_extra": {
            "examples": [{
                "translatedText": "hola",
                "to": "es"
            }]
        }
    }


class TranslationResult(BaseModel):
    """What the translation provider gave back"""

    text: str
    source_language: Optional[str] = None


class ValidationResult(BaseModel):
    """Outcome of validating an uploaded image string"""

    isValid: bool
    error: Optional[str] = None
    code: Optional[Literal["EMPTY_INPUT", "INVALID_FORMAT", "TOO_LARGE"]] = None


class OCRResult(BaseModel):
    """Normalized OCR outcome, independent of the provider's wire format.

    ``confidence`` is a length-based heuristic (see
    ``app.utils.confidence``), not a probability, and is only set when
    ``success`` is true.
    """

    success: bool
    text: Optional[str] = None
    confidence: Optional[int] = Field(default=None, ge=0, le=100)
    language: Optional[str] = None
    processingTime: int = Field(description="Milliseconds from call start to classification")
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = Field(default=None, exclude=True)


class UploadSuccessResponse(BaseModel):
    """200 body for /api/upload"""

    success: Literal[True] = True
    text: str
    confidence: int
    language: str
    processingTime: int

    model_config = {
        "json_schema_extra": {
            "examples": [{
                "success": True,
                "text": "Hello world",
                "confidence": 80,
                "language": "eng",
                "processingTime": 1234
            }]
        }
    }


class UploadFailureResponse(BaseModel):
    """422 / 500 body for /api/upload"""

    success: Literal[False] = False
    error: str
    message: str


class ErrorResponse(BaseModel):
    """Generic error envelope"""

    error: str
    message: Optional[str] = None
    details: Optional[str] = None


class HealthResponse(BaseModel):
    status: str = "OK"
    message: str
