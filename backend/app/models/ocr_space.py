"""Typed OCR.space wire format and its classification into outcome variants"""
from __future__ import annotations

import logging
from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, ValidationError, field_validator

logger = logging.getLogger(__name__)

PARSE_SUCCESS_EXIT_CODE = 1


def _join_messages(value: Any) -> Optional[str]:
    """OCR.space sends ErrorMessage either as a string or a list of strings"""
    if value is None:
        return None
    if isinstance(value, list):
        parts = [str(item) for item in value if item]
        return "; ".join(parts) or None
    return str(value) or None


class OCRSpaceParsedResult(BaseModel):
    """One entry of ``ParsedResults``"""

    FileParseExitCode: int
    ParsedText: Optional[str] = ""
    ErrorMessage: Optional[str] = None
    ErrorDetails: Optional[str] = None
    TextOrientation: Optional[str] = None

    model_config = {"extra": "ignore"}

    @field_validator("ErrorMessage", "ErrorDetails", mode="before")
    @classmethod
    def normalize_messages(cls, value):
        return _join_messages(value)


class OCRSpaceResponse(BaseModel):
    """Top-level body returned by ``POST /parse/image``"""

    IsErroredOnProcessing: bool = False
    OCRExitCode: Optional[int] = None
    ParsedResults: Optional[List[OCRSpaceParsedResult]] = None
    ErrorMessage: Optional[str] = None
    ErrorDetails: Optional[str] = None
    ProcessingTimeInMilliseconds: Optional[Union[str, float]] = None

    model_config = {"extra": "ignore"}

    @field_validator("ErrorMessage", "ErrorDetails", mode="before")
    @classmethod
    def normalize_messages(cls, value):
        return _join_messages(value)


# Outcome variants ---------------------------------------------------------

class ProcessingError(BaseModel):
    kind: Literal["processing_error"] = "processing_error"
    message: str


class ParsedSuccess(BaseModel):
    kind: Literal["parsed"] = "parsed"
    exit_code: int
    text: str


class ParseFailure(BaseModel):
    kind: Literal["parse_failure"] = "parse_failure"
    exit_code: int
    message: str


class NoResults(BaseModel):
    kind: Literal["no_results"] = "no_results"
    message: str = "No results from OCR"


class Unrecognized(BaseModel):
    kind: Literal["unrecognized"] = "unrecognized"
    message: str = "Unrecognized OCR response"


OCRSpaceOutcome = Union[ProcessingError, ParsedSuccess, ParseFailure, NoResults, Unrecognized]


def classify_response(payload: Any) -> OCRSpaceOutcome:
    """
    Parse a raw OCR.space JSON body into exactly one outcome variant.

    Only the first parsed result is considered, since a single image is
    submitted per request.
    """
    # The global error flag wins even when the rest of the body is malformed
    if isinstance(payload, dict) and payload.get("IsErroredOnProcessing") is True:
        message = _join_messages(payload.get("ErrorMessage"))
        return ProcessingError(message=message or "OCR processing error")

    try:
        response = OCRSpaceResponse.model_validate(payload)
    except ValidationError as e:
        logger.warning(f"Unrecognized OCR.space response shape: {e.error_count()} error(s)")
        return Unrecognized()

    if response.IsErroredOnProcessing:
        return ProcessingError(message=response.ErrorMessage or "OCR processing error")

    if not response.ParsedResults:
        return NoResults()

    result = response.ParsedResults[0]
    if result.FileParseExitCode == PARSE_SUCCESS_EXIT_CODE:
        return ParsedSuccess(exit_code=result.FileParseExitCode, text=result.ParsedText or "")

    return ParseFailure(
        exit_code=result.FileParseExitCode,
        message=result.ErrorMessage or "Failed to parse image"
    )
