"""Validation of data-URL encoded images before they are sent to OCR"""
import re
from typing import Optional

from app.models.response import ValidationResult

DATA_URL_PATTERN = re.compile(r"^data:image/(png|jpeg|jpg|gif|webp);base64,")
MAX_IMAGE_SIZE_MB = 10


def estimate_decoded_size(image_data: str) -> float:
    """
    Approximate decoded byte size of a base64 string.

    Measured over the whole string, data-URL prefix included, so it slightly
    overestimates the real payload size.
    """
    return len(image_data) * 3 / 4


def validate_image(image_data: Optional[str], max_size_mb: int = MAX_IMAGE_SIZE_MB) -> ValidationResult:
    """
    Check that an uploaded image is a supported data URL within the size limit.

    Args:
        image_data: String of the form ``data:image/<type>;base64,<payload>``
        max_size_mb: Upper bound on the estimated decoded size

    Returns:
        ValidationResult with ``isValid`` and, on failure, an error code and message
    """
    if not image_data:
        return ValidationResult(isValid=False, code="EMPTY_INPUT", error="No image data provided")

    if not DATA_URL_PATTERN.match(image_data):
        return ValidationResult(
            isValid=False,
            code="INVALID_FORMAT",
            error="Invalid image format. Expected base64 encoded image."
        )

    max_size_bytes = max_size_mb * 1024 * 1024
    if estimate_decoded_size(image_data) > max_size_bytes:
        return ValidationResult(
            isValid=False,
            code="TOO_LARGE",
            error=f"Image size exceeds maximum allowed size of {max_size_mb}MB"
        )

    return ValidationResult(isValid=True)
