"""Heuristic OCR confidence score.

OCR.space does not report a confidence value, so one is estimated from the
parse exit code and the amount of recognized text. The result is a step
function of trimmed text length, not a calibrated probability.
"""
from typing import Optional

from app.models.ocr_space import PARSE_SUCCESS_EXIT_CODE

# (exclusive lower bound on trimmed length, score), checked in order
CONFIDENCE_STEPS = (
    (100, 95),
    (50, 90),
    (20, 85),
    (0, 80),
)


def estimate_confidence(exit_code: int, parsed_text: Optional[str]) -> int:
    """Return a 0-100 score; 0 for failed parses or empty text"""
    if exit_code != PARSE_SUCCESS_EXIT_CODE or not parsed_text:
        return 0

    text_length = len(parsed_text.strip())
    for threshold, score in CONFIDENCE_STEPS:
        if text_length > threshold:
            return score
    return 0
