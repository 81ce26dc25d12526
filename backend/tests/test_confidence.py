"""
Tests for app/utils/confidence.py - heuristic OCR confidence.
"""
import pytest

from app.utils.confidence import estimate_confidence


@pytest.mark.parametrize("length, expected", [
    (0, 0),
    (1, 80),
    (10, 80),
    (20, 80),
    (21, 85),
    (30, 85),
    (50, 85),
    (51, 90),
    (60, 90),
    (100, 90),
    (101, 95),
    (150, 95),
])
def test_step_function_on_success(length, expected):
    assert estimate_confidence(1, "x" * length) == expected


@pytest.mark.parametrize("exit_code", [0, -10, -20, -30, -99, 2])
def test_failed_parse_scores_zero(exit_code):
    assert estimate_confidence(exit_code, "x" * 150) == 0


def test_length_measured_after_trimming():
    assert estimate_confidence(1, "   \r\n  ") == 0
    assert estimate_confidence(1, "  " + "x" * 10 + "\r\n" * 30) == 80


def test_missing_text_scores_zero():
    assert estimate_confidence(1, None) == 0
    assert estimate_confidence(1, "") == 0
