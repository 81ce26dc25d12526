"""
Tests for app/models/ocr_space.py - classification of OCR.space responses.
"""
import pytest

from app.models.ocr_space import (
    NoResults,
    ParsedSuccess,
    ParseFailure,
    ProcessingError,
    Unrecognized,
    classify_response,
)


class TestClassifyResponse:

    def test_success(self, ocr_space_success):
        outcome = classify_response(ocr_space_success)
        assert isinstance(outcome, ParsedSuccess)
        assert outcome.text == "Hello world\r\n"
        assert outcome.exit_code == 1

    def test_processing_error_with_message_list(self):
        outcome = classify_response({
            "OCRExitCode": 99,
            "IsErroredOnProcessing": True,
            "ErrorMessage": ["Unable to recognize the file type", "E216:Unable to detect the file extension"],
            "ProcessingTimeInMilliseconds": "0"
        })
        assert isinstance(outcome, ProcessingError)
        assert outcome.message == "Unable to recognize the file type; E216:Unable to detect the file extension"

    def test_processing_error_without_message(self):
        outcome = classify_response({"IsErroredOnProcessing": True})
        assert isinstance(outcome, ProcessingError)
        assert outcome.message == "OCR processing error"

    def test_processing_error_wins_over_results(self, ocr_space_success):
        ocr_space_success["IsErroredOnProcessing"] = True
        ocr_space_success["ErrorMessage"] = "Timed out waiting for results"
        outcome = classify_response(ocr_space_success)
        assert isinstance(outcome, ProcessingError)
        assert outcome.message == "Timed out waiting for results"

    def test_parse_failure(self):
        outcome = classify_response({
            "IsErroredOnProcessing": False,
            "ParsedResults": [{"FileParseExitCode": -10, "ParsedText": "", "ErrorMessage": "OCR Engine Parse Error"}]
        })
        assert isinstance(outcome, ParseFailure)
        assert outcome.exit_code == -10
        assert outcome.message == "OCR Engine Parse Error"

    def test_parse_failure_default_message(self):
        outcome = classify_response({
            "IsErroredOnProcessing": False,
            "ParsedResults": [{"FileParseExitCode": 0}]
        })
        assert isinstance(outcome, ParseFailure)
        assert outcome.message == "Failed to parse image"

    @pytest.mark.parametrize("results", [None, []])
    def test_no_results(self, results):
        payload = {"IsErroredOnProcessing": False}
        if results is not None:
            payload["ParsedResults"] = results
        outcome = classify_response(payload)
        assert isinstance(outcome, NoResults)
        assert outcome.message == "No results from OCR"

    @pytest.mark.parametrize("payload", [
        None,
        "Too many requests",
        [],
        {"IsErroredOnProcessing": "maybe"},
        {"IsErroredOnProcessing": False, "ParsedResults": "none"},
        {"IsErroredOnProcessing": False, "ParsedResults": [{"ParsedText": "no exit code"}]},
    ])
    def test_unrecognized_shapes(self, payload):
        assert isinstance(classify_response(payload), Unrecognized)

    def test_null_parsed_text_treated_as_empty(self):
        outcome = classify_response({
            "IsErroredOnProcessing": False,
            "ParsedResults": [{"FileParseExitCode": 1, "ParsedText": None}]
        })
        assert isinstance(outcome, ParsedSuccess)
        assert outcome.text == ""

    def test_processing_error_survives_malformed_results(self):
        outcome = classify_response({
            "IsErroredOnProcessing": True,
            "ErrorMessage": "The API key is invalid",
            "ParsedResults": [{"ErrorMessage": "E500"}]
        })
        assert isinstance(outcome, ProcessingError)
        assert outcome.message == "The API key is invalid"

    def test_processing_error_list_message_with_malformed_body(self):
        outcome = classify_response({
            "IsErroredOnProcessing": True,
            "ErrorMessage": ["Timed out", "E101"],
            "OCRExitCode": "not a number"
        })
        assert isinstance(outcome, ProcessingError)
        assert outcome.message == "Timed out; E101"

    @pytest.mark.parametrize("payload", [{}, {"OCRExitCode": 3}])
    def test_missing_error_flag_treated_as_false(self, payload):
        assert isinstance(classify_response(payload), NoResults)
