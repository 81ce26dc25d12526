"""
Pytest configuration and shared fixtures for the Translation API tests.
"""
import base64
import pytest
from unittest.mock import AsyncMock, MagicMock
from fastapi.testclient import TestClient

from app.dependencies import get_ocr_service, get_translation_service
from app.models.response import OCRResult, TranslationResult
from app.services.translation_service import TranslationService


PNG_BYTES = (
    b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01"
    b"\x08\x06\x00\x00\x00\x1f\x15\xc4\x89\x00\x00\x00\rIDATx\x9cc\xf8\x0f"
    b"\x00\x00\x01\x01\x00\x05\x18\xd8N\x00\x00\x00\x00IEND\xaeB`\x82"
)


@pytest.fixture
def png_data_url():
    """A tiny valid PNG as a data URL."""
    return "data:image/png;base64," + base64.b64encode(PNG_BYTES).decode("ascii")


@pytest.fixture
def ocr_space_success():
    """OCR.space body for a successful parse."""
    return {
        "ParsedResults": [
            {
                "TextOverlay": {"Lines": [], "HasOverlay": False, "Message": ""},
                "TextOrientation": "0",
                "FileParseExitCode": 1,
                "ParsedText": "Hello world\r\n",
                "ErrorMessage": "",
                "ErrorDetails": ""
            }
        ],
        "OCRExitCode": 1,
        "IsErroredOnProcessing": False,
        "ProcessingTimeInMilliseconds": "343",
        "SearchablePDFURL": "Searchable PDF not generated as it was not requested."
    }


@pytest.fixture
def mock_ocr_service():
    """OCR service stub; set ``recognize.return_value`` per test."""
    service = MagicMock()
    service.recognize = AsyncMock(
        return_value=OCRResult(
            success=True,
            text="Hello world",
            confidence=80,
            language="eng",
            processingTime=12
        )
    )
    return service


@pytest.fixture
def mock_translation_provider():
    """Provider stub returning a fixed translation."""
    provider = MagicMock()
    provider.translate = AsyncMock(return_value=TranslationResult(text="hola", source_language="en"))
    return provider


@pytest.fixture
def test_client(mock_ocr_service, mock_translation_provider):
    """Test client with upstream services replaced by stubs."""
    from app.main import app

    translation_service = TranslationService(mock_translation_provider)
    app.dependency_overrides[get_ocr_service] = lambda: mock_ocr_service
    app.dependency_overrides[get_translation_service] = lambda: translation_service

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()
