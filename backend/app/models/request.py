"""Request models for the translation and upload API"""
from pydantic import BaseModel, Field
from typing import Optional


class TranslateRequest(BaseModel):
    """Request model for /api/translate endpoint

    Fields are optional at the schema level; the router reports missing
    ones with a single 400 message instead of a per-field 422.
    """

    text: Optional[str] = Field(default=None, description="Text to translate")
    from_: Optional[str] = Field(
        default=None,
        alias="from",
        description="Source language code (e.g. 'en')"
    )
    to: Optional[str] = Field(default=None, description="Target language code (e.g. 'es')")

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [{
                "text": "hello",
                "from": "en",
                "to": "es"
            }]
        }
    }

    def missing_fields(self) -> list:
        """Names of required fields that are absent or empty"""
        values = {"text": self.text, "from": self.from_, "to": self.to}
        return [name for name, value in values.items() if not value]


class ImageUploadRequest(BaseModel):
    """Request model for /api/upload endpoint"""

    image: Optional[str] = Field(
        default=None,
        description="Data-URL encoded image (data:image/jpeg;base64,...)"
    )

    model_config = {
        "json_schema_extra": {
            "examples": [{
                "image": "data:image/jpeg;base64,/9j/4AAQ..."
            }]
        }
    }
