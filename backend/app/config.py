"""Configuration management using Pydantic Settings"""
from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # API Keys (OCR calls fail at the provider when missing)
    ocr_space_api_key: Optional[str] = None

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    debug: bool = True

    # CORS
    allowed_origins: str = "*"

    # Rate Limiting (translate endpoint only)
    rate_limit_max_requests: int = 100
    rate_limit_window_seconds: int = 15 * 60

    # Request limits
    max_image_size_mb: int = 10
    max_body_size_mb: int = 50

    # OCR provider
    ocr_api_url: str = "https://api.ocr.space/parse/image"
    ocr_timeout_seconds: float = 60.0

    # Translation provider
    translate_api_url: str = "https://translate.googleapis.com/translate_a/single"
    translate_timeout_seconds: Optional[float] = None  # None = httpx default

    class Config:
        env_file = ".env"
        case_sensitive = False

    def get_cors_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string"""
        return [origin.strip() for origin in self.allowed_origins.split(",")]

    @property
    def max_body_size_bytes(self) -> int:
        return self.max_body_size_mb * 1024 * 1024


# Global settings instance
settings = Settings()
