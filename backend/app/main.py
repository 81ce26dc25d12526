"""FastAPI application entry point"""
import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

from app.config import settings
from app.errors import RateLimitExceeded
from app.models.response import ErrorResponse, HealthResponse
from app.routers import translate
from app.routers import upload
from app.services.ocr_service import OCRSpaceService
from app.services.translation_service import GoogleTranslateClient, TranslationService
from app.utils.rate_limit import SlidingWindowRateLimiter

# Configure logging
logging.basicConfig(
    level=logging.INFO if settings.debug else logging.WARNING,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    logger.info("Starting Translation API")
    logger.info(f"CORS origins: {settings.get_cors_origins()}")

    app.state.ocr_service = OCRSpaceService(
        api_key=settings.ocr_space_api_key,
        api_url=settings.ocr_api_url,
        timeout=settings.ocr_timeout_seconds
    )
    app.state.translation_service = TranslationService(
        GoogleTranslateClient(
            api_url=settings.translate_api_url,
            timeout=settings.translate_timeout_seconds
        )
    )
    app.state.rate_limiter = SlidingWindowRateLimiter(
        max_requests=settings.rate_limit_max_requests,
        window_seconds=settings.rate_limit_window_seconds
    )
    yield
    logger.info("Shutting down Translation API")


# Create FastAPI app
app = FastAPI(
    title="Translation API",
    description="Text translation and image OCR proxy for Google Translate and OCR.space",
    version="1.0.0",
    lifespan=lifespan
)


@app.middleware("http")
async def limit_body_size(request: Request, call_next):
    """
    Reject bodies over max_body_size_mb based on Content-Length.

    Chunked bodies carry no Content-Length and are not checked here.
    """
    content_length = request.headers.get("content-length")
    if content_length and content_length.isdigit() and int(content_length) > settings.max_body_size_bytes:
        logger.warning(f"Rejected {content_length} byte body on {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            content=ErrorResponse(error="Payload too large").model_dump(exclude_none=True)
        )
    return await call_next(request)


# Add CORS middleware (added last so it is outermost and covers 413 responses)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed JSON bodies get the same 400 envelope as missing fields"""
    messages = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    logger.info(f"Invalid request body on {request.url.path}: {messages}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(error="Invalid request body", message=messages).model_dump(exclude_none=True)
    )


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    client_host = request.client.host if request.client else "unknown"
    logger.warning(f"Rate limit exceeded for {client_host} on {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content=ErrorResponse(error="Too many requests, please try again later.").model_dump(exclude_none=True),
        headers={"Retry-After": str(exc.retry_after)}
    )


# Include routers
app.include_router(translate.router, tags=["translation"])
app.include_router(upload.router, tags=["ocr"])


@app.get("/api/health", response_model=HealthResponse)
async def health():
    """Health check endpoint"""
    return HealthResponse(status="OK", message="Translation API is running")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
