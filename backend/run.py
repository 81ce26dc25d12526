#!/usr/bin/env python3
"""Run the Translation API server."""

import uvicorn

from app.config import settings

if __name__ == "__main__":
    # Auto-reload follows DEBUG; disable it in production
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
