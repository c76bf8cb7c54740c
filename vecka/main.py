# vecka/main.py
"""
FastAPI application entry point.
"""

import os
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vecka.core.config import APP_VERSION, IS_PRODUCTION, MAX_SUPPORTED_YEAR, MIN_SUPPORTED_YEAR
from vecka.core.logging_config import get_logger, setup_logging
from vecka.core.request_logging import RequestLoggingMiddleware
from vecka.routes.calendar_api import router as calendar_router

# Setup logging FIRST (before any other imports that might log)
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(
        "Application starting up",
        extra={
            "extra_fields": {
                "production": IS_PRODUCTION,
                "python_version": sys.version,
                "supported_years": f"{MIN_SUPPORTED_YEAR}-{MAX_SUPPORTED_YEAR}",
            }
        },
    )

    if MIN_SUPPORTED_YEAR > MAX_SUPPORTED_YEAR:
        logger.error(f"Invalid year range: VECKA_MIN_YEAR={MIN_SUPPORTED_YEAR} > VECKA_MAX_YEAR={MAX_SUPPORTED_YEAR}")
        raise RuntimeError("VECKA_MIN_YEAR must not be greater than VECKA_MAX_YEAR")

    yield

    logger.info("Application shutting down")


app = FastAPI(
    title="Vecka",
    description="Week numbers and Swedish public holidays",
    version=APP_VERSION,
    lifespan=lifespan,
)

# CORS Configuration
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "").split(",") if origin.strip()]

if IS_PRODUCTION:
    # Production: only allow specified origins
    if not CORS_ORIGINS:
        logger.warning(
            "Production mode but no CORS_ORIGINS set. CORS will block all cross-origin requests. "
            "Set CORS_ORIGINS environment variable if you need to allow specific origins."
        )
    allowed_origins = CORS_ORIGINS
    allowed_methods = ["GET"]  # Read-only API
    logger.info(f"CORS configured for production with origins: {allowed_origins}")
else:
    allowed_origins = ["*"]
    allowed_methods = ["*"]
    logger.info("CORS configured for development (permissive)")

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_methods=allowed_methods,
    allow_headers=["*"],
    expose_headers=["X-Request-ID"],
)

app.add_middleware(RequestLoggingMiddleware)

app.include_router(calendar_router)


@app.get("/health", tags=["health"])
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "vecka",
        "version": APP_VERSION,
    }


def run() -> None:
    """Start the API with uvicorn (console script `vecka-api`)."""
    import uvicorn

    uvicorn.run(
        "vecka.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
        log_config=None,  # keep the handlers from setup_logging()
    )
