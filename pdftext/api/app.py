"""FastAPI application factory and configuration.

Main application entry point with lifespan management, middleware,
exception handlers and router registration.
"""

import logging
import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pdftext import __version__
from pdftext.api.errors import register_exception_handlers
from pdftext.api.routes import router as extraction_router
from pdftext.api.signing import router as signing_router
from pdftext.config import get_settings
from pdftext.ingestion.scratch import ensure_scratch_dir
from pdftext.models.schemas import HealthResponse, ServiceInfo

logger = logging.getLogger(__name__)

_STARTED_AT = time.monotonic()

ENDPOINTS = {
    "POST /extract-text": "Extract text from uploaded PDF file",
    "POST /extract-text-url": "Extract text from PDF URL",
    "POST /generate-hmac": "Generate HMAC-SHA512 signature",
    "GET /health": "Health check endpoint",
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown lifecycle.

    Creates the scratch directory on startup.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    # Startup
    settings = get_settings()
    ensure_scratch_dir(settings.upload_dir)
    logger.info(f"Starting PDF Text Extractor API (scratch dir: {settings.upload_dir})")
    yield
    # Shutdown
    logger.info("Shutting down PDF Text Extractor API...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="PDF Text Extractor API",
        description=(
            "Extracts text and metadata from PDF documents, either uploaded "
            "directly or fetched from a URL, and returns a normalized JSON "
            "result. Also offers an HMAC-SHA512 signing utility."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    application.include_router(extraction_router)
    application.include_router(signing_router)

    @application.get("/", response_model=ServiceInfo)
    async def root() -> ServiceInfo:
        """Describe the service and its endpoints."""
        return ServiceInfo(
            message="PDF Text Extractor Server is running",
            version=__version__,
            endpoints=ENDPOINTS,
        )

    @application.get("/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Check service health status."""
        return HealthResponse(
            timestamp=datetime.now(timezone.utc),
            uptime=time.monotonic() - _STARTED_AT,
        )

    return application


app = create_app()
