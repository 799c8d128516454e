"""Exception handlers rendering every failure as an ErrorResponse."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pdftext.ingestion.errors import IngestionError, MissingInputError
from pdftext.models.schemas import ErrorResponse

logger = logging.getLogger(__name__)


def _error_response(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=error, message=message).model_dump(),
    )


async def ingestion_error_handler(request: Request, exc: IngestionError) -> JSONResponse:
    """Render a categorized pipeline failure."""
    return _error_response(exc.status_code, exc.category, exc.message)


# Malformed bodies on these routes count as the input being absent
MISSING_INPUT_MESSAGES = {
    "/extract-text": "No PDF file uploaded",
    "/extract-text-url": "No PDF URL provided",
    "/generate-hmac": 'Missing data or secret parameter: provide "data" and "secret" strings',
}
DEFAULT_MISSING_INPUT_MESSAGE = "Request body is missing or malformed"


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render malformed request payloads as missing input."""
    logger.warning(f"Validation error on {request.method} {request.url.path}: {exc.errors()}")
    return _error_response(
        MissingInputError.status_code,
        MissingInputError.category,
        MISSING_INPUT_MESSAGES.get(request.url.path, DEFAULT_MISSING_INPUT_MESSAGE),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render routing errors, with a descriptive body for unknown endpoints."""
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return _error_response(
            exc.status_code,
            "Endpoint not found",
            f"The endpoint {request.method} {request.url.path} does not exist",
        )
    return _error_response(exc.status_code, str(exc.detail), str(exc.detail))


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all other unhandled exceptions."""
    logger.error(f"Unhandled error: {exc}", exc_info=exc)
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal server error",
        "Something went wrong processing your request",
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(IngestionError, ingestion_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_error_handler)
