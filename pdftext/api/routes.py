"""PDF extraction endpoints.

Thin HTTP boundary over the ingestion pipeline: uploads arrive as
multipart files, remote documents as a JSON body with a URL.
"""

import logging

import httpx
from fastapi import APIRouter, Depends, File, UploadFile

from pdftext.api.deps import get_http_client
from pdftext.config import Settings, get_settings
from pdftext.ingestion.pipeline import extract_from_upload, extract_from_url
from pdftext.models.schemas import (
    ErrorResponse,
    UploadExtractionResponse,
    UrlExtractionRequest,
    UrlExtractionResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["extraction"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing input, wrong type or oversized file"},
    500: {"model": ErrorResponse, "description": "Fetch, parse or internal failure"},
}


@router.post(
    "/extract-text",
    response_model=UploadExtractionResponse,
    responses=ERROR_RESPONSES,
)
async def extract_text(
    pdf: UploadFile | None = File(None, description="PDF file, at most 10MB"),
    settings: Settings = Depends(get_settings),
) -> UploadExtractionResponse:
    """Extract text and metadata from an uploaded PDF.

    Args:
        pdf: The uploaded PDF file (multipart/form-data, field ``pdf``).
        settings: Service settings.

    Returns:
        UploadExtractionResponse with text, metadata and counts.

    Raises:
        400: No file, not a PDF, or larger than 10MB.
        500: The PDF could not be parsed.
    """
    return await extract_from_upload(pdf, settings)


@router.post(
    "/extract-text-url",
    response_model=UrlExtractionResponse,
    responses=ERROR_RESPONSES,
)
async def extract_text_url(
    body: UrlExtractionRequest | None = None,
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> UrlExtractionResponse:
    """Extract text and metadata from a PDF at a URL.

    Google Drive sharing links are rewritten to direct downloads before
    fetching.

    Raises:
        400: No url supplied.
        500: The download or the parse failed.
    """
    body = body or UrlExtractionRequest()
    return await extract_from_url(body.url, body.filename, client, settings)
