"""Document ingestion pipeline.

Runs acquisition, extraction and assembly in order for one request. Each
stage raises an IngestionError on failure; anything else is wrapped as an
InternalError. A staged upload is removed exactly once, right after
extraction or on the way out of a failure.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import httpx
from fastapi import UploadFile
from starlette.concurrency import run_in_threadpool

from pdftext.config import Settings
from pdftext.ingestion.acquisition import (
    AcquiredDocument,
    fetch_remote,
    read_staged_file,
    stage_upload,
    validate_upload,
)
from pdftext.ingestion.assembler import assemble_upload_response, assemble_url_response
from pdftext.ingestion.errors import (
    IngestionError,
    InternalError,
    MissingInputError,
    ParseFailureError,
)
from pdftext.ingestion.scratch import (
    ensure_scratch_dir,
    generate_scratch_name,
    remove_scratch_file,
)
from pdftext.ingestion.sources import UploadedSource, remote_source
from pdftext.models.schemas import UploadExtractionResponse, UrlExtractionResponse
from pdftext.parsing.pdf_parser import PDFContent, PDFParseError, parse_pdf

logger = logging.getLogger(__name__)

UPLOAD_FIELD_NAME = "pdf"
INTERNAL_ERROR_MESSAGE = "Something went wrong processing your request"


@asynccontextmanager
async def _translate_failures(description: str) -> AsyncIterator[None]:
    """Log pipeline failures and wrap unexpected ones as InternalError."""
    try:
        yield
    except IngestionError as e:
        if e.status_code >= 500:
            logger.error(f"Failed to process {description}: {e.category}: {e.message}")
        else:
            logger.warning(f"Rejected {description}: {e.category}: {e.message}")
        raise
    except Exception as e:
        logger.exception(f"Unexpected error processing {description}")
        raise InternalError(INTERNAL_ERROR_MESSAGE) from e


async def extract_document(document: AcquiredDocument) -> PDFContent:
    """Run the PDF parser once over acquired bytes.

    Raises:
        ParseFailureError: With the parser's message verbatim.
    """
    logger.info(f"Parsing {document.size_bytes} bytes from {document.source_description}")
    try:
        return await run_in_threadpool(parse_pdf, document.data)
    except PDFParseError as e:
        raise ParseFailureError(str(e)) from e


async def extract_from_upload(
    upload: UploadFile | None, settings: Settings
) -> UploadExtractionResponse:
    """Extract text from an uploaded PDF.

    Args:
        upload: Multipart file sent under the ``pdf`` field, if any.
        settings: Scratch directory and size limit.

    Returns:
        Success envelope with filename and fileSize.

    Raises:
        IngestionError: Any pipeline failure, already categorized.
    """
    description = f"upload {upload.filename!r}" if upload is not None else "upload"

    async with _translate_failures(description):
        upload = validate_upload(upload)
        original_filename = upload.filename or ""
        logger.info(f"Processing PDF: {original_filename}")

        scratch_dir = ensure_scratch_dir(settings.upload_dir)
        staged_path: Path = scratch_dir / generate_scratch_name(
            UPLOAD_FIELD_NAME, original_filename
        )
        try:
            size = await stage_upload(upload, staged_path, settings.max_upload_size)
            source = UploadedSource(
                temporary_path=staged_path,
                original_filename=original_filename,
                declared_size=size,
                content_type=upload.content_type,
            )
            logger.info(
                f"Staged {source.declared_size} bytes "
                f"({source.content_type or 'no content type'}) as {staged_path.name}"
            )
            document = await read_staged_file(source)
            content = await extract_document(document)
        finally:
            remove_scratch_file(staged_path)

        response = assemble_upload_response(source, content)

    logger.info(
        f"Extracted {response.text_length} characters from {original_filename} "
        f"({content.pages} pages)"
    )
    return response


async def extract_from_url(
    url: str | None,
    filename: str | None,
    client: httpx.AsyncClient,
    settings: Settings,
) -> UrlExtractionResponse:
    """Extract text from a PDF at a remote URL.

    Args:
        url: URL as sent by the client.
        filename: Optional display name, echoed back.
        client: HTTP client for the download.
        settings: Optional fetch size cap.

    Returns:
        Success envelope with the original url.

    Raises:
        IngestionError: Any pipeline failure, already categorized.
    """
    async with _translate_failures(f"url {url!r}"):
        if not url:
            raise MissingInputError("No PDF URL provided")

        source = remote_source(url, filename)
        logger.info(f"Processing PDF from URL: {source.url}")

        document = await fetch_remote(source, client, settings.max_fetch_size)
        content = await extract_document(document)
        response = assemble_url_response(source, content)

    logger.info(f"Extracted {response.text_length} characters from {source.url}")
    return response
