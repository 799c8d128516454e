"""Acquisition of raw PDF bytes from uploads and remote URLs.

Upload mode validates and stages the multipart file into the scratch
directory, enforcing the size limit while bytes are still arriving. URL mode
downloads the resolved URL with httpx.
"""

import logging
from pathlib import Path

import httpx
from fastapi import UploadFile
from pydantic import BaseModel, ConfigDict
from starlette.concurrency import run_in_threadpool

from pdftext.ingestion.errors import (
    FetchFailureError,
    InvalidTypeError,
    MissingInputError,
    PayloadTooLargeError,
)
from pdftext.ingestion.sources import RemoteSource, UploadedSource

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"
PDF_EXTENSION = ".pdf"
CHUNK_SIZE = 64 * 1024


class AcquiredDocument(BaseModel):
    """Raw document bytes held for the duration of one request.

    Attributes:
        data: The complete PDF bytes.
        source_description: Where the bytes came from, for logging.
    """

    model_config = ConfigDict(frozen=True)

    data: bytes
    source_description: str

    @property
    def size_bytes(self) -> int:
        return len(self.data)


def validate_upload(upload: UploadFile | None) -> UploadFile:
    """Check that a PDF was uploaded before anything is staged.

    Content type and extension are both accepted as evidence; a client may
    send a PDF as application/octet-stream as long as it is named .pdf.

    Args:
        upload: The multipart file, if any.

    Returns:
        The same upload.

    Raises:
        MissingInputError: If no file was sent.
        InvalidTypeError: If neither content type nor extension is PDF.
    """
    if upload is None:
        raise MissingInputError("No PDF file uploaded")

    content_type = (upload.content_type or "").lower()
    filename = (upload.filename or "").lower()

    if content_type != PDF_CONTENT_TYPE and not filename.endswith(PDF_EXTENSION):
        raise InvalidTypeError("Only PDF files are allowed")

    return upload


async def stage_upload(upload: UploadFile, destination: Path, max_size: int) -> int:
    """Stream an upload into the scratch directory.

    The byte count is checked after every chunk, so an oversized upload is
    rejected without ever holding more than max_size + one chunk.

    Args:
        upload: Validated multipart file.
        destination: Scratch path to write to.
        max_size: Largest accepted size in bytes.

    Returns:
        Number of bytes staged.

    Raises:
        PayloadTooLargeError: If the upload exceeds max_size.
    """
    received = 0
    staged = await run_in_threadpool(destination.open, "wb")
    try:
        while chunk := await upload.read(CHUNK_SIZE):
            received += len(chunk)
            if received > max_size:
                raise PayloadTooLargeError(
                    f"PDF file size must be less than {max_size // (1024 * 1024)}MB"
                )
            await run_in_threadpool(staged.write, chunk)
    finally:
        await run_in_threadpool(staged.close)

    return received


async def read_staged_file(source: UploadedSource) -> AcquiredDocument:
    """Load a staged upload fully into memory."""
    data = await run_in_threadpool(source.temporary_path.read_bytes)
    return AcquiredDocument(
        data=data,
        source_description=f"upload {source.original_filename}",
    )


async def fetch_remote(
    source: RemoteSource,
    client: httpx.AsyncClient,
    max_size: int | None = None,
) -> AcquiredDocument:
    """Download a remote PDF.

    Args:
        source: Remote source with its resolved URL.
        client: HTTP client used for the request.
        max_size: Optional byte cap; None buffers the whole body.

    Returns:
        AcquiredDocument holding the response body.

    Raises:
        FetchFailureError: On non-2xx responses and transport errors.
        PayloadTooLargeError: If max_size is set and exceeded.
    """
    try:
        async with client.stream("GET", source.resolved_url) as response:
            if not response.is_success:
                status_text = response.reason_phrase or str(response.status_code)
                raise FetchFailureError(f"Failed to fetch PDF: {status_text}")

            buffer = bytearray()
            async for chunk in response.aiter_bytes():
                buffer.extend(chunk)
                if max_size is not None and len(buffer) > max_size:
                    raise PayloadTooLargeError(
                        f"Remote PDF exceeds the configured limit of {max_size} bytes"
                    )
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise FetchFailureError(f"Failed to fetch PDF: {str(e) or type(e).__name__}") from e

    return AcquiredDocument(data=bytes(buffer), source_description=f"url {source.url}")
