"""PDF parsing module using pypdf.

Extracts text content, page count, document information and format version
from PDF bytes, normalized into a PDFContent value.
"""

import io
import logging
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pypdf import PdfReader
from pypdf.errors import PdfReadError
from pypdf.generic import BooleanObject

logger = logging.getLogger(__name__)

# Constants
PDF_MAGIC_BYTES = b"%PDF"
HEADER_SEARCH_WINDOW = 1024
PDF_VERSION_PATTERN = re.compile(rb"%PDF-(\d+\.\d+)")
UNKNOWN_VERSION = "Unknown"

InfoValue = str | int | float | bool


class PDFContent(BaseModel):
    """Extracted content from a PDF file.

    Attributes:
        text: Combined text content from all pages.
        pages: Total number of pages in the document.
        info: Document information dictionary (title, author, etc.).
        version: PDF format version from the file header.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    pages: int = Field(ge=0)
    info: dict[str, InfoValue] = Field(default_factory=dict)
    version: str = UNKNOWN_VERSION


class PDFParseError(Exception):
    """Raised when PDF parsing fails."""

    pass


def _validate_pdf_bytes(file_content: bytes) -> None:
    """Validate PDF file content before parsing.

    Args:
        file_content: Raw bytes of the PDF file.

    Raises:
        PDFParseError: If validation fails.
    """
    if not file_content:
        raise PDFParseError("Empty file provided")

    # The header may follow leading junk, but only within the first KiB
    if PDF_MAGIC_BYTES not in file_content[:HEADER_SEARCH_WINDOW]:
        raise PDFParseError(
            f"Invalid PDF: no PDF header in the first {HEADER_SEARCH_WINDOW} bytes"
        )


def _to_scalar(value: Any) -> InfoValue | None:
    """Reduce a pypdf object to a JSON-friendly scalar."""
    if value is None:
        return None
    if isinstance(value, BooleanObject):
        return bool(value.value)
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return str(value)
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        return float(value)
    return str(value)


def _extract_version(file_content: bytes) -> str:
    match = PDF_VERSION_PATTERN.search(file_content[:HEADER_SEARCH_WINDOW])
    return match.group(1).decode("ascii") if match else UNKNOWN_VERSION


def _extract_info(reader: PdfReader, version: str) -> dict[str, InfoValue]:
    """Extract the document information dictionary.

    Args:
        reader: Initialized PdfReader instance.
        version: Format version already read from the header.

    Returns:
        Info fields keyed without the leading slash, plus form flags.
    """
    info: dict[str, InfoValue | None] = {"PDFFormatVersion": version}

    try:
        if reader.metadata:
            for key in reader.metadata:
                info[key.lstrip("/")] = _to_scalar(reader.metadata[key])
    except Exception as e:
        logger.warning(f"Failed to extract some metadata: {e}")

    try:
        acro_form = reader.trailer["/Root"].get("/AcroForm")
        if acro_form is not None:
            acro_form = acro_form.get_object()
        info["IsAcroFormPresent"] = acro_form is not None
        info["IsXFAPresent"] = acro_form is not None and "/XFA" in acro_form
    except Exception as e:
        logger.warning(f"Failed to inspect form structure: {e}")

    # Filter out None values for cleaner output
    return {k: v for k, v in info.items() if v is not None}


def parse_pdf(file_content: bytes) -> PDFContent:
    """Parse a PDF file and extract its text content.

    A document without pages or without extractable text (scanned or
    image-only) is not an error: it yields empty text.

    Args:
        file_content: Raw bytes of the PDF file.

    Returns:
        PDFContent with extracted text, page count, info and version.

    Raises:
        PDFParseError: If the file is empty, not a PDF, or corrupt.
    """
    _validate_pdf_bytes(file_content)

    try:
        reader = PdfReader(io.BytesIO(file_content))
        pages = len(reader.pages)
    except PdfReadError as e:
        raise PDFParseError(f"Corrupt or invalid PDF: {e}") from e
    except Exception as e:
        raise PDFParseError(f"Failed to read PDF: {e}") from e

    # Extract text from all pages
    text_parts: list[str] = []
    for i, page in enumerate(reader.pages):
        try:
            page_text = page.extract_text()
            if page_text:
                text_parts.append(page_text)
        except Exception as e:
            logger.warning(f"Failed to extract text from page {i + 1}: {e}")
            continue

    text = "\n\n".join(text_parts)

    if not text.strip():
        logger.warning("PDF contains no extractable text (may be scanned/image-based)")

    version = _extract_version(file_content)

    return PDFContent(
        text=text,
        pages=pages,
        info=_extract_info(reader, version),
        version=version,
    )
