"""Response assembly from extraction results."""

from datetime import datetime, timezone

from pdftext.ingestion.sources import RemoteSource, UploadedSource
from pdftext.models.schemas import (
    DocumentMetadata,
    UploadExtractionResponse,
    UrlExtractionResponse,
)
from pdftext.parsing.pdf_parser import PDFContent

UNKNOWN_FILENAME = "Unknown"


def count_words(text: str) -> int:
    """Count whitespace-delimited, non-empty tokens in text."""
    return len(text.split())


def _common_fields(content: PDFContent) -> dict:
    return {
        "text": content.text,
        "metadata": DocumentMetadata(
            pages=content.pages,
            info=content.info,
            version=content.version,
        ),
        "text_length": len(content.text),
        "word_count": count_words(content.text),
        # Timestamp is taken at assembly, not at request start
        "extracted_at": datetime.now(timezone.utc),
    }


def assemble_upload_response(
    source: UploadedSource, content: PDFContent
) -> UploadExtractionResponse:
    """Build the success envelope for an uploaded PDF.

    Args:
        source: The staged upload (already removed from disk).
        content: Parser output.

    Returns:
        Response carrying the original filename and bytes received.
    """
    return UploadExtractionResponse(
        filename=source.original_filename,
        file_size=source.declared_size,
        **_common_fields(content),
    )


def assemble_url_response(source: RemoteSource, content: PDFContent) -> UrlExtractionResponse:
    """Build the success envelope for a PDF fetched by URL.

    The echoed url is the one the client sent, before any rewriting.
    """
    return UrlExtractionResponse(
        filename=source.filename or UNKNOWN_FILENAME,
        url=source.url,
        **_common_fields(content),
    )
