"""Document ingestion pipeline.

Turns a client-supplied PDF source into an extraction response or a typed
error.

Stages:
    - sources: Canonical PDF references and sharing-link rewriting
    - acquisition: Upload staging and remote download
    - pipeline: Extraction, lifecycle and error translation
    - assembler: Derived fields and the success envelope
"""

from pdftext.ingestion.errors import (
    FetchFailureError,
    IngestionError,
    InternalError,
    InvalidTypeError,
    MissingInputError,
    ParseFailureError,
    PayloadTooLargeError,
)
from pdftext.ingestion.pipeline import extract_from_upload, extract_from_url
from pdftext.ingestion.sources import resolve_source_url

__all__ = [
    "FetchFailureError",
    "IngestionError",
    "InternalError",
    "InvalidTypeError",
    "MissingInputError",
    "ParseFailureError",
    "PayloadTooLargeError",
    "extract_from_upload",
    "extract_from_url",
    "resolve_source_url",
]
