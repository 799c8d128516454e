"""Pydantic models for API requests and responses.

Provides type safety, validation, and automatic OpenAPI documentation.
Response models serialize with camelCase keys.

Models:
    - UrlExtractionRequest: Body of POST /extract-text-url
    - UploadExtractionResponse / UrlExtractionResponse: Extraction results
    - ErrorResponse: Failure body with error category and message
    - HmacRequest / HmacResponse: Signing utility payloads
    - HealthResponse / ServiceInfo: Service metadata
"""

from pdftext.models.schemas import (
    DocumentMetadata,
    ErrorResponse,
    ExtractionResponse,
    HealthResponse,
    HmacRequest,
    HmacResponse,
    ServiceInfo,
    UploadExtractionResponse,
    UrlExtractionRequest,
    UrlExtractionResponse,
)

__all__ = [
    "DocumentMetadata",
    "ErrorResponse",
    "ExtractionResponse",
    "HealthResponse",
    "HmacRequest",
    "HmacResponse",
    "ServiceInfo",
    "UploadExtractionResponse",
    "UrlExtractionRequest",
    "UrlExtractionResponse",
]
