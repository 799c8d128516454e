from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for payloads serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UrlExtractionRequest(BaseModel):
    """Request payload for URL-based extraction.

    Attributes:
        url: Location of the PDF; sharing links are rewritten before fetching.
        filename: Optional display name echoed back unvalidated.
    """

    url: str | None = None
    filename: str | None = None

    @field_validator("url", mode="before")
    @classmethod
    def strip_url(cls, v: str | None) -> str | None:
        """Strip whitespace from url; blank values count as missing."""
        if isinstance(v, str):
            return v.strip() or None
        return v


class HmacRequest(BaseModel):
    """Request payload for the HMAC signing endpoint."""

    data: str | None = None
    secret: str | None = None


class DocumentMetadata(BaseModel):
    """Structural metadata reported by the PDF parser.

    Attributes:
        pages: Number of pages in the document.
        info: Document information dictionary.
        version: PDF format version, "Unknown" when absent.
    """

    pages: int = Field(ge=0)
    info: dict[str, str | int | float | bool] = Field(default_factory=dict)
    version: str


class ExtractionResponse(CamelModel):
    """Successful extraction result.

    Attributes:
        success: Always true.
        filename: Original or client-supplied filename.
        text: Extracted text across all pages.
        metadata: Page count, info dictionary and version.
        extracted_at: When the response was assembled.
        text_length: Character count of text.
        word_count: Number of whitespace-delimited tokens in text.
    """

    success: bool = True
    filename: str
    text: str
    metadata: DocumentMetadata
    extracted_at: datetime
    text_length: int = Field(ge=0)
    word_count: int = Field(ge=0)


class UploadExtractionResponse(ExtractionResponse):
    """Extraction result for an uploaded file."""

    file_size: int = Field(ge=0)


class UrlExtractionResponse(ExtractionResponse):
    """Extraction result for a PDF fetched by URL."""

    url: str


class ErrorResponse(BaseModel):
    """Failure body shared by every endpoint.

    Attributes:
        success: Always false.
        error: Stable error category.
        message: Human-readable detail.
    """

    success: bool = False
    error: str
    message: str


class HmacResponse(CamelModel):
    """HMAC-SHA512 signature of the supplied data."""

    success: bool = True
    data: str
    signature: str
    algorithm: str = "HMAC-SHA512"
    generated_at: datetime
    data_length: int = Field(ge=0)


class HealthResponse(BaseModel):
    status: str = "healthy"
    timestamp: datetime
    uptime: float


class ServiceInfo(BaseModel):
    message: str
    version: str
    endpoints: dict[str, str]
