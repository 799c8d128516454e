"""PDF Text Extractor - text and metadata extraction over HTTP.

Accepts a PDF as an upload or a URL, extracts its text with pypdf, and
returns a normalized JSON result. Built on FastAPI, httpx and Pydantic.

Components:
    - api: HTTP endpoints and error rendering
    - ingestion: Validation, acquisition, cleanup and response assembly
    - parsing: PDF extraction with pypdf
    - models: Request/response schemas
    - signing: HMAC-SHA512 utility
"""

__version__ = "1.0.0"
