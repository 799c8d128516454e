"""FastAPI endpoints for the PDF text extractor.

HTTP routes with async request handling over the ingestion pipeline.

Endpoints:
    - GET /: Service metadata and endpoint listing
    - GET /health: Service health status
    - POST /extract-text: Extract text from an uploaded PDF
    - POST /extract-text-url: Extract text from a PDF URL
    - POST /generate-hmac: HMAC-SHA512 signature generation
"""

from pdftext.api.app import app, create_app

__all__ = ["app", "create_app"]
