"""Test package for the PDF text extractor.

Unit tests cover isolated pipeline stages; integration tests drive the
FastAPI app end to end.

Structure:
    - unit/: Individual function and class tests
    - integration/: Endpoint tests over ASGITransport
    - pdfs.py: In-memory PDF builder used instead of binary fixtures

Leverages pytest with pytest-check for soft assertions.
"""
