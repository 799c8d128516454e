"""Integration tests for the HTTP surface.

Coverage:
    - POST /extract-text with generated PDFs and scratch-dir cleanup checks
    - POST /extract-text-url against mocked remote servers
    - Service metadata, HMAC signing and error rendering

Each test builds its own app with an isolated scratch directory.
"""
