"""Unit tests for individual components in isolation.

Coverage:
    - parsing/: Text, info and version extraction with pypdf
    - ingestion/: Source resolution, scratch files, acquisition, assembly
    - config and signing utilities

Remote servers are replaced with httpx.MockTransport.
"""
