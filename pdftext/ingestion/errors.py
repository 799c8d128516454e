"""Typed failures raised by the ingestion pipeline.

Pipeline stages raise IngestionError subclasses, never HTTP exceptions.
The API layer renders them as ErrorResponse bodies using the category and
status code each subclass carries.
"""

from fastapi import status


class IngestionError(Exception):
    """Base class for every failure the pipeline reports to a client.

    Attributes:
        category: Stable machine-readable error category.
        status_code: HTTP status the failure maps to.
        message: Human-readable detail.
    """

    category = "InternalError"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingInputError(IngestionError):
    """No file was uploaded or no URL was supplied."""

    category = "MissingInput"
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidTypeError(IngestionError):
    """The upload is neither typed nor named as a PDF."""

    category = "InvalidType"
    status_code = status.HTTP_400_BAD_REQUEST


class PayloadTooLargeError(IngestionError):
    """The document exceeds the configured size limit."""

    category = "PayloadTooLarge"
    status_code = status.HTTP_400_BAD_REQUEST


class FetchFailureError(IngestionError):
    """The remote PDF could not be downloaded."""

    category = "FetchFailure"


class ParseFailureError(IngestionError):
    """The PDF parser rejected the document bytes."""

    category = "ParseFailure"


class InternalError(IngestionError):
    """Unexpected fault inside the pipeline."""
