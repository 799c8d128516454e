"""HMAC signing endpoint."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter

from pdftext.ingestion.errors import MissingInputError
from pdftext.models.schemas import ErrorResponse, HmacRequest, HmacResponse
from pdftext.signing import generate_hmac_sha512

logger = logging.getLogger(__name__)

router = APIRouter(tags=["signing"])


@router.post(
    "/generate-hmac",
    response_model=HmacResponse,
    responses={400: {"model": ErrorResponse}},
)
async def generate_hmac(body: HmacRequest | None = None) -> HmacResponse:
    """Generate an HMAC-SHA512 signature.

    Args:
        body: JSON body with ``data`` to sign and the ``secret`` key.

    Returns:
        HmacResponse with the hex signature.

    Raises:
        400: data or secret missing.
    """
    body = body or HmacRequest()

    if not body.data:
        raise MissingInputError('Missing data parameter: provide a "data" field to sign')
    if not body.secret:
        raise MissingInputError('Missing secret parameter: provide a "secret" signing key')

    signature = generate_hmac_sha512(body.data, body.secret)
    logger.info(f"Generated HMAC-SHA512 signature for data of length: {len(body.data)}")

    return HmacResponse(
        data=body.data,
        signature=signature,
        generated_at=datetime.now(timezone.utc),
        data_length=len(body.data),
    )
