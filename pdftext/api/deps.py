"""Request-scoped dependencies."""

from collections.abc import AsyncGenerator

import httpx
from fastapi import Depends

from pdftext.config import Settings, get_settings


async def get_http_client(
    settings: Settings = Depends(get_settings),
) -> AsyncGenerator[httpx.AsyncClient]:
    """Yield an HTTP client for outbound PDF downloads.

    Redirects are followed, since sharing services answer direct-download
    links with a redirect. The timeout is None unless FETCH_TIMEOUT is set.
    """
    async with httpx.AsyncClient(
        follow_redirects=True,
        timeout=settings.fetch_timeout,
    ) as client:
        yield client
