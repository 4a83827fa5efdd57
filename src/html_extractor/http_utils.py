"""HTTP utilities for fetching documents with retry logic."""

from __future__ import annotations

import asyncio
import logging
from typing import Final

import httpx

from html_extractor.config import (
    HTML_EXTRACTOR_FETCH_BACKOFF_S,
    HTML_EXTRACTOR_FETCH_MAX_RETRIES,
    HTML_EXTRACTOR_FETCH_TIMEOUT_S,
    HTML_EXTRACTOR_USER_AGENT,
)
from html_extractor.exceptions import FetchError

logger = logging.getLogger(__name__)

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

_MAX_REDIRECTS: Final[int] = 5


async def fetch_with_retries(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    on_404: type[Exception] | None = None,
    on_404_message: str | None = None,
) -> str:
    """Fetch a text document, retrying transient failures with exponential backoff.

    Args:
        url: The URL to fetch.
        client: Optional httpx.AsyncClient for connection pooling. If not
            provided, a new client is created for this request.
        on_404: Exception class raised on 404. Defaults to FetchError.
        on_404_message: Custom error message for 404 responses.

    Returns:
        The decoded response body.

    Raises:
        FetchError (or the ``on_404`` exception): If the fetch fails after all
            retries or returns 404.
    """
    not_found_exc_class = on_404 or FetchError

    async def do_fetch(http_client: httpx.AsyncClient) -> str:
        last_exc: Exception | None = None

        for attempt in range(HTML_EXTRACTOR_FETCH_MAX_RETRIES + 1):
            try:
                response = await http_client.get(url)
            except httpx.RequestError as exc:
                last_exc = exc
            else:
                if response.status_code == 404:
                    raise not_found_exc_class(on_404_message or f"Resource not found at {url}")
                if response.status_code in RETRY_STATUS_CODES:
                    last_exc = FetchError(f"HTTP {response.status_code} from {url}")
                else:
                    try:
                        response.raise_for_status()
                    except httpx.HTTPStatusError as exc:
                        raise FetchError(f"HTTP {response.status_code} from {url}") from exc
                    return response.text

            if attempt < HTML_EXTRACTOR_FETCH_MAX_RETRIES:
                backoff = HTML_EXTRACTOR_FETCH_BACKOFF_S * (2**attempt)
                logger.debug("Retrying %s in %.2fs after: %s", url, backoff, last_exc)
                await asyncio.sleep(backoff)

        raise FetchError(f"Failed to fetch {url}: {last_exc}")

    if client is not None:
        return await do_fetch(client)

    async with httpx.AsyncClient(
        timeout=httpx.Timeout(HTML_EXTRACTOR_FETCH_TIMEOUT_S),
        headers={"User-Agent": HTML_EXTRACTOR_USER_AGENT},
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    ) as new_client:
        return await do_fetch(new_client)
