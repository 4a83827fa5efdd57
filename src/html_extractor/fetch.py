"""Fetch HTML documents to extract records from."""

from __future__ import annotations

import logging

import httpx

from html_extractor.exceptions import HTMLNotAvailableError
from html_extractor.http_utils import fetch_with_retries

logger = logging.getLogger(__name__)


async def fetch_html(url: str, *, client: httpx.AsyncClient | None = None) -> str:
    """Fetch an HTML page.

    Raises:
        HTMLNotAvailableError: If the page returns 404.
        FetchError: If the fetch fails after retries.
    """
    logger.debug("Fetching %s", url)
    return await fetch_with_retries(
        url,
        client=client,
        on_404=HTMLNotAvailableError,
        on_404_message=f"No HTML document found at {url}",
    )
