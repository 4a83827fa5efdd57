"""Tests for HTML fetching."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

from html_extractor.exceptions import FetchError, HTMLNotAvailableError
from html_extractor.fetch import fetch_html


class TestFetchHtml:
    """Tests for fetch_html."""

    @pytest.mark.asyncio
    async def test_returns_document(self) -> None:
        """Should return the fetched document."""
        with patch("html_extractor.fetch.fetch_with_retries", AsyncMock(return_value="<p>foo</p>")) as mock_fetch:
            result = await fetch_html("https://example.com/page")

        assert result == "<p>foo</p>"
        assert mock_fetch.call_args.kwargs["on_404"] is HTMLNotAvailableError

    @pytest.mark.asyncio
    async def test_404_is_not_available(self) -> None:
        """Should raise HTMLNotAvailableError on 404."""
        with patch(
            "html_extractor.fetch.fetch_with_retries",
            AsyncMock(side_effect=HTMLNotAvailableError("No HTML document found")),
        ):
            with pytest.raises(HTMLNotAvailableError):
                await fetch_html("https://example.com/missing")

    def test_not_available_is_a_fetch_error(self) -> None:
        """Should derive HTMLNotAvailableError from FetchError."""
        assert issubclass(HTMLNotAvailableError, FetchError)
