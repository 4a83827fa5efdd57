"""Local configuration for html_extractor."""

from __future__ import annotations

import os


DEFAULT_CSS_SELECTOR = "p"
HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")

DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "html-extractor/0.1"

HTML_EXTRACTOR_FETCH_TIMEOUT_S = float(os.getenv("HTML_EXTRACTOR_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
HTML_EXTRACTOR_FETCH_MAX_RETRIES = int(os.getenv("HTML_EXTRACTOR_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
HTML_EXTRACTOR_FETCH_BACKOFF_S = float(os.getenv("HTML_EXTRACTOR_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
HTML_EXTRACTOR_USER_AGENT = os.getenv("HTML_EXTRACTOR_USER_AGENT", DEFAULT_USER_AGENT)
