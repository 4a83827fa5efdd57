"""Shared HTML utilities: parsing, candidate selection and sanitizing."""

from __future__ import annotations

import copy
import logging
import re
from typing import Iterable

from html_extractor.config import HEADING_TAGS
from html_extractor.exceptions import ConfigurationError

try:
    import soupsieve
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc

logger = logging.getLogger(__name__)

_TAG_SPLIT_RE = re.compile(r"[\s,]+")


def parse_document(html: str) -> BeautifulSoup:
    """Parse an HTML string permissively; unbalanced or unknown tags are kept."""
    return BeautifulSoup(html, "lxml")


def compile_selector(css_selector: str) -> soupsieve.SoupSieve:
    """Compile a CSS selector, surfacing bad syntax as a configuration error."""
    if not isinstance(css_selector, str) or not css_selector.strip():
        raise ConfigurationError(f"CSS selector must be a non-empty string, got {css_selector!r}")
    try:
        return soupsieve.compile(css_selector)
    except soupsieve.SelectorSyntaxError as exc:
        raise ConfigurationError(f"Invalid CSS selector {css_selector!r}: {exc}") from exc


def select_nodes(soup: BeautifulSoup, selector: soupsieve.SoupSieve) -> list[Tag]:
    """Return the tags matching ``selector`` in document order."""
    nodes = selector.select(soup)
    logger.debug("Selector %r matched %d nodes", selector.pattern, len(nodes))
    return nodes


def normalize_tags(tags_to_exclude: str | Iterable[str] | None) -> frozenset[str]:
    """Normalize a tag name, a comma separated list or an iterable of names."""
    if tags_to_exclude is None:
        return frozenset()
    if isinstance(tags_to_exclude, str):
        names = _TAG_SPLIT_RE.split(tags_to_exclude)
    else:
        try:
            names = list(tags_to_exclude)
        except TypeError as exc:
            raise ConfigurationError(
                f"tags_to_exclude must be a tag name or an iterable of tag names, got {tags_to_exclude!r}"
            ) from exc
        if not all(isinstance(name, str) for name in names):
            raise ConfigurationError(f"tags_to_exclude must only contain strings, got {names!r}")
    return frozenset(name.strip().lower() for name in names if name.strip())


def sanitized_copy(node: Tag, excluded: frozenset[str]) -> Tag:
    """Return a detached copy of ``node`` without descendants whose tag is excluded.

    The parsed document is left untouched so that later nodes still see the
    original tree.
    """
    clone = copy.copy(node)
    if not excluded:
        return clone
    for tag in clone.find_all(list(excluded)):
        if tag.decomposed:
            continue
        tag.decompose()
    return clone


def outer_html(tag: Tag) -> str:
    return str(tag).strip()


def inner_text(tag: Tag) -> str:
    return tag.get_text().strip()


def heading_level(tag: Tag) -> int | None:
    """Return 1-6 for heading tags, None for everything else."""
    name = (tag.name or "").lower()
    if name in HEADING_TAGS:
        return int(name[1])
    return None
