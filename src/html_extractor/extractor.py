"""Extraction pipeline for HTML -> search index records."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any, Iterable, Mapping

from html_extractor.anchors import heading_anchor, own_anchor
from html_extractor.config import DEFAULT_CSS_SELECTOR
from html_extractor.exceptions import ConfigurationError
from html_extractor.hierarchy import HierarchyState, document_events
from html_extractor.html_utils import (
    compile_selector,
    inner_text,
    normalize_tags,
    outer_html,
    parse_document,
    sanitized_copy,
    select_nodes,
)
from html_extractor.identity import compute_object_id
from html_extractor.ranking import custom_ranking
from html_extractor.schemas import Record

logger = logging.getLogger(__name__)

_OPTION_ALIASES = {
    "cssSelector": "css_selector",
    "tagsToExclude": "tags_to_exclude",
}


@dataclass
class ExtractionOptions:
    """Options for record extraction.

    Attributes:
        css_selector: CSS selector of the nodes turned into records.
        tags_to_exclude: Tag name, comma separated tag names or iterable of
            tag names stripped from each node before extraction.
    """

    css_selector: str = DEFAULT_CSS_SELECTOR
    tags_to_exclude: str | Iterable[str] | None = None

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "ExtractionOptions":
        """Build options from a mapping using either camelCase or snake_case keys."""
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in options.items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in known:
                raise ConfigurationError(f"Unknown extraction option: {key!r}")
            kwargs[name] = value
        return cls(**kwargs)


def _coerce_options(options: ExtractionOptions | Mapping[str, Any] | None) -> ExtractionOptions:
    if options is None:
        return ExtractionOptions()
    if isinstance(options, ExtractionOptions):
        return options
    if isinstance(options, Mapping):
        return ExtractionOptions.from_mapping(options)
    raise ConfigurationError(f"Unsupported options type: {type(options).__name__}")


def run(html: str, options: ExtractionOptions | Mapping[str, Any] | None = None) -> list[Record]:
    """Extract search records from an HTML document, in document order.

    Args:
        html: The HTML document.
        options: ``ExtractionOptions`` or a mapping such as
            ``{"cssSelector": "div", "tagsToExclude": "script"}``.

    Returns:
        One record per selected node with non-empty text. Empty when nothing
        matches.

    Raises:
        ConfigurationError: If the options or the CSS selector are invalid.
    """
    opts = _coerce_options(options)
    selector = compile_selector(opts.css_selector)
    excluded = normalize_tags(opts.tags_to_exclude)

    soup = parse_document(html)
    candidates = select_nodes(soup, selector)

    state = HierarchyState()
    records: list[Record] = []
    for event in document_events(soup, candidates):
        if event.level is not None:
            state.enter(event.level, inner_text(event.tag), heading_anchor(event.tag))
        if not event.is_candidate:
            continue

        clean = sanitized_copy(event.tag, excluded)
        content = inner_text(clean)
        if not content:
            logger.debug("Skipping empty <%s> node", event.tag.name)
            continue

        record = Record(
            content=content,
            html=outer_html(clean),
            anchor=own_anchor(event.tag) or state.nearest_anchor(),
            headings=state.headings(),
            custom_ranking=custom_ranking(len(records), state.depth()),
            node=event.tag,
        )
        record.object_id = compute_object_id(record)
        records.append(record)

    logger.debug("Extracted %d records from %d candidates", len(records), len(candidates))
    return records


class HtmlExtractor:
    """Reusable extractor holding default options.

    Each call to :meth:`run` owns its own hierarchy state, so one instance can
    serve many documents, including from several threads.
    """

    def __init__(self, options: ExtractionOptions | Mapping[str, Any] | None = None) -> None:
        self.options = _coerce_options(options)

    def run(self, html: str, options: ExtractionOptions | Mapping[str, Any] | None = None) -> list[Record]:
        return run(html, self.options if options is None else options)

    @staticmethod
    def uuid(data: Record | Mapping[str, Any]) -> str:
        return compute_object_id(data)
