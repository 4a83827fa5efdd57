"""Heading hierarchy tracking over a flattened, document-ordered event list."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from bs4 import BeautifulSoup
from bs4.element import Tag

from html_extractor.html_utils import heading_level

MAX_HEADING_LEVEL = 6


@dataclass(frozen=True)
class HeadingEntry:
    """Most recent heading seen at one level."""

    text: str
    anchor: str | None = None


@dataclass(frozen=True)
class DocumentEvent:
    """One tag visited by the extraction pass.

    Attributes:
        tag: The visited tag.
        level: Heading level (1-6) when the tag is a heading, else None.
        is_candidate: True when the tag was selected as a content candidate.
    """

    tag: Tag
    level: int | None
    is_candidate: bool


@dataclass
class HierarchyState:
    """Per-level heading context accumulated while walking the document.

    Entering a heading at level L replaces level L and forgets every deeper
    level, since the walk has moved past that part of the document.
    """

    levels: dict[int, HeadingEntry] = field(default_factory=dict)

    def enter(self, level: int, text: str, anchor: str | None = None) -> None:
        if not 1 <= level <= MAX_HEADING_LEVEL:
            raise ValueError(f"Heading level must be between 1 and {MAX_HEADING_LEVEL}, got {level}")
        for deeper in [lvl for lvl in self.levels if lvl > level]:
            del self.levels[deeper]
        self.levels[level] = HeadingEntry(text=text, anchor=anchor)

    def headings(self) -> list[str]:
        """Heading texts of populated levels, shallowest first."""
        return [self.levels[level].text for level in sorted(self.levels)]

    def depth(self) -> int:
        return len(self.levels)

    def nearest_anchor(self) -> str | None:
        """Anchor of the deepest populated level that has one."""
        for level in sorted(self.levels, reverse=True):
            anchor = self.levels[level].anchor
            if anchor is not None:
                return anchor
        return None


def document_events(soup: BeautifulSoup, candidates: Iterable[Tag]) -> list[DocumentEvent]:
    """Flatten the document into headings and candidates, in document order.

    Markup nesting is discarded: only the order in which tags are met matters.
    Tags that are neither headings nor candidates are skipped.
    """
    candidate_ids = {id(tag) for tag in candidates}
    events: list[DocumentEvent] = []
    for tag in soup.find_all(True):
        level = heading_level(tag)
        is_candidate = id(tag) in candidate_ids
        if level is None and not is_candidate:
            continue
        events.append(DocumentEvent(tag=tag, level=level, is_candidate=is_candidate))
    return events
