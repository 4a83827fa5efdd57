"""Anchor lookup strategies for headings and content nodes."""

from __future__ import annotations

from typing import Callable, Sequence

from bs4.element import Tag

AnchorStrategy = Callable[[Tag], "str | None"]


def _attribute(tag: Tag, name: str) -> str | None:
    value = tag.get(name)
    if isinstance(value, list):
        value = " ".join(value)
    if value is None:
        return None
    value = value.strip()
    return value or None


def name_attribute(tag: Tag) -> str | None:
    return _attribute(tag, "name")


def id_attribute(tag: Tag) -> str | None:
    return _attribute(tag, "id")


def descendant_name_attribute(tag: Tag) -> str | None:
    """First descendant, in document order, carrying a ``name`` attribute."""
    for child in tag.find_all(attrs={"name": True}):
        anchor = name_attribute(child)
        if anchor:
            return anchor
    return None


def descendant_id_attribute(tag: Tag) -> str | None:
    for child in tag.find_all(attrs={"id": True}):
        anchor = id_attribute(child)
        if anchor:
            return anchor
    return None


# Anchors are sometimes placed on an inner <a> rather than the heading itself.
HEADING_ANCHOR_STRATEGIES: tuple[AnchorStrategy, ...] = (
    name_attribute,
    id_attribute,
    descendant_name_attribute,
    descendant_id_attribute,
)

CONTENT_ANCHOR_STRATEGIES: tuple[AnchorStrategy, ...] = (
    name_attribute,
    id_attribute,
)


def resolve_anchor(tag: Tag, strategies: Sequence[AnchorStrategy]) -> str | None:
    """Try each strategy in order and return the first anchor found."""
    for strategy in strategies:
        anchor = strategy(tag)
        if anchor is not None:
            return anchor
    return None


def heading_anchor(tag: Tag) -> str | None:
    return resolve_anchor(tag, HEADING_ANCHOR_STRATEGIES)


def own_anchor(tag: Tag) -> str | None:
    return resolve_anchor(tag, CONTENT_ANCHOR_STRATEGIES)
