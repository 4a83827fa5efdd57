"""Tests for heading hierarchy tracking."""

from __future__ import annotations

import pytest

from html_extractor.hierarchy import HierarchyState, document_events
from html_extractor.html_utils import compile_selector, parse_document, select_nodes


class TestHierarchyState:
    """Tests for HierarchyState."""

    def test_starts_empty(self) -> None:
        """Should start without headings or anchor."""
        state = HierarchyState()

        assert state.headings() == []
        assert state.depth() == 0
        assert state.nearest_anchor() is None

    def test_accumulates_levels_in_order(self) -> None:
        """Should list headings shallowest first."""
        state = HierarchyState()
        state.enter(1, "Foo")
        state.enter(2, "Bar")
        state.enter(3, "Baz")

        assert state.headings() == ["Foo", "Bar", "Baz"]
        assert state.depth() == 3

    def test_entering_shallower_level_clears_deeper_levels(self) -> None:
        """Should clear levels deeper than the entered one."""
        state = HierarchyState()
        state.enter(1, "Foo")
        state.enter(2, "Bar")
        state.enter(3, "Baz")
        state.enter(2, "Qux")

        assert state.headings() == ["Foo", "Qux"]

    def test_entering_same_level_replaces_it(self) -> None:
        """Should replace the heading at the same level."""
        state = HierarchyState()
        state.enter(1, "Foo")
        state.enter(1, "Bar")

        assert state.headings() == ["Bar"]

    def test_does_not_pad_missing_levels(self) -> None:
        """Should skip levels never seen."""
        state = HierarchyState()
        state.enter(2, "Bar")
        state.enter(4, "Baz")

        assert state.headings() == ["Bar", "Baz"]

    def test_nearest_anchor_skips_levels_without_anchor(self) -> None:
        """Should look up past levels without anchor."""
        state = HierarchyState()
        state.enter(1, "Foo", "a")
        state.enter(2, "Bar")

        assert state.nearest_anchor() == "a"

    def test_nearest_anchor_prefers_deepest(self) -> None:
        """Should prefer the deepest anchor."""
        state = HierarchyState()
        state.enter(1, "Foo", "a")
        state.enter(3, "Baz", "b")

        assert state.nearest_anchor() == "b"

    @pytest.mark.parametrize("level", [0, 7, -1])
    def test_rejects_invalid_levels(self, level: int) -> None:
        """Should reject levels outside 1-6."""
        with pytest.raises(ValueError, match="Heading level"):
            HierarchyState().enter(level, "Foo")


class TestDocumentEvents:
    """Tests for document_events."""

    def test_interleaves_headings_and_candidates(self) -> None:
        """Should list headings and candidates in document order."""
        soup = parse_document("<div><h1>A</h1><span>skip</span><p>x</p></div><h2>B</h2><p>y</p>")
        candidates = select_nodes(soup, compile_selector("p"))

        events = document_events(soup, candidates)

        assert [(event.tag.name, event.level, event.is_candidate) for event in events] == [
            ("h1", 1, False),
            ("p", None, True),
            ("h2", 2, False),
            ("p", None, True),
        ]

    def test_heading_can_be_a_candidate(self) -> None:
        """Should flag a selected heading as both."""
        soup = parse_document("<h3>A</h3>")
        candidates = select_nodes(soup, compile_selector("h3"))

        events = document_events(soup, candidates)

        assert len(events) == 1
        assert events[0].level == 3
        assert events[0].is_candidate
