"""Tests for ranking signals."""

from __future__ import annotations

import pytest

from html_extractor.ranking import custom_ranking, heading_weight


@pytest.mark.parametrize(
    ("depth", "weight"),
    [(0, 100), (1, 90), (2, 80), (3, 70), (4, 60), (5, 50), (6, 40)],
)
def test_heading_weight(depth: int, weight: int) -> None:
    """Should drop 10 points per heading level."""
    assert heading_weight(depth) == weight


def test_heading_weight_rejects_negative_depth() -> None:
    """Should reject a negative depth."""
    with pytest.raises(ValueError, match="negative"):
        heading_weight(-1)


def test_custom_ranking() -> None:
    """Should combine position and heading weight."""
    ranking = custom_ranking(3, 2)

    assert ranking.position == 3
    assert ranking.heading == 80
