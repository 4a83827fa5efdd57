"""Ranking signals for search records."""

from __future__ import annotations

from html_extractor.schemas import CustomRanking

BASE_HEADING_WEIGHT = 100
HEADING_WEIGHT_STEP = 10


def heading_weight(depth: int) -> int:
    """Weight favoring content close to the top of the heading structure.

    ``depth`` is the length of the active heading chain: 100 with no
    heading, 90 under an h1, down to 40 under a full h1..h6 chain.
    """
    if depth < 0:
        raise ValueError(f"Heading depth cannot be negative, got {depth}")
    return BASE_HEADING_WEIGHT - HEADING_WEIGHT_STEP * depth


def custom_ranking(position: int, depth: int) -> CustomRanking:
    return CustomRanking(position=position, heading=heading_weight(depth))
