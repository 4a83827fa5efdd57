"""Shared schemas for html_extractor."""

from html_extractor.schemas.record import CustomRanking, Record

__all__ = ["CustomRanking", "Record"]
