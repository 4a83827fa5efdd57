"""html_extractor: split HTML documents into search index records."""

from html_extractor.exceptions import (
    ConfigurationError,
    FetchError,
    HtmlExtractorError,
    HTMLNotAvailableError,
)
from html_extractor.extractor import ExtractionOptions, HtmlExtractor, run
from html_extractor.identity import compute_object_id
from html_extractor.schemas import CustomRanking, Record

__all__ = [
    "ConfigurationError",
    "CustomRanking",
    "ExtractionOptions",
    "FetchError",
    "HTMLNotAvailableError",
    "HtmlExtractor",
    "HtmlExtractorError",
    "Record",
    "compute_object_id",
    "run",
]
