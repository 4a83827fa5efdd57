"""Custom exceptions for html_extractor."""


class HtmlExtractorError(Exception):
    """Base exception for html_extractor operations."""


class ConfigurationError(HtmlExtractorError):
    """Invalid extraction options (bad selector, unknown option key)."""


class FetchError(HtmlExtractorError):
    """Error during content fetching."""


class HTMLNotAvailableError(FetchError):
    """The requested page does not exist."""
