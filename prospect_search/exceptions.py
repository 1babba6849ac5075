"""
Error taxonomy for a prospect search.

Every failure a search can hit is an EntitySearchError carrying a message
that is safe to show to the user as-is.
"""

from typing import Optional


class EntitySearchError(Exception):
    """Base class for all search failures."""

    default_message = "An unexpected error occurred. Please try again."
    default_code: Optional[str] = None

    def __init__(self, message: Optional[str] = None, code: Optional[str] = None):
        self.message = message or self.default_message
        self.code = code or self.default_code
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class MissingCriteriaError(EntitySearchError):
    default_message = "Please select both industry and state"
    default_code = "missing_criteria"


class ConfigurationError(EntitySearchError):
    default_message = "GEMINI_API_KEY is not configured"
    default_code = "config"


class UpstreamHTTPError(EntitySearchError):
    """The upstream API answered with a non-2xx status or could not be reached."""

    default_message = "Failed to fetch results"
    default_code = "upstream_http"

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
    ):
        super().__init__(message, code)
        self.status_code = status_code


class UnexpectedResponseError(EntitySearchError):
    default_message = "Invalid response format from API"
    default_code = "unexpected_response"


class ExtractionError(EntitySearchError):
    """Base for failures turning the model's text into result records."""

    default_message = "Failed to parse search results. Please try again."


class NoArrayFoundError(ExtractionError):
    default_message = "No valid JSON array found in response"
    default_code = "no_array"


class ResultParseError(ExtractionError):
    default_message = "Failed to parse search results. Please try again."
    default_code = "parse"


class ResultFormatError(ExtractionError):
    default_message = "Invalid results format"
    default_code = "format"
