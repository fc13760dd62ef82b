"""
hyperlink_extractor/utils/errors.py
-----------------------------------
Exception types raised around the extraction engine, and the translation
of any failure into a user-facing, structured error.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class HyperlinkExtractorError(Exception):
    """Base class for errors raised by this package."""


class ContentParsingError(HyperlinkExtractorError):
    """Tree construction failed on pathological markup."""


class ContentTooLargeError(HyperlinkExtractorError):
    def __init__(self, content_length: int, limit: int):
        self.content_length = content_length
        self.limit = limit
        super().__init__(
            f"content too large: {content_length} characters (limit {limit})"
        )


class TooManyUrlsError(HyperlinkExtractorError):
    def __init__(self, url_count: int, limit: int):
        self.url_count = url_count
        self.limit = limit
        super().__init__(f"too many URLs: {url_count} (limit {limit})")


class ErrorType(str, Enum):
    PARSING_ERROR = "PARSING_ERROR"
    CONTENT_TOO_LARGE = "CONTENT_TOO_LARGE"
    TOO_MANY_URLS = "TOO_MANY_URLS"


GENERIC_MESSAGE = "ERROR, PLEASE TRY AGAIN"


@dataclass(frozen=True)
class AppError:
    type: ErrorType
    message: str
    recoverable: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "message": self.message,
            "recoverable": self.recoverable,
        }


def handle_error(
    error: BaseException,
    content_length: Optional[int] = None,
    url_count: Optional[int] = None,
) -> AppError:
    """
    Categorize an exception into an AppError.

    Size errors keep their own type so callers can tell "shrink the input"
    apart from "try again". Everything else is a retryable parsing error.
    """
    if isinstance(error, ContentTooLargeError):
        mb = error.limit / 1024 / 1024
        return AppError(
            ErrorType.CONTENT_TOO_LARGE,
            f"Content is too large to process. Maximum allowed is {mb:.2f}MB.",
            True,
        )

    if isinstance(error, TooManyUrlsError):
        return AppError(
            ErrorType.TOO_MANY_URLS,
            f"Too many URLs found ({error.url_count}). Maximum allowed is {error.limit}.",
            True,
        )

    if isinstance(error, (MemoryError, RecursionError)):
        return AppError(
            ErrorType.PARSING_ERROR,
            "Content is too large or complex to process. "
            "Please try with smaller content or fewer URLs.",
            True,
        )

    message = GENERIC_MESSAGE
    if content_length is not None and content_length > 50_000:
        message = "Content is too large to process. Please try with smaller content."
    elif url_count is not None and url_count > 1000:
        message = "Too many URLs found. Please try with content containing fewer URLs."

    return AppError(ErrorType.PARSING_ERROR, message, True)


def get_error_message(error: AppError) -> str:
    """User-friendly message with a recovery suggestion."""
    if not error.recoverable:
        return error.message
    if error.type is ErrorType.PARSING_ERROR:
        return error.message + " Try refreshing the page or using different content."
    return error.message + " Please try again."
