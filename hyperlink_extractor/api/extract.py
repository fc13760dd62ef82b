"""
hyperlink_extractor/api/extract.py
----------------------------------
Caller-facing entry point around the extraction engine.
Checks the size ceilings, runs the pipeline and turns any failure into a
structured, user-presentable error instead of an exception.
"""

from typing import Any, Dict

from hyperlink_extractor.extraction.pipeline import parse_hyperlinked_content
from hyperlink_extractor.utils.config import CONFIG
from hyperlink_extractor.utils.errors import (
    ContentTooLargeError,
    TooManyUrlsError,
    get_error_message,
    handle_error,
)
from hyperlink_extractor.utils.limits import validate_content_size, validate_url_count
from hyperlink_extractor.utils.logging_utils import get_logger

logger = get_logger()


def extract_for_display(content: Any) -> Dict[str, Any]:
    """
    Extract links from pasted content for display.

    Returns either
        {"status": "ok", "originalHtml": ..., "extractedUrls": [...], "urlCount": n}
    or
        {"status": "error", "error": {"type", "message", "recoverable"}, "detail": ...}
    """
    content_length = len(content) if isinstance(content, str) else 0
    url_count = None

    try:
        size_ok, _ = validate_content_size(
            content if isinstance(content, str) else None, CONFIG.MAX_CONTENT_LENGTH
        )
        if not size_ok:
            raise ContentTooLargeError(content_length, CONFIG.MAX_CONTENT_LENGTH)

        result = parse_hyperlinked_content(content)
        url_count = len(result.extracted_urls)

        count_ok, _ = validate_url_count(url_count, CONFIG.MAX_URL_COUNT)
        if not count_ok:
            raise TooManyUrlsError(url_count, CONFIG.MAX_URL_COUNT)

        logger.info(
            "Extracted links | length={length} urls={urls} invalid={invalid}",
            length=content_length,
            urls=url_count,
            invalid=sum(1 for u in result.extracted_urls if not u.is_valid),
        )

        return {"status": "ok", **result.to_dict(), "urlCount": url_count}

    except Exception as e:
        app_error = handle_error(e, content_length=content_length, url_count=url_count)
        logger.error(f"Error while extracting links: {type(e).__name__}: {e}")
        return {
            "status": "error",
            "error": app_error.to_dict(),
            "detail": get_error_message(app_error),
        }
