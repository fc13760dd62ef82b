"""
Content ceilings checked by callers before (and after) running the engine.
"""

from typing import Optional, Tuple

from hyperlink_extractor.utils.config import CONFIG


def validate_content_size(content: Optional[str], limit: Optional[int] = None) -> Tuple[bool, Optional[str]]:
    """
    Returns (ok, message). Empty content is always within limits.
    """
    limit = CONFIG.MAX_CONTENT_LENGTH if limit is None else limit
    if not content:
        return True, None

    length = len(content)
    if length > limit:
        return False, (
            f"Content too large ({length / 1024 / 1024:.2f}MB). "
            f"Maximum allowed is {limit / 1024 / 1024:.2f}MB."
        )
    return True, None


def validate_url_count(url_count: int, limit: Optional[int] = None) -> Tuple[bool, Optional[str]]:
    limit = CONFIG.MAX_URL_COUNT if limit is None else limit
    if url_count > limit:
        return False, f"Too many URLs found ({url_count}). Maximum allowed is {limit}."
    return True, None
