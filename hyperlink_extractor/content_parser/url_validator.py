"""
hyperlink_extractor/content_parser/url_validator.py
---------------------------------------------------
Structural URL validation. This is the scheme allow-list that keeps
javascript:, data: and file: links out of sanitized markup and results.
"""

from typing import Any
from urllib.parse import urlsplit

from hyperlink_extractor.utils.config import CONFIG

_HOST_REQUIRED = {"http", "https", "ftp", "ftps"}


def validate_url(url: Any) -> bool:
    """
    Returns True when `url` is an acceptable link target.

    Args:
        url: Candidate string. Anything that isn't a str is rejected.

    Returns:
        bool: No network lookups are made; this is purely syntactic.
    """
    if not url or not isinstance(url, str):
        return False

    candidate = url.strip()
    if not candidate:
        return False

    try:
        parts = urlsplit(candidate)
        hostname = parts.hostname or ""
        parts.port  # raises ValueError on a malformed port
    except ValueError:
        return False

    scheme = parts.scheme.lower()
    if scheme not in CONFIG.ALLOWED_SCHEMES:
        return False

    if scheme in _HOST_REQUIRED and not hostname:
        return False

    if scheme in ("http", "https"):
        if hostname in (".", "..") or hostname.startswith("./"):
            return False
        if "." not in hostname and hostname != "localhost":
            return False

    if scheme == "mailto" and not parts.path:
        return False

    # spaces must be percent-encoded
    if " " in candidate:
        return False

    return True
