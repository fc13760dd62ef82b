"""
hyperlink_extractor/content_parser/extract_urls.py
--------------------------------------------------
Pattern-based URL extraction:

- scan_plain_text: bare http(s) URLs in a text rendering
- extract_urls_directly: href scraping for clipboard markup that doesn't
  parse into usable anchors (Google Sheets). Best effort only: no tree,
  no nesting guarantees, just regexes.
"""

import html as html_lib
import re
from typing import Dict, List
from urllib.parse import urlsplit

from hyperlink_extractor.content_parser.url_validator import validate_url
from hyperlink_extractor.models.extracted import ExtractedURL
from hyperlink_extractor.utils.logging_utils import get_logger

logger = get_logger()

# scheme, host, optional port, then optional path / query / fragment
URL_REGEX = re.compile(
    r"https?://[-\w.]+"
    r"(?::\d+)?"
    r"(?:/[-\w/.~%+@!$*,;:=]*)?"
    r"(?:\?[-\w&=%.+~/:;,@!$*]*)?"
    r"(?:#[-\w.~/%=&]*)?",
    re.IGNORECASE,
)

HREF_REGEX = re.compile(r'href="([^"]+)"', re.IGNORECASE)
ANCHOR_TEXT_REGEX = re.compile(r'<a[^>]*href="([^"]+)"[^>]*>([^<]*)<', re.IGNORECASE)

_TRAILING_PUNCT = ".,;:!?'\")"


def _has_host(url: str) -> bool:
    # stripping may eat the whole host ("https://..." -> "https://")
    try:
        host = urlsplit(url).hostname or ""
    except ValueError:
        return False
    return bool(host.strip("."))


def scan_plain_text(text: str) -> List[str]:
    """
    Extracts bare http(s) URLs from text.

    Args:
        text (str): Text-only content (no markup).

    Returns:
        List[str]: Unique matches in first-seen order. Not validated.
    """
    if not text or not isinstance(text, str):
        return []

    found: List[str] = []
    for match in URL_REGEX.findall(text):
        u = match.rstrip(_TRAILING_PUNCT)
        if u and _has_host(u):
            found.append(u)
    return list(dict.fromkeys(found))


def extract_urls_directly(content: str) -> List[ExtractedURL]:
    """
    Pulls links straight out of raw markup with regexes.

    Every href="..." is a candidate; labels come from `<a ...>label<`
    pairs (the last non-empty label seen for a URL wins). Only URLs that
    pass validate_url are returned.
    """
    if not content or not isinstance(content, str):
        return []

    hrefs = [html_lib.unescape(m) for m in HREF_REGEX.findall(content)]
    logger.debug("Direct extraction found {} href attributes", len(hrefs))

    labels: Dict[str, str] = {}
    for raw_url, raw_text in ANCHOR_TEXT_REGEX.findall(content):
        text = html_lib.unescape(raw_text).strip()
        if text:
            labels[html_lib.unescape(raw_url)] = text

    results: List[ExtractedURL] = []
    for url in dict.fromkeys(hrefs):
        if not validate_url(url):
            logger.debug("Direct extraction skipped invalid URL {!r}", url)
            continue
        results.append(
            ExtractedURL(
                url=url,
                display_text=labels.get(url, url),
                is_valid=True,
                original_index=len(results),
            )
        )
    return results
