"""
hyperlink_extractor/extraction/pipeline.py
------------------------------------------
End-to-end link extraction for pasted content.

Steps:
- Sanitize the content into a safe node tree
  (spreadsheet clipboard markup is walked unsanitized, see below)
- Collect anchors in document order, validating each href
- Merge repeated URLs, upgrading the label when a better one turns up
- Scan the text rendering for bare URLs not already captured
- Fall back to regex href scraping for spreadsheet markup with no anchors

Return value: ParsedContent(original_html, extracted_urls)
"""

from dataclasses import replace
from typing import Dict, List, Sequence

from hyperlink_extractor.content_parser.extract_urls import (
    extract_urls_directly,
    scan_plain_text,
)
from hyperlink_extractor.content_parser.html_sanitizer import render_html, sanitize_nodes
from hyperlink_extractor.content_parser.parser import (
    Node,
    iter_anchors,
    parse_html,
    render_text,
    text_content,
)
from hyperlink_extractor.content_parser.url_validator import validate_url
from hyperlink_extractor.models.extracted import ExtractedURL, ParsedContent
from hyperlink_extractor.utils.config import CONFIG
from hyperlink_extractor.utils.logging_utils import get_logger

logger = get_logger()


# ---------------------------------------------------------------------------
# Utility helpers
# ---------------------------------------------------------------------------

def is_spreadsheet_content(content: str) -> bool:
    return any(marker in content for marker in CONFIG.SPREADSHEET_MARKERS)


def _is_better_label(candidate: str, current: str, url: str) -> bool:
    """
    Upgrade-only rule: a non-empty label that differs from the URL replaces
    a stored label that is empty or just the URL. Never the other way round.
    """
    return (
        bool(candidate)
        and candidate != url
        and (not current or current == url)
    )


def _collect_anchor_urls(nodes: Sequence[Node]) -> Dict[str, ExtractedURL]:
    url_map: Dict[str, ExtractedURL] = {}

    for anchor in iter_anchors(nodes):
        href = anchor.href
        if not validate_url(href):
            logger.debug("Skipping invalid anchor href {!r}", href)
            continue

        label = (text_content(anchor) or href).strip()
        existing = url_map.get(href)

        if existing is None:
            url_map[href] = ExtractedURL(
                url=href,
                display_text=label,
                is_valid=True,
                original_index=len(url_map),
            )
        elif _is_better_label(label, existing.display_text, href):
            url_map[href] = replace(existing, display_text=label)
            logger.debug("Upgraded label for {} to {!r}", href, label)

    return url_map


def _append_bare_urls(url_map: Dict[str, ExtractedURL], nodes: Sequence[Node]) -> List[ExtractedURL]:
    urls = list(url_map.values())
    for url in scan_plain_text(render_text(nodes)):
        if url in url_map:
            continue
        entry = ExtractedURL(
            url=url,
            display_text=url,
            is_valid=validate_url(url),
            original_index=len(urls),
        )
        url_map[url] = entry
        urls.append(entry)
    return urls


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def parse_hyperlinked_content(content: str) -> ParsedContent:
    """
    Extract links from pasted HTML or plain text.

    Never raises for empty, malformed, deeply nested or hostile input; the
    only exception is ContentParsingError when the tree builder rejects the
    markup outright.
    """
    if not content or not isinstance(content, str):
        return ParsedContent()

    # 1) Parse once; sanitize the tree
    raw_nodes = parse_html(content)
    safe_nodes = sanitize_nodes(raw_nodes)
    original_html = render_html(safe_nodes)

    # 2) Spreadsheet markup wraps its table in unknown tags that the
    #    sanitizer would flatten, so anchors are read from the raw tree
    spreadsheet = is_spreadsheet_content(content)
    walk_nodes = raw_nodes if spreadsheet else safe_nodes
    if spreadsheet:
        logger.debug("Detected spreadsheet clipboard content")

    # 3) Anchors
    url_map = _collect_anchor_urls(walk_nodes)
    anchor_count = sum(1 for _ in iter_anchors(walk_nodes))
    logger.opt(lazy=True).debug(
        "Found {} anchors, {} unique valid URLs",
        lambda: anchor_count,
        lambda: len(url_map),
    )

    # 4) Regex fallback when the tree gave us nothing to work with
    if spreadsheet and anchor_count == 0:
        logger.debug("No anchors in spreadsheet content, using direct extraction")
        return ParsedContent(
            original_html=original_html,
            extracted_urls=tuple(extract_urls_directly(content)),
        )

    # 5) Bare URLs in the visible text
    urls = _append_bare_urls(url_map, walk_nodes)

    return ParsedContent(original_html=original_html, extracted_urls=tuple(urls))
