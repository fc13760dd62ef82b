"""
Operations on an extracted URL list as a consumer edits it.

Results from the engine are immutable; every function here returns a new
tuple and leaves its input untouched.
"""

from dataclasses import replace
from typing import Iterable, Tuple

from hyperlink_extractor.models.extracted import ExtractedURL


def update_display_text(urls: Iterable[ExtractedURL], url_id: str, text: str) -> Tuple[ExtractedURL, ...]:
    """Relabel one entry. Blank text falls back to the URL itself."""
    label = (text or "").strip()
    return tuple(
        replace(u, display_text=label or u.url) if u.id == url_id else u
        for u in urls
    )


def remove_url(urls: Iterable[ExtractedURL], url_id: str) -> Tuple[ExtractedURL, ...]:
    return tuple(u for u in urls if u.id != url_id)


def openable_urls(urls: Iterable[ExtractedURL]) -> Tuple[ExtractedURL, ...]:
    """Entries safe to open in a browser tab."""
    return tuple(u for u in urls if u.is_valid)


def invalid_count(urls: Iterable[ExtractedURL]) -> int:
    return sum(1 for u in urls if not u.is_valid)


def format_for_copy(urls: Iterable[ExtractedURL], separator: str = "\n") -> str:
    return separator.join(u.url for u in urls)
