"""
Global configuration values for the hyperlink extractor.
"""

import os
from dataclasses import dataclass, field
from typing import FrozenSet, Tuple


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class ExtractorConfig:
    # Caller-side ceilings (the engine itself never enforces these)
    MAX_CONTENT_LENGTH: int = field(
        default_factory=lambda: _env_int("HYPERLINK_MAX_CONTENT_LENGTH", 1_000_000)
    )
    MAX_URL_COUNT: int = field(
        default_factory=lambda: _env_int("HYPERLINK_MAX_URL_COUNT", 10_000)
    )

    # URL schemes accepted by the validator
    ALLOWED_SCHEMES: FrozenSet[str] = frozenset({"http", "https", "ftp", "ftps", "mailto"})

    # Tags that survive sanitization; everything else collapses to its text
    ALLOWED_TAGS: FrozenSet[str] = frozenset({
        "a", "p", "br", "div", "span", "strong", "em", "b", "i",
        "section", "article", "ul", "li", "ol",
        "h1", "h2", "h3", "h4", "h5", "h6",
        "table", "tr", "td", "th", "thead", "tbody", "tfoot",
    })

    # BeautifulSoup tree builder ("html.parser" or "lxml")
    HTML_PARSER: str = field(
        default_factory=lambda: os.getenv("HYPERLINK_HTML_PARSER", "html.parser")
    )

    # Markers left by Google Sheets on clipboard HTML
    SPREADSHEET_MARKERS: Tuple[str, ...] = ("google-sheets-html-origin", "data-sheets-root")

    # Logging
    LOG_LEVEL: str = field(default_factory=lambda: os.getenv("HYPERLINK_LOG_LEVEL", "INFO"))
    LOG_DIR: str = "logs"


CONFIG = ExtractorConfig()
