"""
hyperlink_extractor/models/extracted.py
---------------------------------------
Result types produced by the extraction engine.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple


def new_url_id() -> str:
    return f"url-{uuid.uuid4().hex}"


@dataclass(frozen=True)
class ExtractedURL:
    """One discovered link."""
    url: str
    display_text: str
    is_valid: bool
    original_index: int
    id: str = field(default_factory=new_url_id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "url": self.url,
            "displayText": self.display_text,
            "isValid": self.is_valid,
            "originalIndex": self.original_index,
        }


@dataclass(frozen=True)
class ParsedContent:
    """Sanitized markup plus the ordered, deduplicated links found in it."""
    original_html: str = ""
    extracted_urls: Tuple[ExtractedURL, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "originalHtml": self.original_html,
            "extractedUrls": [u.to_dict() for u in self.extracted_urls],
        }
