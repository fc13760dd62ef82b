"""
hyperlink_extractor/content_parser/parser.py
--------------------------------------------
Core HTML parser that turns pasted markup into a small immutable node tree
(text and element nodes only) that the sanitizer and extractor walk.
"""

import warnings
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning, ParserRejectedMarkup
from bs4.element import NavigableString, PreformattedString, Tag

from hyperlink_extractor.utils.config import CONFIG
from hyperlink_extractor.utils.errors import ContentParsingError

# Document wrappers a fragment parser would not produce; their children are
# spliced into the parent instead.
TRANSPARENT_TAGS = frozenset({"html", "head", "body"})


@dataclass(frozen=True)
class TextNode:
    text: str


@dataclass(frozen=True)
class ElementNode:
    tag: str
    children: Tuple["Node", ...] = ()
    href: Optional[str] = None


Node = Union[TextNode, ElementNode]


def _convert(root: Tag) -> List[Node]:
    # Explicit stack of (remaining children, converted so far, source tag);
    # deep markup must not hit the interpreter's recursion limit.
    top: List[Node] = []
    stack = [(iter(root.children), top, None)]
    while stack:
        children, out, source = stack[-1]
        child = next(children, None)

        if child is None:
            stack.pop()
            if source is None:
                continue
            name = (source.name or "").lower()
            parent_out = stack[-1][1]
            if name in TRANSPARENT_TAGS:
                parent_out.extend(out)
            else:
                href = source.get("href") if name == "a" else None
                parent_out.append(ElementNode(tag=name, children=tuple(out), href=href))
            continue

        if isinstance(child, Tag):
            stack.append((iter(child.children), [], child))
        elif isinstance(child, PreformattedString):
            # comments, CDATA, doctypes, processing instructions
            continue
        elif isinstance(child, NavigableString):
            out.append(TextNode(str(child)))
    return top


def parse_html(html: str, parser: Optional[str] = None) -> Tuple[Node, ...]:
    """
    Parses an HTML fragment into a tuple of top-level nodes.

    Raises ContentParsingError when the tree builder itself gives up on
    the markup.
    """
    if not html or not isinstance(html, str):
        return ()

    try:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
            soup = BeautifulSoup(html, parser or CONFIG.HTML_PARSER)
    except (ParserRejectedMarkup, RecursionError) as e:
        raise ContentParsingError(f"could not parse content: {type(e).__name__}") from e
    return tuple(_convert(soup))


def _iter_text(nodes: Sequence[Node]) -> Iterator[str]:
    stack = list(reversed(nodes))
    while stack:
        node = stack.pop()
        if isinstance(node, TextNode):
            yield node.text
        else:
            stack.extend(reversed(node.children))


def text_content(node: Node) -> str:
    """Concatenated text of a node and its descendants."""
    if isinstance(node, TextNode):
        return node.text
    return "".join(_iter_text(node.children))


def render_text(nodes: Sequence[Node], separator: str = " ") -> str:
    """
    Text-only rendering of a node list. Text runs are joined with
    `separator` so words from adjacent cells never fuse together.
    """
    return separator.join(_iter_text(nodes))


def iter_anchors(nodes: Sequence[Node]) -> Iterator[ElementNode]:
    """Anchor elements carrying an href, in document order."""
    stack = list(reversed(nodes))
    while stack:
        node = stack.pop()
        if isinstance(node, TextNode):
            continue
        if node.tag == "a" and node.href is not None:
            yield node
        stack.extend(reversed(node.children))
