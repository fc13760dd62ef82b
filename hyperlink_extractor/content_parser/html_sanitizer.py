"""
hyperlink_extractor/content_parser/html_sanitizer.py
----------------------------------------------------
Allow-list sanitizer over the parsed node tree.

- Text passes through unchanged.
- Tags outside CONFIG.ALLOWED_TAGS collapse into a text node of their
  visible text (script, style, iframe, object, embed, link, img, ...).
- Anchors keep only a validated href, and always open in a new tab with
  rel="noopener noreferrer". Anchors with a bad href become plain text.
- Every other attribute is dropped.
"""

import html as html_lib
from typing import List, Sequence, Tuple, Union

from hyperlink_extractor.content_parser.parser import (
    ElementNode,
    Node,
    TextNode,
    parse_html,
    text_content,
)
from hyperlink_extractor.content_parser.url_validator import validate_url
from hyperlink_extractor.utils.config import CONFIG

VOID_TAGS = frozenset({"br"})

ANCHOR_ATTRS = (("target", "_blank"), ("rel", "noopener noreferrer"))


def _flatten(node: Node) -> bool:
    if node.tag not in CONFIG.ALLOWED_TAGS:
        return True
    return node.tag == "a" and not validate_url(node.href)


def sanitize_nodes(nodes: Sequence[Node]) -> Tuple[Node, ...]:
    # Post-order walk on an explicit stack of
    # (remaining children, sanitized so far, source element).
    top: List[Node] = []
    stack = [(iter(nodes), top, None)]
    while stack:
        children, out, source = stack[-1]
        node = next(children, None)

        if node is None:
            stack.pop()
            if source is not None:
                stack[-1][1].append(
                    ElementNode(
                        tag=source.tag,
                        children=tuple(out),
                        href=source.href if source.tag == "a" else None,
                    )
                )
            continue

        if isinstance(node, TextNode):
            out.append(node)
        elif _flatten(node):
            out.append(TextNode(text_content(node)))
        else:
            stack.append((iter(node.children), [], node))
    return tuple(top)


def sanitize_tree(html: str) -> Tuple[Node, ...]:
    """
    Parse and sanitize, returning the safe node tree.
    """
    return sanitize_nodes(parse_html(html))


def _open_tag(node: ElementNode) -> str:
    attrs = ""
    if node.tag == "a" and node.href is not None:
        attrs = f' href="{html_lib.escape(node.href, quote=True)}"'
        attrs += "".join(f' {name}="{value}"' for name, value in ANCHOR_ATTRS)
    return f"<{node.tag}{attrs}>"


def render_html(nodes: Sequence[Node]) -> str:
    """Serialize a (sanitized) node list back to markup."""
    out: List[str] = []
    # closing tags are pushed as plain strings between the children
    stack: List[Union[Node, str]] = list(reversed(nodes))
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            out.append(item)
        elif isinstance(item, TextNode):
            out.append(html_lib.escape(item.text, quote=False))
        else:
            out.append(_open_tag(item))
            if item.tag in VOID_TAGS:
                continue
            stack.append(f"</{item.tag}>")
            stack.extend(reversed(item.children))
    return "".join(out)


def sanitize_html(html: str) -> str:
    """
    Sanitize pasted HTML.

    Args:
        html (str): Raw markup, possibly hostile or malformed.

    Returns:
        str: Safe markup. Empty or non-string input gives "".
    """
    if not html or not isinstance(html, str):
        return ""
    return render_html(sanitize_tree(html))
