# tests/test_html_sanitizer.py

import pytest
from bs4 import ParserRejectedMarkup

from hyperlink_extractor.content_parser import parser as parser_module
from hyperlink_extractor.content_parser.html_sanitizer import (
    render_html,
    sanitize_html,
    sanitize_tree,
)
from hyperlink_extractor.content_parser.parser import ElementNode, TextNode
from hyperlink_extractor.utils.errors import ContentParsingError

SAFE_ANCHOR = '<a href="https://example.com" target="_blank" rel="noopener noreferrer">'


def test_preserves_safe_tags():
    assert sanitize_html("<p>Hello <strong>world</strong></p>") == "<p>Hello <strong>world</strong></p>"


def test_preserves_line_breaks():
    assert sanitize_html("<p>Line 1<br>Line 2</p>") == "<p>Line 1<br>Line 2</p>"


def test_valid_anchor_gets_new_tab_and_rel():
    result = sanitize_html('<a href="https://example.com">Link</a>')
    assert result == SAFE_ANCHOR + "Link</a>"


def test_anchor_drops_other_attributes():
    result = sanitize_html(
        '<a href="https://example.com" onclick="steal()" target="_self" style="x">Link</a>'
    )
    assert result == SAFE_ANCHOR + "Link</a>"


def test_invalid_anchor_demoted_to_text():
    assert sanitize_html('<a href="javascript:alert(1)">Malicious Link</a>') == "Malicious Link"
    assert sanitize_html("<a>No target</a>") == "No target"


def test_script_and_style_become_text():
    assert sanitize_html('<script>alert("xss")</script><p>Safe content</p>') == 'alert("xss")<p>Safe content</p>'
    html = '<style>body { background: red; }</style><link rel="stylesheet" href="evil.css"><p>Content</p>'
    assert sanitize_html(html) == "body { background: red; }<p>Content</p>"


def test_event_handlers_removed():
    assert sanitize_html('<p onclick="alert(1)">Click me</p>') == "<p>Click me</p>"


def test_nested_structure():
    html = '<div><p>Text with <a href="https://example.com">link</a> and <em>emphasis</em></p></div>'
    expected = "<div><p>Text with " + SAFE_ANCHOR + "link</a> and <em>emphasis</em></p></div>"
    assert sanitize_html(html) == expected


def test_disallowed_wrapper_keeps_visible_text_only():
    html = '<font color="red">Hello <a href="https://example.com">there</a></font>'
    assert sanitize_html(html) == "Hello there"


def test_comments_and_document_wrappers_dropped():
    html = "<!DOCTYPE html><html><body><!-- note --><p>Hi</p></body></html>"
    assert sanitize_html(html) == "<p>Hi</p>"


def test_text_is_escaped_on_output():
    result = sanitize_html("<p>1 &lt; 2 &amp; &lt;script&gt;</p>")
    assert result == "<p>1 &lt; 2 &amp; &lt;script&gt;</p>"
    assert "<script" not in result


def test_href_ampersands_escaped():
    result = sanitize_html('<a href="https://example.com/?a=1&amp;b=2">q</a>')
    assert 'href="https://example.com/?a=1&amp;b=2"' in result


def test_empty_and_invalid_input():
    assert sanitize_html("") == ""
    assert sanitize_html(None) == ""
    assert sanitize_html(42) == ""


def test_malicious_constructs_removed():
    malicious = [
        '<img src="x" onerror="alert(1)">',
        '<script>alert("xss")</script>',
        '<iframe src="javascript:alert(1)"></iframe>',
        '<object data="javascript:alert(1)"></object>',
        '<embed src="javascript:alert(1)">',
        '<link rel="stylesheet" href="javascript:alert(1)">',
        '<a href="javascript:alert(1)" onmouseover="x()">hover</a>',
        '<div onerror="alert(1)"><a href="data:text/html;base64,PHNjcmlwdD4=">d</a></div>',
    ]
    for html in malicious:
        result = sanitize_html(html)
        for needle in ["javascript:", "onerror", "<script", "<iframe", "<object", "<embed", "<link"]:
            assert needle not in result, (html, result)


def test_visible_text_inside_dangerous_tags_survives():
    result = sanitize_html("<object><p>fallback text</p></object><iframe>frame text</iframe>")
    assert "fallback text" in result
    assert "frame text" in result


def test_sanitize_tree_returns_nodes():
    nodes = sanitize_tree('<p>Hi <a href="https://example.com">x</a><span onclick="y">z</span></p>')
    assert nodes == (
        ElementNode(
            tag="p",
            children=(
                TextNode("Hi "),
                ElementNode(tag="a", children=(TextNode("x"),), href="https://example.com"),
                ElementNode(tag="span", children=(TextNode("z"),)),
            ),
        ),
    )
    assert render_html(nodes) == "<p>Hi " + SAFE_ANCHOR + "x</a><span>z</span></p>"


def test_sanitizing_twice_is_stable():
    html = '<div><p>a <a href="https://example.com">b</a></p><script>c</script></div>'
    once = sanitize_html(html)
    assert sanitize_html(once) == once


def test_deep_nesting_is_sanitized():
    depth = 1000
    html = "<div>" * depth + '<a href="https://x.com">x</a>' + "</div>" * depth
    anchor = '<a href="https://x.com" target="_blank" rel="noopener noreferrer">x</a>'
    assert sanitize_html(html) == "<div>" * depth + anchor + "</div>" * depth


def test_deep_disallowed_wrappers_flatten_to_text():
    depth = 1000
    html = "<font>" * depth + "<b>deep</b> text" + "</font>" * depth
    assert sanitize_html(html) == "deep text"


def test_parser_rejection_raises_parsing_error(monkeypatch):
    def reject(*args, **kwargs):
        raise ParserRejectedMarkup("unparseable")

    monkeypatch.setattr(parser_module, "BeautifulSoup", reject)
    with pytest.raises(ContentParsingError):
        sanitize_html("<p>anything</p>")
