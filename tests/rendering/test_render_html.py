# topmark:header:start
#
#   project      : SnapMark
#   file         : test_render_html.py
#   file_relpath : tests/rendering/test_render_html.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `snapmark.rendering.html`."""

from __future__ import annotations

from snapmark.core.nodes import Container, NodeType, wrap_text
from snapmark.rendering.html import escape_html, is_tight_item, render_html
from tests.conftest import c, para, t


def test_escape_html() -> None:
    """Ampersands, angle brackets and double quotes are escaped."""
    assert escape_html("a & <b> \"c\" 'd'") == "a &amp; &lt;b&gt; &quot;c&quot; 'd'"


def test_empty_document() -> None:
    """No nodes, no output."""
    assert render_html([]) == ""


def test_inline_tags() -> None:
    """Inline containers map to their elements; URLs render as text."""
    doc = [
        para(
            c(NodeType.EMPHASIS, t("a")),
            c(NodeType.STRONG_EMPHASIS, t("b")),
            wrap_text(NodeType.CODE_SPAN, "<c>"),
            wrap_text(NodeType.URL, "http://x?a&b"),
        )
    ]
    assert render_html(doc) == (
        "<p><em>a</em><strong>b</strong><code>&lt;c&gt;</code>http://x?a&amp;b</p>\n"
    )


def test_code_block() -> None:
    """Code blocks keep their text inside ``pre``."""
    assert render_html([wrap_text(NodeType.CODE_BLOCK, "x < y\n")]) == (
        "<pre><code>x &lt; y\n</code></pre>\n"
    )


def test_tight_and_loose_items() -> None:
    """Single-paragraph items drop the ``p``; others keep block layout."""
    tight = c(NodeType.LIST_ITEM, para("a"))
    loose = c(NodeType.LIST_ITEM, para("b"), para("c"))
    empty = Container(NodeType.LIST_ITEM)
    assert is_tight_item(tight)
    assert not is_tight_item(loose)
    assert not is_tight_item(empty)
    assert not is_tight_item(para("a"))
    assert render_html([c(NodeType.UNORDERED_LIST, tight, loose, empty)]) == (
        "<ul>\n<li>a</li>\n<li>\n<p>b</p>\n<p>c</p>\n</li>\n<li></li>\n</ul>\n"
    )


def test_item_with_code_block_only() -> None:
    """An item whose only child is not a paragraph is rendered as a block."""
    item = c(NodeType.LIST_ITEM, wrap_text(NodeType.CODE_BLOCK, "x\n"))
    assert render_html([c(NodeType.UNORDERED_LIST, item)]) == (
        "<ul>\n<li>\n<pre><code>x\n</code></pre>\n</li>\n</ul>\n"
    )


def test_equal_paragraphs_in_different_items() -> None:
    """Only the paragraph of the tight item itself is rendered bare."""
    shared = para("x")
    tight = c(NodeType.LIST_ITEM, shared)
    loose = c(NodeType.LIST_ITEM, para("x"), para("y"))
    assert render_html([c(NodeType.UNORDERED_LIST, tight, loose)]) == (
        "<ul>\n<li>x</li>\n<li>\n<p>x</p>\n<p>y</p>\n</li>\n</ul>\n"
    )
