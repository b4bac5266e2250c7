# topmark:header:start
#
#   project      : SnapMark
#   file         : html.py
#   file_relpath : src/snapmark/rendering/html.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HTML rendering of a parsed description.

The output is a fixed, minimal HTML form, so that parse results can be
compared byte for byte:

- block elements end with a newline (``<p>…</p>\\n``, ``<ul>\\n…</ul>\\n``);
- a list item holding a single paragraph is rendered tight, without ``<p>``;
- a URL is rendered as its text, with no ``<a>`` element;
- ``&``, ``<``, ``>`` and ``"`` are escaped in text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from snapmark.config.logging import get_logger
from snapmark.core.nodes import Container, NodeType, Text, walk

if TYPE_CHECKING:
    from collections.abc import Sequence

    from snapmark.config.logging import SnapmarkLogger
    from snapmark.core.nodes import Node

logger: SnapmarkLogger = get_logger(__name__)

_ESCAPES: Final[dict[int, str]] = str.maketrans(
    {"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;"}
)

_OPEN_TAGS: Final[dict[NodeType, str]] = {
    NodeType.PARAGRAPH: "<p>",
    NodeType.UNORDERED_LIST: "<ul>\n",
    NodeType.CODE_BLOCK: "<pre><code>",
    NodeType.CODE_SPAN: "<code>",
    NodeType.EMPHASIS: "<em>",
    NodeType.STRONG_EMPHASIS: "<strong>",
    NodeType.URL: "",
}

_CLOSE_TAGS: Final[dict[NodeType, str]] = {
    NodeType.PARAGRAPH: "</p>\n",
    NodeType.UNORDERED_LIST: "</ul>\n",
    NodeType.LIST_ITEM: "</li>\n",
    NodeType.CODE_BLOCK: "</code></pre>\n",
    NodeType.CODE_SPAN: "</code>",
    NodeType.EMPHASIS: "</em>",
    NodeType.STRONG_EMPHASIS: "</strong>",
    NodeType.URL: "",
}


def escape_html(text: str) -> str:
    """Escape ``&``, ``<``, ``>`` and ``"`` in ``text``."""
    return text.translate(_ESCAPES)


def is_tight_item(node: Node) -> bool:
    """Return True if ``node`` is a list item holding exactly one paragraph."""
    return (
        isinstance(node, Container)
        and node.kind is NodeType.LIST_ITEM
        and len(node.children) == 1
        and node.children[0].kind is NodeType.PARAGRAPH
    )


def render_html(nodes: Sequence[Node]) -> str:
    """Render ``nodes`` as an HTML fragment.

    Args:
        nodes (Sequence[Node]): Top-level nodes returned by the parser.

    Returns:
        str: The HTML fragment; empty for an empty document.
    """
    parts: list[str] = []
    # Paragraphs of tight list items, rendered without their <p> tags.
    bare: set[int] = set()
    for node, entering in walk(nodes):
        if isinstance(node, Text):
            parts.append(escape_html(node.text))
        elif id(node) in bare:
            continue
        elif not entering:
            parts.append(_CLOSE_TAGS[node.kind])
        elif isinstance(node, Container) and node.kind is NodeType.LIST_ITEM:
            if is_tight_item(node):
                bare.add(id(node.children[0]))
                parts.append("<li>")
            elif node.children:
                parts.append("<li>\n")
            else:
                parts.append("<li>")
        else:
            parts.append(_OPEN_TAGS[node.kind])

    html: str = "".join(parts)
    logger.trace("Rendered %d top-level node(s) as HTML (%d chars)", len(nodes), len(html))
    return html
