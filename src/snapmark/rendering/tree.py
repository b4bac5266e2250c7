# topmark:header:start
#
#   project      : SnapMark
#   file         : tree.py
#   file_relpath : src/snapmark/rendering/tree.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Outline rendering of a parsed description.

One line per node, indented two spaces per nesting level. Containers show
their kind; leaves show ``text`` followed by the quoted payload::

    paragraph
      text 'Hello '
      emphasis
        text 'world'

When a ``styled`` callable (such as `ConsoleLike.styled`) is given, node kinds
and payloads are styled through it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from snapmark.core.nodes import NodeType, Text, walk

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from snapmark.core.nodes import Node

INDENT: Final[str] = "  "

# click.style keyword arguments per node kind.
_KIND_STYLES: Final[dict[NodeType, dict[str, Any]]] = {
    NodeType.TEXT: {"dim": True},
    NodeType.PARAGRAPH: {"fg": "blue", "bold": True},
    NodeType.UNORDERED_LIST: {"fg": "magenta", "bold": True},
    NodeType.LIST_ITEM: {"fg": "magenta"},
    NodeType.CODE_BLOCK: {"fg": "cyan", "bold": True},
    NodeType.CODE_SPAN: {"fg": "cyan"},
    NodeType.EMPHASIS: {"fg": "yellow"},
    NodeType.STRONG_EMPHASIS: {"fg": "yellow", "bold": True},
    NodeType.URL: {"fg": "green", "underline": True},
}


def _plain(text: str, **_style: Any) -> str:
    return text


def render_tree(
    nodes: Sequence[Node],
    styled: Callable[..., str] | None = None,
) -> str:
    """Render ``nodes`` as an indented outline.

    Args:
        nodes (Sequence[Node]): Top-level nodes returned by the parser.
        styled (Callable[..., str] | None): Optional styling function taking the
            text and `click.style` keyword arguments.

    Returns:
        str: The outline, one node per line, without a trailing newline.
    """
    style: Callable[..., str] = styled or _plain
    lines: list[str] = []
    depth: int = 0
    for node, entering in walk(nodes):
        if not entering:
            depth -= 1
            continue
        label: str = style(node.kind.value, **_KIND_STYLES[node.kind])
        if isinstance(node, Text):
            lines.append(f"{INDENT * depth}{label} {style(repr(node.text), fg='white')}")
        else:
            lines.append(f"{INDENT * depth}{label}")
            depth += 1
    return "\n".join(lines)
