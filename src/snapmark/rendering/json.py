# topmark:header:start
#
#   project      : SnapMark
#   file         : json.py
#   file_relpath : src/snapmark/rendering/json.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON rendering of a parsed description.

Each node becomes an object with a ``kind`` key (the `NodeType` value) and
either a ``text`` key (leaves) or a ``children`` list (containers):

    [{"kind": "paragraph", "children": [{"kind": "text", "text": "Hello"}]}]
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from snapmark.core.nodes import Text, walk

if TYPE_CHECKING:
    from collections.abc import Sequence

    from snapmark.core.nodes import Node


def nodes_to_dicts(nodes: Sequence[Node]) -> list[dict[str, Any]]:
    """Convert ``nodes`` into JSON-able dictionaries.

    Args:
        nodes (Sequence[Node]): Top-level nodes returned by the parser.

    Returns:
        list[dict[str, Any]]: One dictionary per top-level node.
    """
    # One list of finished siblings per open container, plus the root list.
    stack: list[list[dict[str, Any]]] = [[]]
    for node, entering in walk(nodes):
        if isinstance(node, Text):
            stack[-1].append({"kind": node.kind.value, "text": node.text})
        elif entering:
            stack.append([])
        else:
            children: list[dict[str, Any]] = stack.pop()
            stack[-1].append({"kind": node.kind.value, "children": children})
    return stack[0]


def render_json(nodes: Sequence[Node], *, indent: int | None = 2) -> str:
    """Serialize ``nodes`` as a JSON document.

    Args:
        nodes (Sequence[Node]): Top-level nodes returned by the parser.
        indent (int | None): Indentation passed to `json.dumps`; ``None`` for
            compact output.

    Returns:
        str: The JSON text.
    """
    return json.dumps(nodes_to_dicts(nodes), indent=indent, ensure_ascii=False)
