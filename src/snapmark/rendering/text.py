# topmark:header:start
#
#   project      : SnapMark
#   file         : text.py
#   file_relpath : src/snapmark/rendering/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Plain-text rendering: the literal text of a parsed description."""

from __future__ import annotations

from typing import TYPE_CHECKING

from snapmark.core.nodes import iter_text

if TYPE_CHECKING:
    from collections.abc import Sequence

    from snapmark.core.nodes import Node


def render_text(nodes: Sequence[Node]) -> str:
    """Return the concatenated text of every `Text` leaf in ``nodes``.

    Markup is dropped; no separators are inserted between blocks.
    """
    return "".join(iter_text(nodes))
