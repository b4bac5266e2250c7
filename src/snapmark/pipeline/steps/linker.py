# topmark:header:start
#
#   project      : SnapMark
#   file         : linker.py
#   file_relpath : src/snapmark/pipeline/steps/linker.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""URL extractor step for the SnapMark pipeline.

Finds ``http://``, ``https://`` and ``mailto:`` URLs inside text nodes and
splits each text node into the text before the URL, a `URL` node and the text
after it. The text after a URL is searched again, so every URL in a text run
is linked. Existing `URL` nodes are not descended into.

A URL extends over URL characters (see `snapmark.core.chars.is_url_char`)
and stops before a ``)`` that has no matching ``(`` inside the URL, so that
``(https://example.com)`` links only the address.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from snapmark.config.logging import get_logger
from snapmark.core.chars import URL_PREFIXES, is_url_char
from snapmark.core.nodes import NodeType, Text, rebuild, wrap_text
from snapmark.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from collections.abc import Sequence

    from snapmark.config.logging import SnapmarkLogger
    from snapmark.core.nodes import Node
    from snapmark.pipeline.context import InlineContext

logger: SnapmarkLogger = get_logger(__name__)

_SKIP_KINDS: Final[frozenset[NodeType]] = frozenset({NodeType.URL})


def url_length(text: str, offset: int = 0) -> int:
    """Return the length of the URL starting at ``offset``, or 0 if there is none.

    A URL is one of the known prefixes followed by at least one URL character.
    """
    prefix: str | None = next((p for p in URL_PREFIXES if text.startswith(p, offset)), None)
    if prefix is None:
        return 0

    end: int = offset + len(prefix)
    depth: int = 0
    while end < len(text) and is_url_char(text[end]):
        c: str = text[end]
        if c == "(":
            depth += 1
        elif c == ")":
            depth -= 1
            if depth < 0:
                break
        end += 1

    if end == offset + len(prefix):
        return 0
    return end - offset


def find_url(text: str) -> tuple[int, int] | None:
    """Return ``(offset, length)`` of the first URL in ``text``, or ``None``."""
    for offset in range(len(text)):
        length: int = url_length(text, offset)
        if length:
            return offset, length
    return None


def split_urls(text: str) -> list[Node]:
    """Split ``text`` into text and `URL` nodes; empty pieces are dropped."""
    pieces: list[Node] = []
    rest: str = text
    while rest:
        match: tuple[int, int] | None = find_url(rest)
        if match is None:
            break
        offset, length = match
        if offset:
            pieces.append(Text(rest[:offset]))
        pieces.append(wrap_text(NodeType.URL, rest[offset : offset + length]))
        rest = rest[offset + length :]
    if rest:
        pieces.append(Text(rest))
    return pieces


def _link_siblings(siblings: list[Node]) -> list[Node]:
    linked: list[Node] = []
    for node in siblings:
        if isinstance(node, Text) and find_url(node.text) is not None:
            linked.extend(split_urls(node.text))
        else:
            linked.append(node)
    return linked


def extract_urls(nodes: Sequence[Node]) -> list[Node]:
    """Replace URLs in the text nodes of the tree rooted at ``nodes`` with `URL` nodes."""
    return rebuild(nodes, _link_siblings, skip=_SKIP_KINDS)


class LinkerStep(BaseStep):
    """Turn URLs inside text nodes into `URL` nodes.

    Reads/Sets:
      - ctx.nodes
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: InlineContext) -> bool:
        """Run only when there are nodes to scan.

        Args:
            ctx (InlineContext): The inline context for the current paragraph.

        Returns:
            bool: True if ``ctx.nodes`` is not empty.
        """
        return bool(ctx.nodes)

    def run(self, ctx: InlineContext) -> None:
        """Extract URLs from ``ctx.nodes``.

        Args:
            ctx (InlineContext): The inline context for the current paragraph.
        """
        ctx.nodes = extract_urls(ctx.nodes)

    def hint(self, ctx: InlineContext) -> None:
        """Count the top-level URL nodes.

        Args:
            ctx (InlineContext): The inline context for the current paragraph.
        """
        urls: int = sum(1 for node in ctx.nodes if node.kind is NodeType.URL)
        if urls:
            ctx.count("urls", urls)
            logger.trace("Linker: %d URL(s) at the top level", urls)
