# topmark:header:start
#
#   project      : SnapMark
#   file         : emphasis.py
#   file_relpath : src/snapmark/pipeline/steps/emphasis.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Emphasis resolver step for the SnapMark pipeline.

Pairs delimiter runs into `EMPHASIS` and `STRONG_EMPHASIS` containers.

For each closer (scanning left to right) the nearest preceding opener with the
same character is chosen. When either run can both open and close and the
two run lengths add up to a multiple of three, the closer is skipped. Two
characters are consumed from each side when both runs have more than one
left, otherwise one. Unconsumed characters stay in place as shorter runs, and
everything between the pair becomes the children of the new container.

Delimiters that remain at the end are settled into plain text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from snapmark.config.logging import get_logger
from snapmark.core.nodes import Container, NodeType
from snapmark.pipeline.steps.base import BaseStep
from snapmark.pipeline.tokens import Delimiter, settle

if TYPE_CHECKING:
    from snapmark.config.logging import SnapmarkLogger
    from snapmark.core.nodes import Node
    from snapmark.pipeline.context import InlineContext
    from snapmark.pipeline.tokens import Token

logger: SnapmarkLogger = get_logger(__name__)


def _find_opener(tokens: list[Token], end: int, char: str) -> int:
    start: int = end - 1
    while start >= 0:
        token: Token = tokens[start]
        if isinstance(token, Delimiter) and token.can_open and token.char == char:
            return start
        start -= 1
    return -1


def resolve_emphasis(tokens: list[Token]) -> list[Node]:
    """Match delimiter runs in ``tokens`` and return the resolved nodes.

    Args:
        tokens (list[Token]): Tokenizer output; not modified.

    Returns:
        list[Node]: Nodes with emphasis containers in place and leftover
            delimiters settled into text.
    """
    work: list[Token] = list(tokens)
    end: int = 0
    while end < len(work):
        closer: Token = work[end]
        if not isinstance(closer, Delimiter) or not closer.can_close:
            end += 1
            continue

        start: int = _find_opener(work, end, closer.char)
        if start < 0:
            end += 1
            continue
        opener: Token = work[start]
        assert isinstance(opener, Delimiter)

        if (opener.both_ways or closer.both_ways) and (opener.length + closer.length) % 3 == 0:
            end += 1
            continue

        width: int = 2 if opener.length > 1 and closer.length > 1 else 1
        kind: NodeType = NodeType.STRONG_EMPHASIS if width == 2 else NodeType.EMPHASIS
        container = Container(kind, tuple(settle(t) for t in work[start + 1 : end]))

        replacement: list[Token] = []
        left: Delimiter | None = opener.shrink(width)
        if left is not None:
            replacement.append(left)
        replacement.append(container)
        right: Delimiter | None = closer.shrink(width)
        if right is not None:
            replacement.append(right)

        work[start : end + 1] = replacement
        # Resume right after the opener's position.
        end = start + 1

    return [settle(t) for t in work]


class EmphasisStep(BaseStep):
    """Resolve delimiter runs into emphasis containers.

    Reads:
      - ctx.tokens

    Sets:
      - ctx.nodes
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def run(self, ctx: InlineContext) -> None:
        """Resolve ``ctx.tokens`` into ``ctx.nodes``.

        Args:
            ctx (InlineContext): The inline context for the current paragraph.
        """
        ctx.nodes = resolve_emphasis(ctx.tokens)

    def hint(self, ctx: InlineContext) -> None:
        """Count the emphasis containers created at the top level.

        Args:
            ctx (InlineContext): The inline context for the current paragraph.
        """
        for node in ctx.nodes:
            if node.kind is NodeType.EMPHASIS:
                ctx.count("emphasis")
            elif node.kind is NodeType.STRONG_EMPHASIS:
                ctx.count("strong")
