# topmark:header:start
#
#   project      : SnapMark
#   file         : coalescer.py
#   file_relpath : src/snapmark/pipeline/steps/coalescer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Text coalescer step for the SnapMark pipeline.

Merges every run of adjacent `Text` siblings into a single `Text`, at every
level of the inline tree.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from snapmark.config.logging import get_logger
from snapmark.core.nodes import Text, rebuild
from snapmark.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from collections.abc import Sequence

    from snapmark.config.logging import SnapmarkLogger
    from snapmark.core.nodes import Node
    from snapmark.pipeline.context import InlineContext

logger: SnapmarkLogger = get_logger(__name__)


def merge_adjacent_text(siblings: list[Node]) -> list[Node]:
    """Return ``siblings`` with each run of `Text` nodes joined into one."""
    merged: list[Node] = []
    pending: list[str] = []
    run_start: Text | None = None
    for node in siblings:
        if isinstance(node, Text):
            if run_start is None:
                run_start = node
            pending.append(node.text)
            continue
        if run_start is not None:
            merged.append(run_start if len(pending) == 1 else Text("".join(pending)))
            run_start = None
            pending = []
        merged.append(node)
    if run_start is not None:
        merged.append(run_start if len(pending) == 1 else Text("".join(pending)))
    return merged


def coalesce_text(nodes: Sequence[Node]) -> list[Node]:
    """Merge adjacent `Text` siblings throughout the tree rooted at ``nodes``."""
    return rebuild(nodes, merge_adjacent_text)


class CoalescerStep(BaseStep):
    """Merge adjacent text nodes.

    Reads/Sets:
      - ctx.nodes
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: InlineContext) -> bool:
        """Run only when there are nodes to merge.

        Args:
            ctx (InlineContext): The inline context for the current paragraph.

        Returns:
            bool: True if ``ctx.nodes`` is not empty.
        """
        return bool(ctx.nodes)

    def run(self, ctx: InlineContext) -> None:
        """Coalesce ``ctx.nodes`` in place.

        Args:
            ctx (InlineContext): The inline context for the current paragraph.
        """
        ctx.nodes = coalesce_text(ctx.nodes)
