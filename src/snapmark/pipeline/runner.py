# topmark:header:start
#
#   project      : SnapMark
#   file         : runner.py
#   file_relpath : src/snapmark/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run the inline pipeline over the text of one paragraph."""

from __future__ import annotations

from typing import TYPE_CHECKING

from snapmark.config.logging import get_logger
from snapmark.pipeline.context import InlineContext
from snapmark.pipeline.pipelines import Pipeline

if TYPE_CHECKING:
    from collections.abc import Sequence

    from snapmark.config.logging import SnapmarkLogger
    from snapmark.config.model import ParserConfig
    from snapmark.core.nodes import Node
    from snapmark.pipeline.contracts import Step

logger: SnapmarkLogger = get_logger(__name__)


def run(ctx: InlineContext, steps: Sequence[Step]) -> InlineContext:
    """Execute the pipeline sequentially.

    Args:
        ctx (InlineContext): Mutable inline context.
        steps (Sequence[Step]): Ordered sequence of pipeline steps.
            Each step takes and returns a context.

    Returns:
        InlineContext: The final context after all steps have run.
    """
    logger.trace("inline text: %r", ctx.text)
    for step in steps:
        ctx = step(ctx)
    logger.trace("inline stats: %s", ctx.stats)
    return ctx


def markup_inline(text: str, config: ParserConfig) -> list[Node]:
    """Return the inline nodes of paragraph ``text``.

    Args:
        text (str): Stripped paragraph text.
        config (ParserConfig): Effective parser configuration.

    Returns:
        list[Node]: The paragraph's children.
    """
    ctx: InlineContext = InlineContext.bootstrap(text=text, config=config)
    return run(ctx, Pipeline.INLINE.steps).nodes
