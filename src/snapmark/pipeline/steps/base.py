# topmark:header:start
#
#   project      : SnapMark
#   file         : base.py
#   file_relpath : src/snapmark/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for class-based inline pipeline steps.

The runner invokes steps as *callables*. `BaseStep` implements the common
lifecycle:

    ctx = step(ctx)  # internally: may_proceed → run? → hint
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from snapmark.config.logging import get_logger

if TYPE_CHECKING:
    from snapmark.config.logging import SnapmarkLogger
    from snapmark.pipeline.context import InlineContext

logger: SnapmarkLogger = get_logger(__name__)


@dataclass
class BaseStep:
    """Reusable foundation for inline pipeline steps.

    Subclass this to implement a concrete step by overriding ``may_proceed()``,
    ``run()``, and optionally ``hint()``. Do not override ``__call__``.

    Attributes:
        name (str): Stable step identifier for logs/tracing.
    """

    name: str

    def __call__(self, ctx: "InlineContext") -> "InlineContext":
        """Invoke the step lifecycle: gate → run (if allowed) → hint.

        Args:
            ctx (InlineContext): The mutable inline context for the current paragraph.

        Returns:
             InlineContext: The same context instance after mutation/hints.
        """
        ctx.steps.append(self)

        if self.may_proceed(ctx):
            logger.debug("BaseStep: pipeline step %s - running", self.name)
            self.run(ctx)
        else:
            logger.debug("BaseStep: pipeline step %s may not proceed", self.name)

        self.hint(ctx)
        return ctx

    def may_proceed(self, ctx: "InlineContext") -> bool:
        """Return whether the step should run given the current context.

        Default: ``True`` (always run).

        Args:
            ctx (InlineContext): The mutable inline context.

        Returns:
            bool: True to run ``run()``, False to skip.
        """
        return True

    def run(self, ctx: "InlineContext") -> None:
        """Perform the step's primary work, mutating ``ctx`` in place.

        Args:
            ctx (InlineContext): The mutable inline context.
        """
        pass

    def hint(self, ctx: "InlineContext") -> None:
        """Record counters on ``ctx`` (optional).

        Args:
            ctx (InlineContext): The mutable inline context.
        """
        pass
