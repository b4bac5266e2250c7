# topmark:header:start
#
#   project      : SnapMark
#   file         : contracts.py
#   file_relpath : src/snapmark/pipeline/contracts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type contracts for inline pipeline steps.

Steps are instantiated objects that are *callable*; the runner invokes them as
`step(ctx)` where `ctx` is an `InlineContext`.

Lifecycle
---------
1) The runner calls ``step.may_proceed(ctx)`` to gate execution.
2) If allowed, it calls ``step.run(ctx)`` (which mutates ``ctx`` in place).
3) Regardless, it calls ``step.hint(ctx)`` so a step can record counters in
   ``ctx.stats``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .context import InlineContext


class Step(Protocol):
    """Protocol for a single inline pipeline step.

    Implementations typically subclass `snapmark.pipeline.steps.base.BaseStep`.
    """

    name: str

    def may_proceed(self, ctx: "InlineContext") -> bool:
        """Return whether the step should run given the current context.

        Args:
            ctx (InlineContext): The mutable inline context.

        Returns:
            bool: True if the step may run; False to skip this step.
        """
        ...

    def run(self, ctx: "InlineContext") -> None:
        """Execute the step, mutating the context in place.

        Implementations must not raise for any paragraph text.

        Args:
            ctx (InlineContext): The mutable inline context.
        """
        ...

    def hint(self, ctx: "InlineContext") -> None:
        """Record non-binding counters on the context.

        Args:
            ctx (InlineContext): The mutable inline context.
        """
        ...

    def __call__(self, ctx: "InlineContext") -> "InlineContext":
        """Run the step lifecycle: gate → run (optional) → hint.

        Args:
            ctx (InlineContext): The mutable inline context.

        Returns:
            InlineContext: The same context object, for chaining.
        """
        ...
