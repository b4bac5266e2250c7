# topmark:header:start
#
#   project      : SnapMark
#   file         : context.py
#   file_relpath : src/snapmark/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Context for one run of the inline pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from snapmark.config.model import ParserConfig
    from snapmark.core.nodes import Node
    from snapmark.pipeline.contracts import Step
    from snapmark.pipeline.tokens import Token


@dataclass
class InlineContext:
    """State of one paragraph as it flows through the inline pipeline.

    Attributes:
        text (str): The stripped paragraph text.
        config (ParserConfig): Effective parser configuration.
        tokens (list[Token]): Provisional tokens written by the tokenizer.
        nodes (list[Node]): Resolved inline nodes; the pipeline's result.
        steps (list[Step]): Steps that have been invoked, in order.
        stats (dict[str, int]): Counters recorded by step hints.
    """

    text: str
    config: ParserConfig
    tokens: list[Token] = field(default_factory=lambda: [])
    nodes: list[Node] = field(default_factory=lambda: [])
    steps: list[Step] = field(default_factory=lambda: [])
    stats: dict[str, int] = field(default_factory=lambda: {})

    @classmethod
    def bootstrap(cls, *, text: str, config: ParserConfig) -> InlineContext:
        """Create a fresh context with no derived state.

        Args:
            text (str): Paragraph text to mark up.
            config (ParserConfig): Effective configuration to attach to the context.

        Returns:
            InlineContext: Newly created context instance.
        """
        return cls(text=text, config=config)

    def count(self, key: str, amount: int = 1) -> None:
        """Add ``amount`` to the counter ``key``."""
        self.stats[key] = self.stats.get(key, 0) + amount
