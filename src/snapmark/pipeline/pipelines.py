# topmark:header:start
#
#   project      : SnapMark
#   file         : pipelines.py
#   file_relpath : src/snapmark/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Named inline pipeline variants (immutable, typed step sequences).

Overview
--------
- ``TOKENIZE``: tokenizer only (provisional tokens, for inspection)
- ``INLINE``: tokenizer → emphasis → coalescer → linker

Notes:
* Pipelines are immutable (Final[tuple[Step, ...]]) and steps are
  instantiated objects (not functions).
"""

from __future__ import annotations

from enum import Enum
from typing import Final

from snapmark.pipeline.contracts import Step

from .steps import coalescer, emphasis, linker, tokenizer

TOKENIZE_PIPELINE: Final[tuple[Step, ...]] = (
    tokenizer.TokenizerStep(),  # Split text into code spans, text and delimiter runs
)

INLINE_PIPELINE: Final[tuple[Step, ...]] = TOKENIZE_PIPELINE + (
    emphasis.EmphasisStep(),  # Pair delimiter runs into (strong) emphasis
    coalescer.CoalescerStep(),  # Merge adjacent text nodes
    linker.LinkerStep(),  # Turn URLs into URL nodes
)


class Pipeline(Enum):
    """Registry of the available inline pipelines."""

    TOKENIZE = TOKENIZE_PIPELINE
    INLINE = INLINE_PIPELINE

    @property
    def steps(self) -> tuple[Step, ...]:
        """The ordered steps of this pipeline."""
        return self.value
