# topmark:header:start
#
#   project      : SnapMark
#   file         : tokens.py
#   file_relpath : src/snapmark/pipeline/tokens.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Provisional inline tokens.

The tokenizer emits a flat list of tokens: finished `Node` values (text, code
spans) and `Delimiter` runs of ``*`` or ``_`` whose role is only decided by the
emphasis step. Delimiters never leave the pipeline: whatever is not consumed
by an emphasis match is settled into plain `Text`.
"""

from __future__ import annotations

from dataclasses import dataclass

from snapmark.core.nodes import Node, Text


@dataclass(frozen=True, slots=True)
class Delimiter:
    """A run of emphasis delimiter characters.

    Attributes:
        char (str): The delimiter character, ``*`` or ``_``.
        length (int): Number of characters left in the run (at least 1).
        can_open (bool): Whether the run may open emphasis.
        can_close (bool): Whether the run may close emphasis.
    """

    char: str
    length: int
    can_open: bool
    can_close: bool

    @property
    def text(self) -> str:
        """The literal text of the run."""
        return self.char * self.length

    @property
    def both_ways(self) -> bool:
        """Whether the run may both open and close emphasis."""
        return self.can_open and self.can_close

    def shrink(self, count: int) -> Delimiter | None:
        """Return the run with ``count`` characters consumed, or ``None`` if empty."""
        remaining: int = self.length - count
        if remaining <= 0:
            return None
        return Delimiter(self.char, remaining, self.can_open, self.can_close)

    def settle(self) -> Text:
        """Return the run as plain text."""
        return Text(self.text)


# A tokenizer output element: a finished node or a pending delimiter run.
Token = Node | Delimiter


def settle(token: Token) -> Node:
    """Return ``token`` as an output node, turning a `Delimiter` into `Text`."""
    if isinstance(token, Delimiter):
        return token.settle()
    return token
