# topmark:header:start
#
#   project      : SnapMark
#   file         : tokenizer.py
#   file_relpath : src/snapmark/pipeline/steps/tokenizer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Inline tokenizer step for the SnapMark pipeline.

This step scans the paragraph text left to right and writes a flat list of
provisional tokens to ``ctx.tokens``:

  * code spans (a run of backticks closed by a run of the same length) become
    `CODE_SPAN` nodes whose text is stripped and whitespace-collapsed; an
    unclosed run of backticks is literal text;
  * a backslash before ASCII punctuation yields that character as text;
  * runs of ``*`` or ``_`` become `Delimiter` tokens, classified with the
    CommonMark left/right flanking rules;
  * everything else is plain text, with each whitespace run collapsed to a
    single space unless ``preserve_whitespace`` is set.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from snapmark.config.logging import get_logger
from snapmark.core.chars import (
    EMPHASIS_CHARS,
    char_at,
    collapse_whitespace,
    is_punctuation,
    is_space,
    punctuation_at,
    strip_collapse,
)
from snapmark.core.nodes import NodeType, Text, wrap_text
from snapmark.pipeline.steps.base import BaseStep
from snapmark.pipeline.tokens import Delimiter

if TYPE_CHECKING:
    from snapmark.config.logging import SnapmarkLogger
    from snapmark.pipeline.context import InlineContext
    from snapmark.pipeline.tokens import Token

logger: SnapmarkLogger = get_logger(__name__)

BACKTICK: Final[str] = "`"
BACKSLASH: Final[str] = "\\"


def run_length(text: str, index: int) -> int:
    """Return the length of the run of ``text[index]`` starting at ``index``."""
    end: int = index
    while end < len(text) and text[end] == text[index]:
        end += 1
    return end - index


def is_left_flanking(text: str, start: int, end: int) -> bool:
    """Return True if the delimiter run ``text[start:end]`` is left-flanking.

    The run must be followed by a non-whitespace character, and either that
    character is not punctuation, or the run is preceded by the start of the
    text, whitespace or punctuation.
    """
    after: str = char_at(text, end)
    if not after or is_space(after):
        return False
    if not is_punctuation(after):
        return True
    before: str = char_at(text, start - 1)
    return not before or is_space(before) or is_punctuation(before)


def is_right_flanking(text: str, start: int, end: int) -> bool:
    """Return True if the delimiter run ``text[start:end]`` is right-flanking.

    The run must be preceded by a non-whitespace character, and either that
    character is not punctuation, or the run is followed by the end of the
    text, whitespace or punctuation.
    """
    before: str = char_at(text, start - 1)
    if not before or is_space(before):
        return False
    if not is_punctuation(before):
        return True
    after: str = char_at(text, end)
    return not after or is_space(after) or is_punctuation(after)


def make_delimiter(text: str, start: int, end: int) -> Delimiter:
    """Classify the delimiter run ``text[start:end]``.

    ``*`` may open when left-flanking and close when right-flanking. ``_`` is
    stricter inside words: it only opens when it is not also right-flanking
    (or is preceded by punctuation), and only closes when it is not also
    left-flanking (or is followed by punctuation).
    """
    char: str = text[start]
    left: bool = is_left_flanking(text, start, end)
    right: bool = is_right_flanking(text, start, end)
    if char == "_":
        can_open: bool = left and (not right or punctuation_at(text, start - 1))
        can_close: bool = right and (not left or punctuation_at(text, end))
    else:
        can_open = left
        can_close = right
    return Delimiter(char=char, length=end - start, can_open=can_open, can_close=can_close)


def find_code_span_end(text: str, index: int, size: int) -> int | None:
    """Return the start of the backtick run of length ``size`` closing a code span.

    Runs of a different length are skipped as a whole.
    """
    end: int = index
    while end < len(text):
        if text[end] != BACKTICK:
            end += 1
            continue
        count: int = run_length(text, end)
        if count == size:
            return end
        end += count
    return None


def is_escape(text: str, index: int) -> bool:
    """Return True if ``text[index]`` is a backslash escaping ASCII punctuation."""
    return text[index] == BACKSLASH and punctuation_at(text, index + 1)


def tokenize(text: str, *, preserve_whitespace: bool = False) -> list[Token]:
    """Split paragraph ``text`` into provisional inline tokens.

    Args:
        text (str): Stripped paragraph text.
        preserve_whitespace (bool): Keep whitespace runs of plain text as is.

    Returns:
        list[Token]: Text and code-span nodes interleaved with delimiter runs.
    """
    tokens: list[Token] = []
    i: int = 0
    while i < len(text):
        c: str = text[i]

        if c == BACKTICK:
            size: int = run_length(text, i)
            close: int | None = find_code_span_end(text, i + size, size)
            if close is None:
                tokens.append(Text(text[i : i + size]))
                i += size
            else:
                code: str = strip_collapse(text[i + size : close])
                tokens.append(wrap_text(NodeType.CODE_SPAN, code))
                i = close + size
            continue

        if is_escape(text, i):
            tokens.append(Text(text[i + 1]))
            i += 2
            continue

        if c in EMPHASIS_CHARS:
            end: int = i + run_length(text, i)
            tokens.append(make_delimiter(text, i, end))
            i = end
            continue

        end = i + 1
        while end < len(text) and not (
            text[end] in EMPHASIS_CHARS or text[end] == BACKTICK or is_escape(text, end)
        ):
            end += 1
        chunk: str = text[i:end]
        tokens.append(Text(chunk if preserve_whitespace else collapse_whitespace(chunk)))
        i = end

    return tokens


class TokenizerStep(BaseStep):
    """Split the paragraph text into provisional inline tokens.

    Reads:
      - ctx.text, ctx.config.preserve_whitespace

    Sets:
      - ctx.tokens
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: InlineContext) -> bool:
        """Tokenize only non-empty text.

        Args:
            ctx (InlineContext): The inline context for the current paragraph.

        Returns:
            bool: True if there is text to tokenize.
        """
        return bool(ctx.text)

    def run(self, ctx: InlineContext) -> None:
        """Tokenize ``ctx.text`` into ``ctx.tokens``.

        Args:
            ctx (InlineContext): The inline context for the current paragraph.
        """
        ctx.tokens = tokenize(ctx.text, preserve_whitespace=ctx.config.preserve_whitespace)

    def hint(self, ctx: InlineContext) -> None:
        """Count tokens and delimiter runs.

        Args:
            ctx (InlineContext): The inline context for the current paragraph.
        """
        delimiters: int = sum(1 for t in ctx.tokens if isinstance(t, Delimiter))
        ctx.count("tokens", len(ctx.tokens))
        ctx.count("delimiters", delimiters)
        logger.trace("Tokenizer: %d token(s), %d delimiter run(s)", len(ctx.tokens), delimiters)
