# topmark:header:start
#
#   project      : SnapMark
#   file         : test_tokenizer.py
#   file_relpath : tests/pipeline/test_tokenizer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the inline tokenizer step."""

from __future__ import annotations

from snapmark.core.nodes import NodeType, Text, wrap_text
from snapmark.pipeline.context import InlineContext
from snapmark.pipeline.steps.tokenizer import (
    TokenizerStep,
    find_code_span_end,
    is_left_flanking,
    is_right_flanking,
    make_delimiter,
    run_length,
    tokenize,
)
from snapmark.pipeline.tokens import Delimiter
from tests.conftest import make_config, parametrize


def test_run_length() -> None:
    """Runs are counted from the given index."""
    assert run_length("**a", 0) == 2
    assert run_length("a```", 1) == 3
    assert run_length("x", 0) == 1


@parametrize(
    ("text", "start", "end", "left", "right"),
    [
        ("*foo", 0, 1, True, False),
        ("foo*", 3, 4, False, True),
        ("a*b", 1, 2, True, True),
        ("a * b", 2, 3, False, False),
        ('a*"foo"', 1, 2, False, True),
        ('*"foo"', 0, 1, True, False),
        ("(*foo", 1, 2, True, False),
    ],
)
def test_flanking(text: str, start: int, end: int, left: bool, right: bool) -> None:
    """Flanking depends on the neighbouring whitespace and punctuation."""
    assert is_left_flanking(text, start, end) is left
    assert is_right_flanking(text, start, end) is right


def test_underscore_inside_word_neither_opens_nor_closes() -> None:
    """Intraword ``_`` runs are inert."""
    delim: Delimiter = make_delimiter("foo_bar", 3, 4)
    assert delim == Delimiter("_", 1, can_open=False, can_close=False)


def test_star_inside_word_opens_and_closes() -> None:
    """Intraword ``*`` runs may do both."""
    delim: Delimiter = make_delimiter("foo*bar", 3, 4)
    assert delim.both_ways


def test_underscore_after_punctuation_opens() -> None:
    """``_`` that is both flanking still opens after punctuation."""
    assert make_delimiter("-_(bar", 1, 2).can_open


def test_find_code_span_end_skips_other_run_lengths() -> None:
    """Closing runs must have the same length."""
    assert find_code_span_end("`foo``bar`", 1, 1) == 9
    assert find_code_span_end("``foo`bar", 2, 2) is None


def test_tokenize_plain_text_collapses_whitespace() -> None:
    """Plain runs collapse unless whitespace is preserved."""
    assert tokenize("a  b\n c") == [Text("a b c")]
    assert tokenize("a  b", preserve_whitespace=True) == [Text("a  b")]


def test_tokenize_code_span() -> None:
    """Code spans are strip-collapsed even when whitespace is preserved."""
    assert tokenize("x `` a  b `` y", preserve_whitespace=True) == [
        Text("x "),
        wrap_text(NodeType.CODE_SPAN, "a b"),
        Text(" y"),
    ]


def test_tokenize_unclosed_backticks_are_text() -> None:
    """An unclosed run of backticks stays literal."""
    assert tokenize("``foo`") == [Text("``"), Text("foo"), Text("`")]


def test_tokenize_escape() -> None:
    """A backslash before ASCII punctuation yields the character."""
    assert tokenize("\\*a") == [Text("*"), Text("a")]
    assert tokenize("\\a") == [Text("\\a")]


def test_tokenize_trailing_backslash_is_text() -> None:
    """A backslash at the end of the text is literal."""
    assert tokenize("a\\") == [Text("a\\")]


def test_tokenize_delimiters() -> None:
    """Delimiter runs are emitted with their classification."""
    assert tokenize("**a*") == [
        Delimiter("*", 2, can_open=True, can_close=False),
        Text("a"),
        Delimiter("*", 1, can_open=False, can_close=True),
    ]


def test_step_sets_tokens_and_stats() -> None:
    """The step writes ``ctx.tokens`` and counts delimiter runs."""
    ctx = InlineContext.bootstrap(text="*a* b", config=make_config())
    TokenizerStep()(ctx)
    assert len(ctx.tokens) == 4
    assert ctx.stats == {"tokens": 4, "delimiters": 2}
    assert [s.name for s in ctx.steps] == ["TokenizerStep"]


def test_step_skips_empty_text() -> None:
    """Nothing is tokenized for an empty paragraph."""
    ctx = InlineContext.bootstrap(text="", config=make_config())
    TokenizerStep()(ctx)
    assert ctx.tokens == []
    assert ctx.stats == {"tokens": 0, "delimiters": 0}
