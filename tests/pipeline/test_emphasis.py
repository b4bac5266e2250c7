# topmark:header:start
#
#   project      : SnapMark
#   file         : test_emphasis.py
#   file_relpath : tests/pipeline/test_emphasis.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the emphasis resolver step."""

from __future__ import annotations

from snapmark.core.nodes import NodeType, Text
from snapmark.pipeline.context import InlineContext
from snapmark.pipeline.steps.emphasis import EmphasisStep, resolve_emphasis
from snapmark.pipeline.steps.tokenizer import tokenize
from snapmark.pipeline.tokens import Delimiter, settle
from tests.conftest import c, make_config, t


def resolve(text: str) -> list[object]:
    return list(resolve_emphasis(tokenize(text)))


def test_delimiter_shrink_and_settle() -> None:
    """Consuming characters shortens a run; an empty run disappears."""
    run = Delimiter("*", 3, can_open=True, can_close=False)
    assert run.text == "***"
    assert run.shrink(2) == Delimiter("*", 1, can_open=True, can_close=False)
    assert run.shrink(3) is None
    assert settle(run) == Text("***")
    assert settle(Text("x")) == Text("x")


def test_emphasis() -> None:
    """A single pair makes an emphasis container."""
    assert resolve("*foo*") == [c(NodeType.EMPHASIS, t("foo"))]


def test_strong_emphasis() -> None:
    """Double runs make strong emphasis."""
    assert resolve("**foo**") == [c(NodeType.STRONG_EMPHASIS, t("foo"))]


def test_triple_runs_nest_strong_inside_emphasis() -> None:
    """``***foo***`` consumes two characters first, then one."""
    assert resolve("***foo***") == [c(NodeType.EMPHASIS, c(NodeType.STRONG_EMPHASIS, t("foo")))]


def test_multiple_of_three_rule() -> None:
    """A both-ways run whose lengths add up to a multiple of three is skipped."""
    assert resolve("a***b") == [t("a"), t("***"), t("b")]
    # Only the nearest opener is tried for each closer.
    assert resolve("*foo**bar*") == [t("*"), t("foo"), t("**"), t("bar"), t("*")]


def test_leftover_opener_stays_before() -> None:
    """Unconsumed opener characters remain literal before the container."""
    assert resolve("**foo*") == [t("*"), c(NodeType.EMPHASIS, t("foo"))]


def test_leftover_closer_stays_after() -> None:
    """Unconsumed closer characters remain literal after the container."""
    assert resolve("*foo**") == [c(NodeType.EMPHASIS, t("foo")), t("*")]


def test_characters_must_match() -> None:
    """``*`` never closes ``_``."""
    assert resolve("_foo*") == [t("_"), t("foo"), t("*")]


def test_tokens_are_not_modified() -> None:
    """The input token list is left as it was."""
    tokens = tokenize("*a*")
    before = list(tokens)
    resolve_emphasis(tokens)
    assert tokens == before


def test_step_counts_top_level_containers() -> None:
    """The hint counts emphasis and strong containers at the top level."""
    ctx = InlineContext.bootstrap(text="*a* **b**", config=make_config())
    ctx.tokens = tokenize(ctx.text)
    EmphasisStep()(ctx)
    assert ctx.stats == {"emphasis": 1, "strong": 1}
    assert [n.kind for n in ctx.nodes] == [
        NodeType.EMPHASIS,
        NodeType.TEXT,
        NodeType.STRONG_EMPHASIS,
    ]
