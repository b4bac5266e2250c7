# topmark:header:start
#
#   project      : SnapMark
#   file         : test_coalescer.py
#   file_relpath : tests/pipeline/test_coalescer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the text coalescer step."""

from __future__ import annotations

from snapmark.core.nodes import NodeType
from snapmark.pipeline.context import InlineContext
from snapmark.pipeline.steps.coalescer import (
    CoalescerStep,
    coalesce_text,
    merge_adjacent_text,
)
from tests.conftest import c, make_config, t


def test_merge_adjacent_text() -> None:
    """Runs of text siblings become one node; other nodes split runs."""
    emph = c(NodeType.EMPHASIS, t("b"))
    assert merge_adjacent_text([t("a"), t("b"), emph, t("c"), t("d"), t("e")]) == [
        t("ab"),
        emph,
        t("cde"),
    ]


def test_single_text_node_is_kept() -> None:
    """A lone text node is passed through unchanged."""
    node = t("x")
    merged = merge_adjacent_text([node])
    assert merged == [node]
    assert merged[0] is node


def test_coalesce_nested() -> None:
    """Every level of the tree is coalesced."""
    tree = [t("*"), t("a"), c(NodeType.EMPHASIS, t("b"), t("_"), t("c"))]
    assert coalesce_text(tree) == [t("*a"), c(NodeType.EMPHASIS, t("b_c"))]


def test_step_skips_empty_nodes() -> None:
    """The step is a no-op when there is nothing to merge."""
    ctx = InlineContext.bootstrap(text="", config=make_config())
    CoalescerStep()(ctx)
    assert ctx.nodes == []
    assert [s.name for s in ctx.steps] == ["CoalescerStep"]


def test_step_coalesces_nodes() -> None:
    """The step rewrites ``ctx.nodes``."""
    ctx = InlineContext.bootstrap(text="ab", config=make_config())
    ctx.nodes = [t("a"), t("b")]
    CoalescerStep()(ctx)
    assert ctx.nodes == [t("ab")]
