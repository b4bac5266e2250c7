# topmark:header:start
#
#   project      : SnapMark
#   file         : test_console.py
#   file_relpath : tests/cli/test_console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `snapmark.cli.console.ClickConsole`."""

from __future__ import annotations

import io

from snapmark import parse
from snapmark.cli.console import ClickConsole
from snapmark.rendering import render_tree


def test_print_and_error_use_their_streams() -> None:
    """Output goes to ``out`` and errors to ``err``."""
    out = io.StringIO()
    err = io.StringIO()
    console = ClickConsole(enable_color=False, out=out, err=err)

    console.print("<p>a</p>\n", nl=False)
    console.print("tail")
    console.error("Error: boom")

    assert out.getvalue() == "<p>a</p>\ntail\n"
    assert err.getvalue() == "Error: boom\n"


def test_styled_is_plain_without_color() -> None:
    """With color off, styling returns the text unchanged."""
    console = ClickConsole(enable_color=False)

    assert console.styled("paragraph", fg="blue", bold=True) == "paragraph"


def test_styled_outline_with_color() -> None:
    """With color on, the outline carries ANSI sequences around the node kinds."""
    console = ClickConsole(enable_color=True)

    outline: str = render_tree(parse("a"), styled=console.styled)

    assert "\x1b[" in outline
    assert "paragraph" in outline
    assert "'a'" in outline
