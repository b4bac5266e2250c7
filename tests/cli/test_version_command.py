# topmark:header:start
#
#   project      : SnapMark
#   file         : test_version_command.py
#   file_relpath : tests/cli/test_version_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the `version` command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from snapmark.constants import SNAPMARK_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli

if TYPE_CHECKING:
    from click.testing import Result


def test_version_outputs_plain_version() -> None:
    """It should print just the version string by default."""
    result: Result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)
    assert result.output.strip() == SNAPMARK_VERSION


def test_version_verbose_shows_grammar() -> None:
    """With ``-v`` it prints a banner and the markup grammar version."""
    result: Result = run_cli(["--no-color", "-v", "version"])

    assert_SUCCESS(result)
    assert "SnapMark version:" in result.output
    assert SNAPMARK_VERSION in result.output
    assert "markup grammar: v0" in result.output


def test_version_json() -> None:
    """``--format json`` emits a JSON object."""
    result: Result = run_cli(["version", "--format", "json"])

    assert_SUCCESS(result)
    assert json.loads(result.output) == {"version": SNAPMARK_VERSION, "markdown_version": 0}
