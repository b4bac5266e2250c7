# topmark:header:start
#
#   project      : SnapMark
#   file         : version.py
#   file_relpath : src/snapmark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SnapMark `version` command.

Prints the current SnapMark version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from snapmark.cli.cmd_common import get_effective_verbosity
from snapmark.constants import SNAPMARK_VERSION
from snapmark.core.versions import LATEST_VERSION

if TYPE_CHECKING:
    from snapmark.cli_shared.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of SnapMark.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    help="Output format (text, json).",
)
def version_command(*, output_format: str = "text") -> None:
    """Show the current version of SnapMark.

    Args:
        output_format (str): ``text`` (default) or ``json``.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    # Determine effective program-output verbosity for gating extra details
    vlevel = get_effective_verbosity(ctx)

    if output_format.lower() == "json":
        payload: dict[str, object] = {
            "version": SNAPMARK_VERSION,
            "markdown_version": int(LATEST_VERSION),
        }
        console.print(json.dumps(payload))
    elif vlevel > 0:
        console.print(console.styled("SnapMark version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(SNAPMARK_VERSION, bold=True)}")
        console.print(f"    markup grammar: v{int(LATEST_VERSION)}")
    else:
        console.print(console.styled(SNAPMARK_VERSION, bold=True))
