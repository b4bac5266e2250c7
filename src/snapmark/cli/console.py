# topmark:header:start
#
#   project      : SnapMark
#   file         : console.py
#   file_relpath : src/snapmark/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-backed console for the ``snapmark`` command.

`ClickConsole` is created once per invocation by `snapmark.cli.main.cli` and
stored as ``ctx.obj["console"]``. Parse results and banners go to stdout,
error messages to stderr; diagnostics stay with `logging`.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click

from snapmark.cli_shared.console_api import ConsoleLike


class ClickConsole(ConsoleLike):
    """Console writing through `click.echo`.

    Streams are looked up when the console is created, so a console built
    inside `click.testing.CliRunner.invoke` writes to the captured streams.

    Args:
        enable_color (bool): Emit ANSI styling (outline colors, red errors).
        out (TextIO | None): Stream for rendered output (defaults to `sys.stdout`).
        err (TextIO | None): Stream for errors (defaults to `sys.stderr`).
    """

    enable_color: bool
    out: TextIO
    err: TextIO

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write rendered output or a banner line.

        Args:
            text (str): Text to write; HTML output is passed with ``nl=False``
                since it already ends with a newline.
            nl (bool): Append a newline.
        """
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message in bright red."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Style ``text`` with `click.style` keywords such as ``fg``, ``bold`` or ``dim``.

        Returns:
            str: The styled text, or ``text`` itself when color is disabled.
        """
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
