# topmark:header:start
#
#   project      : SnapMark
#   file         : console_api.py
#   file_relpath : src/snapmark/cli_shared/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output surface shared by SnapMark commands and renderers.

Commands print parse results and banners through `ConsoleLike.print`, errors
go through `ConsoleLike.error`, and `ConsoleLike.styled` is handed to
`snapmark.rendering.render_tree` to color the outline.
"""

from __future__ import annotations

from typing import Any, Protocol


class ConsoleLike(Protocol):
    """What a SnapMark command needs from its console."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write rendered output or a banner line to stdout."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write a `snapmark.cli.errors.SnapmarkError` message to stderr."""
        ...

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` with terminal styling, or unchanged when color is off."""
        ...
