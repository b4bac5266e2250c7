# topmark:header:start
#
#   project      : SnapMark
#   file         : show_defaults.py
#   file_relpath : src/snapmark/cli/commands/show_defaults.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SnapMark `show-defaults` command.

Displays the built-in default SnapMark configuration, as bundled with the
package. Intended as a reference for users writing their own ``snapmark.toml``
or ``[tool.snapmark]`` table.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from snapmark.cli.cmd_common import get_effective_verbosity
from snapmark.config import MutableParserConfig

if TYPE_CHECKING:
    from snapmark.cli_shared.console_api import ConsoleLike


@click.command(
    name="show-defaults",
    help="Display the built-in default SnapMark configuration file.",
)
@click.option(
    "--pyproject",
    is_flag=True,
    default=False,
    help="Nest the defaults under [tool.snapmark] for pyproject.toml.",
)
def show_defaults_command(*, pyproject: bool = False) -> None:
    """Display the built-in default configuration.

    Args:
        pyproject (bool): Render the defaults as a ``pyproject.toml`` fragment.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    vlevel = get_effective_verbosity(ctx)

    if vlevel > 0:
        console.print(
            console.styled("Default SnapMark Configuration (TOML):", bold=True, underline=True)
        )
        console.print(console.styled("# === BEGIN ===", fg="cyan", dim=True))

    toml_text: str = MutableParserConfig.get_default_config_toml(pyproject=pyproject)
    console.print(console.styled(toml_text.rstrip("\n"), fg="cyan"))

    if vlevel > 0:
        console.print(console.styled("# === END ===", fg="cyan", dim=True))
