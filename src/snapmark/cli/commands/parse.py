# topmark:header:start
#
#   project      : SnapMark
#   file         : parse.py
#   file_relpath : src/snapmark/cli/commands/parse.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SnapMark `parse` command.

Reads a snap description from a file (or STDIN), parses it and prints the
result as an outline, HTML, JSON or plain text.

Input resolution:
  * ``PATH`` names a UTF-8 text file; ``-`` (the default) reads STDIN.

Configuration resolution:
  * Built-in defaults, then ``--config FILE`` or the discovered
    ``snapmark.toml`` / ``[tool.snapmark]``, then the command-line flags.

Exit status:
  * 0 on success; see `snapmark.core.exit_codes.ExitCode` for the failure codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from snapmark.cli.cmd_common import (
    STDIN_SENTINEL,
    build_config,
    get_effective_verbosity,
    read_input,
)
from snapmark.cli.options import common_config_options, common_parser_options
from snapmark.config.logging import get_logger
from snapmark.parser import MarkdownParser
from snapmark.rendering import (
    OutputFormat,
    render_html,
    render_json,
    render_text,
    render_tree,
)

if TYPE_CHECKING:
    from snapmark.cli.cli_types import ArgsNamespace
    from snapmark.cli_shared.console_api import ConsoleLike
    from snapmark.config.logging import SnapmarkLogger
    from snapmark.config.model import ParserConfig
    from snapmark.core.nodes import Node

logger: SnapmarkLogger = get_logger(__name__)


def render(nodes: list[Node], output_format: OutputFormat, console: ConsoleLike) -> str:
    """Render ``nodes`` in ``output_format``; the outline is styled through ``console``."""
    if output_format == OutputFormat.HTML:
        return render_html(nodes)
    if output_format == OutputFormat.JSON:
        return render_json(nodes)
    if output_format == OutputFormat.TEXT:
        return render_text(nodes)
    return render_tree(nodes, styled=console.styled)


@click.command(
    name="parse",
    help="Parse a snap description and print the resulting markup tree.",
)
@click.argument(
    "path",
    required=False,
    default=STDIN_SENTINEL,
    type=click.Path(allow_dash=True),
)
@common_config_options
@common_parser_options
def parse_command(
    *,
    path: str,
    config_file: str | None,
    no_config: bool,
    output_format: OutputFormat | None,
    preserve_whitespace: bool | None,
    max_depth: int | None,
    markdown_version: str | None,
) -> None:
    """Parse a description and print it.

    Args:
        path (str): Input file, or ``-`` for STDIN.
        config_file (str | None): Explicit config file.
        no_config (bool): Skip config file discovery.
        output_format (OutputFormat | None): Output format override.
        preserve_whitespace (bool | None): Whitespace handling override.
        max_depth (int | None): List nesting limit override.
        markdown_version (str | None): Markup grammar version override.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    vlevel = get_effective_verbosity(ctx)

    args: ArgsNamespace = {
        "version": int(markdown_version) if markdown_version is not None else None,
        "preserve_whitespace": preserve_whitespace,
        "max_depth": max_depth,
        "output_format": output_format,
    }
    config: ParserConfig = build_config(config_file=config_file, no_config=no_config, args=args)

    text: str = read_input(path)
    nodes: list[Node] = MarkdownParser(config.version, config=config).parse(text)
    logger.info("Parsed %s into %d block(s)", path, len(nodes))

    fmt: OutputFormat = config.output_format
    machine: bool = fmt in (OutputFormat.HTML, OutputFormat.JSON)
    if vlevel > 0 and not machine:
        sources: str = ", ".join(str(p) for p in config.config_files) or "built-in defaults"
        console.print(console.styled(f"Config: {sources}", dim=True))
        console.print(
            console.styled(
                f"{'<stdin>' if path == STDIN_SENTINEL else path}: {len(nodes)} block(s)",
                bold=True,
                underline=True,
            )
        )

    rendered: str = render(nodes, fmt, console)
    if not rendered:
        return
    if fmt == OutputFormat.HTML:
        # The fragment already ends with a newline.
        console.print(rendered, nl=False)
    else:
        console.print(rendered)
