# topmark:header:start
#
#   project      : SnapMark
#   file         : options.py
#   file_relpath : src/snapmark/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the SnapMark CLI.

This module centralizes reusable options (verbosity, color, config, parser
options) and their resolution logic, so commands and groups can stay thin.
The helpers here are Click-aware.
"""

from __future__ import annotations

from typing import Callable, ParamSpec, TypeVar

import click

from snapmark.cli.cli_types import EnumChoiceParam
from snapmark.cli.errors import SnapmarkUsageError
from snapmark.cli_shared.color import ColorMode
from snapmark.config.logging import get_logger
from snapmark.core.versions import MarkdownVersion
from snapmark.rendering.formats import OutputFormat

P = ParamSpec("P")
R = TypeVar("R")

logger = get_logger(__name__)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from the ``-v`` and ``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int: ``-1`` when quiet, ``0`` by default, ``1`` or ``2`` when verbose.

    Raises:
        SnapmarkUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise SnapmarkUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return min(verbose_count, 2)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress banners and summaries.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds ``--config`` and ``--no-config`` options to a command.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function.
    """
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore snapmark.toml and pyproject.toml (only use defaults).",
    )(f)
    f = click.option(
        "--config",
        "config_file",
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        default=None,
        help="Config file to load instead of the discovered one.",
    )(f)
    return f


def common_parser_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds the parser and output options to a command.

    Every option defaults to ``None`` so that unset flags leave the configured
    value untouched.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function.
    """
    f = click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=None,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)
    f = click.option(
        "--preserve-whitespace/--collapse-whitespace",
        "preserve_whitespace",
        default=None,
        help="Keep or collapse whitespace runs inside plain text.",
    )(f)
    f = click.option(
        "--max-depth",
        "max_depth",
        type=click.IntRange(min=1),
        default=None,
        metavar="N",
        help="Deepest list nesting recognised.",
    )(f)
    f = click.option(
        "--markdown-version",
        "markdown_version",
        type=click.Choice([str(int(v)) for v in MarkdownVersion]),
        default=None,
        help="Markup grammar version.",
    )(f)
    return f
