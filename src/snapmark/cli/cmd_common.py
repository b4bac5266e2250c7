# topmark:header:start
#
#   project      : SnapMark
#   file         : cmd_common.py
#   file_relpath : src/snapmark/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by SnapMark commands.

- `get_effective_verbosity`: program-output verbosity stored on the context.
- `build_config`: defaults, config file and CLI flags merged into a `ParserConfig`.
- `read_input`: the description text of a path or of STDIN.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

from snapmark.cli.errors import (
    SnapmarkConfigError,
    SnapmarkEncodingError,
    SnapmarkFileNotFoundError,
    SnapmarkIOError,
    SnapmarkPermissionDeniedError,
)
from snapmark.config.logging import get_logger
from snapmark.config.model import ConfigError, MutableParserConfig

if TYPE_CHECKING:
    from snapmark.cli.cli_types import ArgsNamespace
    from snapmark.config.logging import SnapmarkLogger
    from snapmark.config.model import ParserConfig

logger: SnapmarkLogger = get_logger(__name__)

STDIN_SENTINEL = "-"


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity for this command (0 when unset)."""
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    return int(obj.get("verbosity_level", 0))


def build_config(
    *,
    config_file: str | None,
    no_config: bool,
    args: ArgsNamespace,
) -> ParserConfig:
    """Resolve the effective parser configuration for a command.

    Args:
        config_file (str | None): Explicit ``--config`` path.
        no_config (bool): Whether ``--no-config`` was passed.
        args (ArgsNamespace): CLI overrides; ``None`` values are ignored.

    Returns:
        ParserConfig: The frozen configuration.

    Raises:
        SnapmarkConfigError: If the configuration holds invalid values.
    """
    try:
        draft: MutableParserConfig = MutableParserConfig.load_merged(
            config_file=Path(config_file) if config_file else None,
            no_config=no_config,
        )
        config: ParserConfig = draft.apply_cli_args(args).freeze()
    except ConfigError as exc:
        raise SnapmarkConfigError(str(exc)) from exc
    logger.debug("Effective config: %s", config)
    return config


def read_input(path: str) -> str:
    """Return the UTF-8 text of ``path``, or of STDIN for ``-``.

    Args:
        path (str): A file path or ``-``.

    Returns:
        str: The decoded text.

    Raises:
        SnapmarkFileNotFoundError: If the file does not exist.
        SnapmarkPermissionDeniedError: If the file cannot be read for lack of permissions.
        SnapmarkIOError: If reading fails otherwise (e.g. ``path`` is a directory).
        SnapmarkEncodingError: If the content is not valid UTF-8.
    """
    source: str = "<stdin>" if path == STDIN_SENTINEL else path
    try:
        if path == STDIN_SENTINEL:
            data: bytes = sys.stdin.buffer.read()
        else:
            data = Path(path).read_bytes()
    except FileNotFoundError as exc:
        raise SnapmarkFileNotFoundError(f"File not found: {source}") from exc
    except PermissionError as exc:
        raise SnapmarkPermissionDeniedError(f"Permission denied: {source}") from exc
    except OSError as exc:
        raise SnapmarkIOError(f"Cannot read {source}: {exc.strerror or exc}") from exc

    try:
        text: str = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise SnapmarkEncodingError(f"{source} is not valid UTF-8: {exc.reason}") from exc
    logger.debug("Read %d character(s) from %s", len(text), source)
    return text
