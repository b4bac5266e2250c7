# topmark:header:start
#
#   project      : SnapMark
#   file         : errors.py
#   file_relpath : src/snapmark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the SnapMark CLI.

Raise these exceptions in CLI commands to signal errors with standardized
messages and exit codes. They render through the project console when one is
present in the Click context, and fall back to Click's default display
otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from snapmark.core.exit_codes import ExitCode


class SnapmarkError(click.ClickException):
    """Base class for all SnapMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(self.message)

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class SnapmarkUsageError(SnapmarkError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class SnapmarkConfigError(SnapmarkError):
    """Error for configuration errors (invalid or malformed config values)."""

    exit_code = ExitCode.CONFIG_ERROR


class SnapmarkFileNotFoundError(SnapmarkError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class SnapmarkPermissionDeniedError(SnapmarkError):
    """Error for insufficient permissions to read the input."""

    exit_code = ExitCode.PERMISSION_DENIED


class SnapmarkIOError(SnapmarkError):
    """Error for I/O errors reading the input."""

    exit_code = ExitCode.IO_ERROR


class SnapmarkEncodingError(SnapmarkError):
    """Error for input that is not valid UTF-8."""

    exit_code = ExitCode.ENCODING_ERROR
