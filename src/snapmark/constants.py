# topmark:header:start
#
#   project      : SnapMark
#   file         : constants.py
#   file_relpath : src/snapmark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SnapMark Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    SNAPMARK_VERSION: str = get_version("snapmark")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    SNAPMARK_VERSION = "0.0.0"

# Environment variable consulted by `snapmark.config.logging.resolve_env_log_level`
LOG_LEVEL_ENV_VAR: Final[str] = "SNAPMARK_LOG_LEVEL"

# Configuration discovery
CONFIG_FILE_NAME: Final[str] = "snapmark.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "tool.snapmark"

# Deepest list nesting the block splitter recognises before treating bullets as text
DEFAULT_MAX_DEPTH: Final[int] = 64

# Packaged default configuration resource
DEFAULT_TOML_CONFIG_PACKAGE: Final[str] = "snapmark.config"
DEFAULT_TOML_CONFIG_NAME: Final[str] = "snapmark-default.toml"
