# topmark:header:start
#
#   project      : SnapMark
#   file         : __init__.py
#   file_relpath : src/snapmark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for SnapMark.

Re-exports the configuration model. TOML I/O lives in `snapmark.config.io`,
key names in `snapmark.config.keys` and logging setup in
`snapmark.config.logging`.
"""

from __future__ import annotations

from snapmark.config.model import (
    ArgsLike,
    ConfigError,
    MutableParserConfig,
    ParserConfig,
    validate_max_depth,
)

__all__: list[str] = [
    "ArgsLike",
    "ConfigError",
    "MutableParserConfig",
    "ParserConfig",
    "validate_max_depth",
]
