# topmark:header:start
#
#   project      : SnapMark
#   file         : keys.py
#   file_relpath : src/snapmark/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for SnapMark configuration.

This module defines the string constants used when reading, writing, and
validating SnapMark configuration from TOML sources (``snapmark.toml`` and
``[tool.snapmark]`` in ``pyproject.toml``).

Keys defined here are the external configuration API: renaming or removing a
key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by SnapMark configuration.

    The ordering of constants mirrors ``snapmark-default.toml``.
    """

    # [parser]
    SECTION_PARSER: Final[str] = "parser"

    KEY_VERSION: Final[str] = "version"
    KEY_PRESERVE_WHITESPACE: Final[str] = "preserve_whitespace"
    KEY_MAX_DEPTH: Final[str] = "max_depth"

    # [output]
    SECTION_OUTPUT: Final[str] = "output"

    KEY_FORMAT: Final[str] = "format"

    # ---------------------------- Schema helpers ----------------------------

    ALLOWED_TOP_LEVEL_KEYS: Final[frozenset[str]] = frozenset(
        {
            SECTION_PARSER,
            SECTION_OUTPUT,
        }
    )

    ALLOWED_SECTION_KEYS: Final[dict[str, frozenset[str]]] = {
        SECTION_PARSER: frozenset(
            {
                KEY_VERSION,
                KEY_PRESERVE_WHITESPACE,
                KEY_MAX_DEPTH,
            }
        ),
        SECTION_OUTPUT: frozenset(
            {
                KEY_FORMAT,
            }
        ),
    }
