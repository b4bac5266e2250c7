# topmark:header:start
#
#   project      : SnapMark
#   file         : versions.py
#   file_relpath : src/snapmark/core/versions.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markup grammar versions.

A snap description is written in a fixed dialect. The version tag is kept so
that a future grammar can be introduced without silently changing how
existing descriptions are parsed.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Final

from snapmark.core.nodes import NodeType


class MarkdownVersion(IntEnum):
    """Version of the markup grammar accepted by the parser.

    Attributes:
        V0: The initial snap description dialect.
    """

    V0 = 0

    @classmethod
    def parse(cls, value: int | str) -> MarkdownVersion:
        """Return the version for ``value`` (an integer or its decimal string).

        Raises:
            ValueError: If ``value`` does not name a known version.
        """
        try:
            return cls(int(value))
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Unknown markdown version: {value!r}") from exc


LATEST_VERSION: Final[MarkdownVersion] = max(MarkdownVersion)

# Node types a given grammar version may produce.
SUPPORTED_NODE_TYPES: Final[dict[MarkdownVersion, frozenset[NodeType]]] = {
    MarkdownVersion.V0: frozenset(NodeType),
}
