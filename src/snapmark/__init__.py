# topmark:header:start
#
#   project      : SnapMark
#   file         : __init__.py
#   file_relpath : src/snapmark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SnapMark package.

SnapMark parses snap descriptions, written in a small subset of CommonMark,
into a tree of typed markup nodes: paragraphs, bullet lists, code blocks,
code spans, emphasis, strong emphasis and links. It exposes a typed API and
a CLI that renders the tree as an outline, HTML, JSON or plain text.
"""

from __future__ import annotations

from snapmark.config.model import ConfigError, ParserConfig
from snapmark.constants import DEFAULT_MAX_DEPTH, SNAPMARK_VERSION
from snapmark.core.nodes import Container, Node, NodeType, Text
from snapmark.core.versions import MarkdownVersion
from snapmark.parser import MarkdownParser, parse

__version__: str = SNAPMARK_VERSION

__all__: list[str] = [
    "ConfigError",
    "Container",
    "DEFAULT_MAX_DEPTH",
    "MarkdownParser",
    "MarkdownVersion",
    "Node",
    "NodeType",
    "ParserConfig",
    "Text",
    "parse",
]
