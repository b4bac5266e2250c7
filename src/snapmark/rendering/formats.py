# topmark:header:start
#
#   project      : SnapMark
#   file         : formats.py
#   file_relpath : src/snapmark/rendering/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Defines the output formats available for rendering parsed descriptions.

This module provides an enumeration of the different formats that can be used
when printing a parsed node tree.
"""

from enum import Enum


class OutputFormat(Enum):
    """SnapMark output formats."""

    TREE = "tree"
    HTML = "html"
    JSON = "json"
    TEXT = "text"
