# topmark:header:start
#
#   project      : SnapMark
#   file         : __init__.py
#   file_relpath : src/snapmark/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Renderers for parsed SnapMark node trees.

Each renderer takes the top-level node sequence returned by
`snapmark.parse` and returns a string (or, for JSON, JSON-able data).
"""

from __future__ import annotations

from snapmark.rendering.formats import OutputFormat
from snapmark.rendering.html import render_html
from snapmark.rendering.json import nodes_to_dicts, render_json
from snapmark.rendering.text import render_text
from snapmark.rendering.tree import render_tree

__all__: list[str] = [
    "OutputFormat",
    "nodes_to_dicts",
    "render_html",
    "render_json",
    "render_text",
    "render_tree",
]
