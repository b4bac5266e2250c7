# topmark:header:start
#
#   project      : SnapMark
#   file         : __init__.py
#   file_relpath : src/snapmark/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across SnapMark.

The ``snapmark.core`` package provides small building blocks that are safe to
import from anywhere in the codebase (parser, pipeline, rendering, CLI, tests)
without pulling in user-interface concerns.

Included modules:

- ``nodes``
  The immutable markup node model (`Text`, `Container`, `NodeType`) and the
  iterative tree helpers used by the inline passes.

- ``chars``
  ASCII character classes (whitespace, punctuation, URL characters) and the
  whitespace-collapsing helpers.

- ``versions``
  The markup grammar version tag and the node types each version may emit.

- ``exit_codes``
  Centralized exit codes for the CLI, aligned with BSD-style ``sysexits``.
"""

from __future__ import annotations
