# topmark:header:start
#
#   project      : SnapMark
#   file         : __main__.py
#   file_relpath : src/snapmark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running SnapMark via ``python -m snapmark``.

Equivalent to running the ``snapmark`` console script.

Examples:
    Render a description as HTML::

        python -m snapmark parse --format html description.txt
"""

from __future__ import annotations

from snapmark.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
