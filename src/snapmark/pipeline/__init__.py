# topmark:header:start
#
#   project      : SnapMark
#   file         : __init__.py
#   file_relpath : src/snapmark/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SnapMark inline markup pipeline package.

This package turns the text of one paragraph into inline nodes. It contains:

- The provisional token model (`snapmark.pipeline.tokens`)
- Context handling and shared state between steps (`snapmark.pipeline.context`)
- Step implementations (tokenizer, emphasis, coalescer, linker)
- Pipeline assembly (`snapmark.pipeline.pipelines`) and execution
  (`snapmark.pipeline.runner`)
"""
