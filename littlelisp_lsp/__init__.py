"""LittleLisp Language Server package.

This package provides:
- A pygls-based Language Server for LittleLisp source files.
- A lightweight indexer that scans documents for top-level definitions and
  runs the interpreter's reader to report syntax errors.

Note: The LSP does not evaluate user buffers; it builds a static index from text.
"""

__all__ = [
    "server",
    "indexer",
]
