"""
fox32 SDK Command-Line Interface
================================

This package provides command-line tools for the fox32 SDK:

- **fxbind**: C binding header generator
- **gfx2inc**: Image to tile data converter

Each tool is implemented as a Click-based CLI application with
comprehensive help and error reporting.
"""

__all__ = ["fxbind", "gfx2inc"]
