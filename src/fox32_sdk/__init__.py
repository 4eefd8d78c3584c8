"""
fox32 SDK - C Bindings and Asset Tools for the fox32 Fantasy Console
====================================================================

This package provides host-side tools for developing software for the
fox32, a 32-bit fantasy computer with a ROM (fox32rom) and an operating
system (fox32os) that expose their services through fixed jump tables.

Main Components
---------------
- **bindings**: C header generator (fxbind)
    Produces ``fox32.h``, inline C wrappers that call ROM/OS routines
    through the jump tables, and ``call.h``, the register primitives
    those wrappers use

- **gfx**: Tile data converter (gfx2inc)
    Converts images into ``data.32`` tile source for the fox32 assembler

Quick Start
-----------
Generate the C bindings:
    >>> from fox32_sdk import generate_bindings_header, generate_call_header
    >>> header = generate_bindings_header()
    >>> primitives = generate_call_header()

Convert a tile sheet:
    >>> from fox32_sdk import convert_file
    >>> convert_file("tiles.png", "tiles.inc", 16, 16)

Or use the command-line tools:
    $ fxbind > fox32.h
    $ fxbind -o fox32.h --call-header call.h
    $ gfx2inc 16 16 tiles.png tiles.inc

Reference Documentation
-----------------------
- fox32 architecture: https://github.com/fox32-arch/fox32
- fox32rom: https://github.com/fox32-arch/fox32rom
- fox32os: https://github.com/fox32-arch/fox32os
"""

__version__ = "0.1.0"

# =============================================================================
# Public API Exports
# =============================================================================

from fox32_sdk.errors import (
    Fox32Error,
    BindingError,
    SlotIndexError,
    SlotCapacityError,
    DuplicateEntryError,
    GraphicsError,
    TileSizeError,
)

from fox32_sdk.bindings import (
    CType,
    Variable,
    Signature,
    Document,
    BINDINGS_TABLE,
    format_hex,
    render_function,
    check_table,
    build_document,
    generate_bindings_header,
    generate_call_header,
)

from fox32_sdk.gfx import (
    convert_image,
    convert_file,
)

__all__ = [
    # Version info
    "__version__",
    # Exception hierarchy
    "Fox32Error",
    "BindingError",
    "SlotIndexError",
    "SlotCapacityError",
    "DuplicateEntryError",
    "GraphicsError",
    "TileSizeError",
    # Bindings
    "CType",
    "Variable",
    "Signature",
    "Document",
    "BINDINGS_TABLE",
    "format_hex",
    "render_function",
    "check_table",
    "build_document",
    "generate_bindings_header",
    "generate_call_header",
    # Graphics
    "convert_image",
    "convert_file",
]
