"""
fox32 Graphics Conversion
=========================

Tools for turning images into data the fox32 can draw.

- **convert_image**: Pillow image -> ``data.32`` tile source text
- **convert_file**: same, reading and writing files (used by ``gfx2inc``)

Example:
    >>> from fox32_sdk.gfx import convert_file
    >>> convert_file("font.png", "font.inc", 8, 16)
    128
"""

from fox32_sdk.gfx.tiles import (
    format_pixel,
    tile_grid,
    convert_image,
    convert_file,
)

__all__ = [
    "format_pixel",
    "tile_grid",
    "convert_image",
    "convert_file",
]
