"""
Image to Tile Data Conversion
=============================

Converts an image into fox32 assembler source: one ``data.32`` word per
pixel, grouped into fixed-size tiles that fox32rom's tile drawing
routines (``draw_tile_to_background`` and friends) can consume.

Pixel Format
------------
The fox32 framebuffer stores pixels as little-endian RGBA words, so the
word literal reads alpha, blue, green, red from most to least
significant byte:

    RGBA (0x11, 0x22, 0x33, 0xFF)  ->  data.32 0xff332211

Tile Order
----------
Tiles are emitted row by row (top to bottom), left to right within a
row. Inside a tile, each pixel row is one line of source and the tile is
followed by a blank line:

    data.32 0xff0000ff data.32 0xff00ff00
    data.32 0xffff0000 data.32 0xffffffff

Images in any mode are converted to RGBA first, so palette and
greyscale images work as well.
"""

import logging
from pathlib import Path
from typing import Union

from PIL import Image

from fox32_sdk.errors import TileSizeError

logger = logging.getLogger(__name__)


def format_pixel(pixel: tuple[int, int, int, int]) -> str:
    """
    Format one RGBA pixel as a data.32 directive (with trailing space).

    Args:
        pixel: (red, green, blue, alpha) tuple

    Returns:
        Text like "data.32 0xff332211 "
    """
    red, green, blue, alpha = pixel
    return f"data.32 0x{alpha:02x}{blue:02x}{green:02x}{red:02x} "


def tile_grid(image: Image.Image, tile_width: int, tile_height: int) -> tuple[int, int]:
    """
    Compute how many tiles fit across and down the image.

    Args:
        image: Source image
        tile_width: Tile width in pixels
        tile_height: Tile height in pixels

    Returns:
        (tiles_wide, tiles_high)

    Raises:
        ValueError: If a tile dimension is not positive
        TileSizeError: If the image is not a whole number of tiles
    """
    if tile_width <= 0 or tile_height <= 0:
        raise ValueError(f"tile size must be positive, got {tile_width}x{tile_height}")

    width, height = image.size
    if width % tile_width or height % tile_height:
        raise TileSizeError((width, height), (tile_width, tile_height))

    return width // tile_width, height // tile_height


def convert_image(image: Image.Image, tile_width: int, tile_height: int) -> str:
    """
    Convert an image into tile data source text.

    Args:
        image: Source image (any mode)
        tile_width: Tile width in pixels
        tile_height: Tile height in pixels

    Returns:
        Assembler source for every tile, in tile order
    """
    tiles_wide, tiles_high = tile_grid(image, tile_width, tile_height)
    rgba = image.convert("RGBA")
    pixels = rgba.load()

    logger.debug(
        f"Converting {image.size[0]}x{image.size[1]} image into "
        f"{tiles_wide * tiles_high} tiles of {tile_width}x{tile_height}"
    )

    output = []
    for row in range(tiles_high):
        for column in range(tiles_wide):
            for y in range(row * tile_height, (row + 1) * tile_height):
                for x in range(column * tile_width, (column + 1) * tile_width):
                    output.append(format_pixel(pixels[x, y]))
                output.append("\n")
            output.append("\n")

    return "".join(output)


def convert_file(
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    tile_width: int,
    tile_height: int,
) -> int:
    """
    Convert an image file and write the tile data to output_path.

    Args:
        input_path: Any image format Pillow can read
        output_path: Destination source file
        tile_width: Tile width in pixels
        tile_height: Tile height in pixels

    Returns:
        Number of tiles written
    """
    with Image.open(input_path) as image:
        tiles_wide, tiles_high = tile_grid(image, tile_width, tile_height)
        text = convert_image(image, tile_width, tile_height)

    Path(output_path).write_text(text, encoding="utf-8")
    logger.debug(f"Wrote {len(text)} characters to {output_path}")
    return tiles_wide * tiles_high
