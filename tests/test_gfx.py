"""
Tests for Image to Tile Data Conversion
=======================================

Images are built in memory with Pillow, so no fixture files are needed.

Run tests with:
    pytest tests/test_gfx.py -v
"""

import pytest
from PIL import Image

from fox32_sdk.errors import GraphicsError, TileSizeError
from fox32_sdk.gfx import convert_file, convert_image, format_pixel, tile_grid


RED = (0xFF, 0x00, 0x00, 0xFF)
GREEN = (0x00, 0xFF, 0x00, 0xFF)
BLUE = (0x00, 0x00, 0xFF, 0xFF)
CLEAR = (0x11, 0x22, 0x33, 0x00)


def make_image(rows):
    """Build an RGBA image from a list of pixel rows."""
    height = len(rows)
    width = len(rows[0])
    image = Image.new("RGBA", (width, height))
    for y, row in enumerate(rows):
        for x, pixel in enumerate(row):
            image.putpixel((x, y), pixel)
    return image


# =============================================================================
# Pixel Formatting
# =============================================================================

class TestFormatPixel:
    """Tests for format_pixel()."""

    def test_byte_order(self):
        """Words read alpha, blue, green, red."""
        assert format_pixel((0x11, 0x22, 0x33, 0x44)) == "data.32 0x44332211 "

    def test_lower_case_hex(self):
        """Hex digits are lower case and zero padded."""
        assert format_pixel(RED) == "data.32 0xff0000ff "
        assert format_pixel((0, 0, 0, 0)) == "data.32 0x00000000 "


# =============================================================================
# Tile Layout
# =============================================================================

class TestTileGrid:
    """Tests for tile_grid()."""

    def test_grid_size(self):
        """Tiles across and down are computed from the image size."""
        image = Image.new("RGBA", (32, 16))
        assert tile_grid(image, 8, 8) == (4, 2)
        assert tile_grid(image, 32, 16) == (1, 1)

    def test_not_a_multiple(self):
        """Partial tiles are rejected."""
        image = Image.new("RGBA", (10, 8))
        with pytest.raises(TileSizeError) as exc_info:
            tile_grid(image, 4, 4)
        assert exc_info.value.image_size == (10, 8)
        assert exc_info.value.tile_size == (4, 4)
        assert isinstance(exc_info.value, GraphicsError)

    def test_non_positive_tile(self):
        """Tile dimensions must be positive."""
        with pytest.raises(ValueError):
            tile_grid(Image.new("RGBA", (8, 8)), 0, 8)


class TestConvertImage:
    """Tests for convert_image()."""

    def test_single_tile(self):
        """One tile: a line per pixel row, then a blank line."""
        image = make_image([
            [RED, GREEN],
            [BLUE, CLEAR],
        ])
        assert convert_image(image, 2, 2) == (
            "data.32 0xff0000ff data.32 0xff00ff00 \n"
            "data.32 0xffff0000 data.32 0x00332211 \n"
            "\n"
        )

    def test_tiles_left_to_right(self):
        """Tiles in a row are emitted left to right."""
        image = make_image([[RED, GREEN]])
        assert convert_image(image, 1, 1) == (
            "data.32 0xff0000ff \n\n"
            "data.32 0xff00ff00 \n\n"
        )

    def test_tiles_row_major(self):
        """A whole row of tiles comes before the next row."""
        image = make_image([
            [RED, GREEN],
            [BLUE, CLEAR],
        ])
        text = convert_image(image, 1, 1)
        tiles = text.split("\n\n")[:-1]
        assert tiles == [
            "data.32 0xff0000ff ",
            "data.32 0xff00ff00 ",
            "data.32 0xffff0000 ",
            "data.32 0x00332211 ",
        ]

    def test_tile_interior_order(self):
        """Pixels inside a tile stay within that tile's columns."""
        image = make_image([
            [RED, RED, BLUE, BLUE],
            [RED, RED, BLUE, BLUE],
        ])
        text = convert_image(image, 2, 2)
        first, second = text.split("\n\n")[:2]
        assert "0xffff0000" not in first
        assert "0xff0000ff" not in second

    def test_rgb_image_is_opaque(self):
        """Images without alpha convert to fully opaque pixels."""
        image = Image.new("RGB", (1, 1), color=(0x12, 0x34, 0x56))
        assert convert_image(image, 1, 1) == "data.32 0xff563412 \n\n"


class TestConvertFile:
    """Tests for convert_file()."""

    def test_round_trip_files(self, tmp_path):
        """A PNG on disk is converted and written out."""
        source = tmp_path / "tiles.png"
        target = tmp_path / "tiles.inc"
        make_image([[RED, GREEN, BLUE, CLEAR]]).save(source)

        count = convert_file(source, target, 2, 1)

        assert count == 2
        assert target.read_text() == (
            "data.32 0xff0000ff data.32 0xff00ff00 \n\n"
            "data.32 0xffff0000 data.32 0x00332211 \n\n"
        )

    def test_bad_size_writes_nothing(self, tmp_path):
        """No output file is created when the size check fails."""
        source = tmp_path / "odd.png"
        target = tmp_path / "odd.inc"
        Image.new("RGBA", (3, 3)).save(source)

        with pytest.raises(TileSizeError):
            convert_file(source, target, 2, 2)
        assert not target.exists()
