"""
gfx2inc - Image to Tile Data Converter Command-Line Interface
=============================================================

Converts an image into fox32 assembler ``data.32`` tile data.

Usage Examples
--------------
Convert a 16x16 tile sheet:
    $ gfx2inc 16 16 tiles.png tiles.inc

Convert an 8x16 font with progress output:
    $ gfx2inc -v 8 16 font.png font.inc
"""

from pathlib import Path

import click

from fox32_sdk import __version__
from fox32_sdk.cli.errors import handle_cli_exception
from fox32_sdk.gfx import convert_file


@click.command()
@click.argument("tile_width", type=click.IntRange(min=1))
@click.argument("tile_height", type=click.IntRange(min=1))
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.argument(
    "output_file",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="gfx2inc")
def main(
    tile_width: int,
    tile_height: int,
    input_file: Path,
    output_file: Path,
    verbose: bool,
) -> None:
    """
    Convert an image into fox32 tile data.

    The image is cut into TILE_WIDTH x TILE_HEIGHT tiles, read left to
    right and top to bottom, and every pixel is written as a
    "data.32 0xAABBGGRR" directive. Both image dimensions must be
    multiples of the tile size.
    """
    try:
        if verbose:
            click.echo(f"Converting {input_file} ({tile_width}x{tile_height} tiles)...")

        count = convert_file(input_file, output_file, tile_width, tile_height)

        if verbose:
            click.echo(f"Wrote {count} tiles to {output_file}")

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Conversion")


if __name__ == "__main__":
    main()
