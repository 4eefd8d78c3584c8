"""
Tests for the Command-Line Tools
================================

Exercises fxbind and gfx2inc through click's CliRunner.

Run tests with:
    pytest tests/test_cli.py -v
"""

import pytest
from click.testing import CliRunner
from PIL import Image

from fox32_sdk.bindings import generate_bindings_header, generate_call_header
from fox32_sdk.cli import fxbind, gfx2inc
from fox32_sdk.cli.errors import ExitCode


@pytest.fixture
def runner():
    return CliRunner()


# =============================================================================
# fxbind
# =============================================================================

class TestFxbindCLI:
    """Tests for the fxbind CLI tool."""

    def test_cli_help(self, runner):
        """Test CLI help output."""
        result = runner.invoke(fxbind.main, ["--help"])
        assert result.exit_code == 0
        assert "Generate C bindings" in result.output

    def test_cli_version(self, runner):
        """Test CLI version output."""
        result = runner.invoke(fxbind.main, ["--version"])
        assert result.exit_code == 0
        assert "fxbind" in result.output

    def test_no_arguments_prints_header(self, runner):
        """With no arguments the full header goes to stdout."""
        result = runner.invoke(fxbind.main, [])
        assert result.exit_code == ExitCode.SUCCESS
        assert result.output == generate_bindings_header() + "\n"

    def test_output_file(self, runner, tmp_path):
        """-o writes the header to a file and nothing to stdout."""
        target = tmp_path / "fox32.h"
        result = runner.invoke(fxbind.main, ["-o", str(target)])
        assert result.exit_code == 0
        assert result.output == ""
        assert target.read_text() == generate_bindings_header() + "\n"

    def test_call_header(self, runner, tmp_path):
        """--call-header writes call.h alongside."""
        target = tmp_path / "fox32.h"
        call_h = tmp_path / "call.h"
        result = runner.invoke(
            fxbind.main, ["-o", str(target), "--call-header", str(call_h)]
        )
        assert result.exit_code == 0
        assert call_h.read_text() == generate_call_header()

    def test_strict_passes(self, runner):
        """The shipped table passes the strict check."""
        result = runner.invoke(fxbind.main, ["--strict"])
        assert result.exit_code == 0
        assert result.output.startswith("#pragma once\n")

    def test_strict_reports_duplicates(self, runner, monkeypatch):
        """A duplicate name fails --strict with a build error."""
        from fox32_sdk.bindings import FunctionEntry

        table = (FunctionEntry(0x10, "f"), FunctionEntry(0x14, "f"))
        monkeypatch.setattr(fxbind, "BINDINGS_TABLE", table)

        result = runner.invoke(fxbind.main, ["--strict"])
        assert result.exit_code == ExitCode.BUILD_ERROR
        assert "duplicate function name f" in result.output

    def test_idempotent(self, runner):
        """Two runs print identical output."""
        first = runner.invoke(fxbind.main, [])
        second = runner.invoke(fxbind.main, [])
        assert first.output == second.output


# =============================================================================
# gfx2inc
# =============================================================================

class TestGfx2incCLI:
    """Tests for the gfx2inc CLI tool."""

    def test_cli_help(self, runner):
        """Test CLI help output."""
        result = runner.invoke(gfx2inc.main, ["--help"])
        assert result.exit_code == 0
        assert "Convert an image into fox32 tile data" in result.output

    def test_convert(self, runner, tmp_path):
        """A valid image is converted."""
        source = tmp_path / "tile.png"
        target = tmp_path / "tile.inc"
        Image.new("RGBA", (2, 2), color=(0xFF, 0, 0, 0xFF)).save(source)

        result = runner.invoke(gfx2inc.main, ["2", "2", str(source), str(target)])

        assert result.exit_code == 0
        assert target.read_text() == ("data.32 0xff0000ff " * 2 + "\n") * 2 + "\n"

    def test_verbose(self, runner, tmp_path):
        """-v reports the number of tiles."""
        source = tmp_path / "tiles.png"
        Image.new("RGBA", (4, 2)).save(source)

        result = runner.invoke(
            gfx2inc.main, ["-v", "2", "2", str(source), str(tmp_path / "out.inc")]
        )

        assert result.exit_code == 0
        assert "Wrote 2 tiles" in result.output

    def test_bad_tile_size(self, runner, tmp_path):
        """An image that is not a whole number of tiles is a build error."""
        source = tmp_path / "odd.png"
        Image.new("RGBA", (3, 2)).save(source)

        result = runner.invoke(
            gfx2inc.main, ["2", "2", str(source), str(tmp_path / "out.inc")]
        )

        assert result.exit_code == ExitCode.BUILD_ERROR
        assert "not a multiple" in result.output

    def test_missing_input(self, runner, tmp_path):
        """A missing input file is a usage error."""
        result = runner.invoke(
            gfx2inc.main, ["8", "8", str(tmp_path / "nope.png"), str(tmp_path / "out.inc")]
        )
        assert result.exit_code == 2

    def test_zero_tile_size(self, runner, tmp_path):
        """Tile sizes must be at least one pixel."""
        source = tmp_path / "tile.png"
        Image.new("RGBA", (2, 2)).save(source)
        result = runner.invoke(gfx2inc.main, ["0", "2", str(source), str(tmp_path / "o")])
        assert result.exit_code == 2
