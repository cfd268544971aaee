"""Tests for the BC5 CLI."""

import subprocess
import sys
from pathlib import Path

from PIL import Image

from bc5.container import HEADER_SIZE, encode_header, read_file

# Path to cli.py
CLI_PATH = Path(__file__).parent.parent / "cli.py"


def run_cli(*args: str) -> subprocess.CompletedProcess:
    """Run the CLI with the given arguments."""
    return subprocess.run(
        [sys.executable, str(CLI_PATH), *args],
        capture_output=True,
        text=True,
    )


def write_png(path: Path, size: tuple, color: tuple) -> None:
    """Write a solid-color PNG."""
    Image.new("RGBA", size, color).save(path)


class TestCliHelp:
    """Test CLI help and version."""

    def test_help_short(self) -> None:
        """Test -h flag shows help."""
        result = run_cli("-h")
        assert result.returncode == 0
        assert "BC5" in result.stdout
        assert "Usage:" in result.stdout

    def test_help_long(self) -> None:
        """Test --help flag shows help."""
        result = run_cli("--help")
        assert result.returncode == 0
        assert "Usage:" in result.stdout

    def test_version(self) -> None:
        """Test -v flag shows version."""
        result = run_cli("-v")
        assert result.returncode == 0
        assert "bc5 1.0.0" in result.stdout

    def test_no_args_shows_help(self) -> None:
        """Test that no arguments shows help and exits with error."""
        result = run_cli()
        assert result.returncode == 1
        assert "Usage:" in result.stdout


class TestCliErrors:
    """Test CLI error handling."""

    def test_input_file_not_found(self, tmp_path: Path) -> None:
        """Test error when input image doesn't exist."""
        result = run_cli(str(tmp_path / "missing.png"))
        assert result.returncode == 1
        assert "Error" in result.stderr

    def test_non_square_image(self, tmp_path: Path) -> None:
        """Test compressing a non-square image fails."""
        input_path = tmp_path / "wide.png"
        write_png(input_path, (8, 4), (1, 2, 3, 255))
        result = run_cli(str(input_path))
        assert result.returncode == 1
        assert "square" in result.stderr

    def test_invalid_workers(self, tmp_path: Path) -> None:
        """Test a bad worker count is rejected."""
        result = run_cli(str(tmp_path / "x.png"), "0")
        assert result.returncode == 1
        assert "workers" in result.stderr

    def test_invalid_blue_mode(self, tmp_path: Path) -> None:
        """Test an unknown blue mode is rejected."""
        result = run_cli("-d", str(tmp_path / "x.bc5"), "purple")
        assert result.returncode == 1
        assert "blue_mode" in result.stderr

    def test_bad_signature(self, tmp_path: Path) -> None:
        """Test decompressing a file without the BC5 signature fails."""
        input_path = tmp_path / "bogus.bc5"
        input_path.write_bytes(b"DDS " + bytes(28))
        result = run_cli("-d", str(input_path))
        assert result.returncode == 1
        assert "Invalid BC5 file" in result.stderr

    def test_truncated_block_data(self, tmp_path: Path) -> None:
        """Test a container with fewer blocks than its header needs."""
        input_path = tmp_path / "short.bc5"
        input_path.write_bytes(encode_header(8, 8) + bytes(16))
        result = run_cli("-d", str(input_path))
        assert result.returncode == 1
        assert "Decompression failed" in result.stderr
        assert "Traceback" not in result.stderr
        assert not (tmp_path / "short.png").exists()

    def test_decompress_missing_args(self) -> None:
        """Test -d without an input file."""
        result = run_cli("-d")
        assert result.returncode == 1
        assert "Error" in result.stderr


class TestCliRoundTrip:
    """Test CLI compression and decompression."""

    def test_compress(self, tmp_path: Path) -> None:
        """Test basic compression writes a container."""
        input_path = tmp_path / "solid.png"
        write_png(input_path, (8, 8), (100, 200, 0, 255))

        result = run_cli(str(input_path))
        assert result.returncode == 0

        output_path = tmp_path / "solid.png.bc5"
        assert output_path.exists()
        assert output_path.stat().st_size == HEADER_SIZE + 4 * 16

        assert "Input:" in result.stdout
        assert "Output:" in result.stdout
        assert "Ratio:" in result.stdout

        img = read_file(str(output_path))
        assert img.rect == (8, 8)

    def test_compress_threaded(self, tmp_path: Path) -> None:
        """Test compression with worker threads."""
        input_path = tmp_path / "solid.png"
        write_png(input_path, (16, 16), (30, 60, 0, 255))
        result = run_cli(str(input_path), "4")
        assert result.returncode == 0

    def test_decompress(self, tmp_path: Path) -> None:
        """Test compress then decompress restores red and green."""
        input_path = tmp_path / "solid.png"
        write_png(input_path, (8, 8), (100, 200, 0, 255))
        assert run_cli(str(input_path)).returncode == 0

        result = run_cli("-d", str(tmp_path / "solid.png.bc5"), "red", "2")
        assert result.returncode == 0
        assert "Blue mode:   copy_red" in result.stdout

        output_path = tmp_path / "solid.decompressed.png"
        assert output_path.exists()
        with Image.open(output_path) as img:
            assert img.getpixel((3, 3)) == (100, 200, 100, 1)

    def test_decompress_filename(self, tmp_path: Path) -> None:
        """Test a plain .bc5 name decompresses to .png."""
        input_path = tmp_path / "solid.png"
        write_png(input_path, (4, 4), (5, 6, 0, 255))
        assert run_cli(str(input_path)).returncode == 0

        renamed = tmp_path / "texture.bc5"
        (tmp_path / "solid.png.bc5").rename(renamed)
        assert run_cli("-d", str(renamed)).returncode == 0
        assert (tmp_path / "texture.png").exists()

    def test_info(self, tmp_path: Path) -> None:
        """Test -i prints the container header."""
        input_path = tmp_path / "solid.png"
        write_png(input_path, (8, 8), (1, 2, 3, 255))
        assert run_cli(str(input_path)).returncode == 0

        result = run_cli("-i", str(tmp_path / "solid.png.bc5"))
        assert result.returncode == 0
        assert "8x8" in result.stdout
        assert "Blocks:      4" in result.stdout
