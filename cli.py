#!/usr/bin/env python3
"""
BC5 command line interface.

Compresses images to BC5 container files and decompresses them back to
regular image files. Image reading and writing go through Pillow, so any
format Pillow understands can be used as input or output.

Usage:
    python cli.py <input_image> [workers]
    python cli.py -d <input.bc5> [blue_mode] [workers]
    python cli.py -i <input.bc5>

Examples:
    python cli.py normals.png                   # compress
    python cli.py -d normals.png.bc5 normal     # decompress
"""

import sys

from bc5 import (
    BC5Error,
    BC5Image,
    BlueMode,
    CompressParams,
    DecompressParams,
    __version__,
)
from bc5.block import ENCODED_BLOCK_SIZE
from bc5.container import HEADER_SIZE, read_file, write_file
from bc5.imaging import load_image, save_image

BLUE_MODES = {
    "zero": BlueMode.ZERO,
    "one": BlueMode.ONE,
    "normal": BlueMode.COMPUTE_NORMAL,
    "red": BlueMode.COPY_RED,
}

MAX_WORKERS = 64


def print_version() -> None:
    """Print version information."""
    print(f"bc5 {__version__}")


def print_help(prog_name: str) -> None:
    """Print help message."""
    print(f"BC5 Red/Green Block Compression (v{__version__})")
    print("=" * 40)
    print()
    print("Usage:")
    print(f"  {prog_name} <input_image> [workers]")
    print(f"  {prog_name} -d <input.bc5> [blue_mode] [workers]")
    print(f"  {prog_name} -i <input.bc5>")
    print()
    print("Options:")
    print("  -d             Decompress (default is compress)")
    print("  -i             Show container information")
    print("  -h, --help     Show this help message")
    print("  -v, --version  Show version information")
    print()
    print("Arguments:")
    print("  input_image    Square image, size a multiple of 4 (PNG, TGA, ...)")
    print("  input.bc5      BC5 container file")
    print("  blue_mode      zero (default), one, normal, red")
    print(f"  workers        Worker threads, 1-{MAX_WORKERS} (default 1)")
    print()
    print("Output:")
    print("  Compress:   <input_image>.bc5")
    print("  Decompress: <base>.png (or <input>.png if input does not end in .bc5)")
    print()
    print("Examples:")
    print(f"  {prog_name} normals.png                   # compress")
    print(f"  {prog_name} -d normals.png.bc5 normal     # decompress")
    print()


def make_decompress_filename(input_path: str) -> str:
    """Create output filename for decompression.

    Removes .bc5 extension if present, then appends .png unless the
    remaining name already ends in .png.
    """
    if input_path.endswith(".bc5"):
        base = input_path[:-4]
        if base.lower().endswith(".png"):
            return base[:-4] + ".decompressed.png"
        return base + ".png"
    return input_path + ".png"


def parse_workers(value: str) -> int:
    """Parse a worker count argument.

    Raises:
        ValueError: If value is not an integer in range.
    """
    workers = int(value)
    if workers < 1 or workers > MAX_WORKERS:
        raise ValueError(f"workers must be 1-{MAX_WORKERS}")
    return workers


def do_compress(input_path: str, workers: int) -> int:
    """Compress an image file.

    Args:
        input_path: Input image path.
        workers: Number of worker threads.

    Returns:
        0 on success, 1 on error.
    """
    try:
        image = load_image(input_path)
    except OSError as e:
        print(f"Error: Cannot open input image: {input_path} ({e})", file=sys.stderr)
        return 1

    output_path = f"{input_path}.bc5"

    try:
        img = BC5Image.from_image(image, CompressParams(workers=workers))
    except BC5Error as e:
        print(f"Error: Compression failed: {e}", file=sys.stderr)
        return 1

    try:
        write_file(img, output_path)
    except OSError as e:
        print(f"Error: Cannot write output file: {output_path} ({e})", file=sys.stderr)
        return 1

    raw_size = image.width * image.height * 4
    ratio = raw_size / len(img.data) if len(img.data) > 0 else 0
    print(f"Input:       {input_path} ({image.width}x{image.height}, {raw_size} bytes)")
    print(f"Output:      {output_path} ({len(img.data) + HEADER_SIZE} bytes)")
    print(f"Ratio:       {ratio:.2f}x")

    return 0


def do_decompress(input_path: str, blue_mode: BlueMode, workers: int) -> int:
    """Decompress a BC5 container file.

    Args:
        input_path: BC5 container path.
        blue_mode: Blue reconstruction mode.
        workers: Number of worker threads.

    Returns:
        0 on success, 1 on error.
    """
    try:
        img = read_file(input_path)
    except OSError as e:
        print(f"Error: Cannot open input file: {input_path} ({e})", file=sys.stderr)
        return 1
    except BC5Error as e:
        print(f"Error: Invalid BC5 file: {input_path} ({e})", file=sys.stderr)
        return 1

    output_path = make_decompress_filename(input_path)

    try:
        image = img.decompress(DecompressParams(blue_mode=blue_mode, workers=workers))
    except BC5Error as e:
        print(f"Error: Decompression failed: {e}", file=sys.stderr)
        return 1

    try:
        save_image(image, output_path)
    except (OSError, ValueError) as e:
        print(f"Error: Cannot write output file: {output_path} ({e})", file=sys.stderr)
        return 1

    print(f"Input:       {input_path} ({len(img.data) + HEADER_SIZE} bytes)")
    print(f"Output:      {output_path} ({image.width}x{image.height})")
    print(f"Blue mode:   {blue_mode.name.lower()}")

    return 0


def do_info(input_path: str) -> int:
    """Print the header of a BC5 container file."""
    try:
        img = read_file(input_path)
    except OSError as e:
        print(f"Error: Cannot open input file: {input_path} ({e})", file=sys.stderr)
        return 1
    except BC5Error as e:
        print(f"Error: Invalid BC5 file: {input_path} ({e})", file=sys.stderr)
        return 1

    print(f"File:        {input_path}")
    print(f"Size:        {img.width}x{img.height}")
    print(f"Blocks:      {len(img.data) // ENCODED_BLOCK_SIZE}")
    print(f"Data:        {len(img.data)} bytes")

    return 0


def main() -> int:
    """CLI entry point."""
    args = sys.argv
    prog_name = args[0] if args else "cli.py"

    if len(args) < 2:
        print_help(prog_name)
        return 1

    if args[1] in ("-h", "--help"):
        print_help(prog_name)
        return 0

    if args[1] in ("-v", "--version"):
        print_version()
        return 0

    if args[1] == "-i":
        if len(args) != 3:
            print("Error: Info requires 1 argument after -i", file=sys.stderr)
            print(f"Usage: {prog_name} -i <input.bc5>", file=sys.stderr)
            return 1
        return do_info(args[2])

    if args[1] == "-d":
        # Decompress mode: -d <input.bc5> [blue_mode] [workers]
        if len(args) < 3 or len(args) > 5:
            print("Error: Decompress requires 1-3 arguments after -d", file=sys.stderr)
            print(
                f"Usage: {prog_name} -d <input.bc5> [blue_mode] [workers]",
                file=sys.stderr,
            )
            return 1

        input_path = args[2]

        blue_mode = BlueMode.ZERO
        if len(args) > 3:
            name = args[3].lower()
            if name not in BLUE_MODES:
                print(
                    f"Error: blue_mode must be one of {', '.join(BLUE_MODES)}",
                    file=sys.stderr,
                )
                return 1
            blue_mode = BLUE_MODES[name]

        workers = 1
        if len(args) > 4:
            try:
                workers = parse_workers(args[4])
            except ValueError:
                print(f"Error: workers must be 1-{MAX_WORKERS}", file=sys.stderr)
                return 1

        return do_decompress(input_path, blue_mode, workers)

    # Compress mode: <input_image> [workers]
    if len(args) > 3:
        print("Error: Compress takes at most 2 arguments", file=sys.stderr)
        print(f"Usage: {prog_name} <input_image> [workers]", file=sys.stderr)
        return 1

    workers = 1
    if len(args) > 2:
        try:
            workers = parse_workers(args[2])
        except ValueError:
            print(f"Error: workers must be 1-{MAX_WORKERS}", file=sys.stderr)
            return 1

    return do_compress(args[1], workers)


if __name__ == "__main__":
    sys.exit(main())
