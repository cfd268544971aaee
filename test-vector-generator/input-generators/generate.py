#!/usr/bin/env python3
"""
Unified BC5 test vector generator.

Generates deterministic square RGBA images, compresses them with the
bc5 package and stores the input, the expected container and the
expected decompressed pixels together with md5 metadata.

Examples:
    # Default set (all patterns, 4/16/64 pixel images)
    python generate.py --output-dir ../../test-vectors

    # Specific sizes and patterns
    python generate.py -o ../../test-vectors \
        --sizes 8,256 \
        --patterns gradient,noise

    # Decompress expected output with normal reconstruction
    python generate.py -o ../../test-vectors --blue-mode COMPUTE_NORMAL
"""

import argparse
import json
import sys
import numpy as np
from pathlib import Path
from typing import List

from bc5 import BlueMode
from common import (
    create_empty_image, encode_normal, fill_channel, set_deterministic_seed,
    to_rgba_image, write_vector
)

PATTERNS = ['solid', 'gradient', 'noise', 'checker', 'normal-map']


def generate_pixels(pattern: str, size: int, seed: int) -> np.ndarray:
    """Generate pixel data based on pattern type."""
    set_deterministic_seed(seed)
    pixels = create_empty_image(size)
    pixels[:, :, 3] = 255

    ys, xs = np.mgrid[0:size, 0:size].astype(np.float64)

    if pattern == 'solid':
        pixels[:, :, 0] = np.random.randint(0, 256)
        pixels[:, :, 1] = np.random.randint(0, 256)

    elif pattern == 'gradient':
        scale = 255 / max(1, size - 1)
        fill_channel(pixels, 0, xs * scale)
        fill_channel(pixels, 1, ys * scale)

    elif pattern == 'noise':
        pixels[:, :, :3] = np.random.randint(0, 256, (size, size, 3), dtype=np.uint8)

    elif pattern == 'checker':
        # 2x2 cells give blocks with exactly two values per channel
        cells = ((xs // 2 + ys // 2) % 2).astype(bool)
        low, high = np.random.randint(0, 128), np.random.randint(128, 256)
        fill_channel(pixels, 0, np.where(cells, high, low))
        fill_channel(pixels, 1, np.where(cells, low, high))

    elif pattern == 'normal-map':
        # Hemisphere bump centred in the image
        radius = size / 2
        nx = (xs + 0.5 - radius) / radius
        ny = (ys + 0.5 - radius) / radius
        outside = nx ** 2 + ny ** 2 > 1
        nx[outside] = 0
        ny[outside] = 0
        red, green = encode_normal(nx, ny)
        fill_channel(pixels, 0, red)
        fill_channel(pixels, 1, green)
        fill_channel(pixels, 2, np.full((size, size), 255))

    else:
        raise ValueError(f"Unknown pattern: {pattern}")

    return pixels


def parse_list(s: str, type_fn=str) -> List:
    """Parse comma-separated list."""
    if not s:
        return []
    return [type_fn(x.strip()) for x in s.split(',')]


def main():
    parser = argparse.ArgumentParser(
        description='Generate BC5 test vectors',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python generate.py -o ../../test-vectors
  python generate.py -o ../../test-vectors --sizes 8,512 --patterns noise
"""
    )

    parser.add_argument('--output-dir', '-o', type=Path, default=Path('./output'),
                        help='Output directory')
    parser.add_argument('--sizes', '-s', type=str, default='4,16,64',
                        help='Comma-separated image sizes, multiples of 4 (default: 4,16,64)')
    parser.add_argument('--patterns', '-p', type=str, default=','.join(PATTERNS),
                        help=f"Comma-separated patterns: {','.join(PATTERNS)}")
    parser.add_argument('--blue-mode', '-b', type=str, default='ZERO',
                        choices=[m.name for m in BlueMode],
                        help='Blue mode for expected decompressed output (default: ZERO)')
    parser.add_argument('--seed', type=int, default=42,
                        help='Random seed for reproducibility (default: 42)')

    args = parser.parse_args()

    sizes = parse_list(args.sizes, int)
    patterns = parse_list(args.patterns)
    blue_mode = BlueMode[args.blue_mode]

    for size in sizes:
        if size <= 0 or size % 4 != 0:
            print(f"Error: size {size} is not a positive multiple of 4")
            sys.exit(1)
    for pattern in patterns:
        if pattern not in PATTERNS:
            print(f"Error: unknown pattern {pattern}")
            sys.exit(1)

    args.output_dir.mkdir(parents=True, exist_ok=True)

    print("=" * 60)
    print("BC5 Test Vector Generator")
    print("=" * 60)
    print(f"Output:        {args.output_dir}")
    print(f"Sizes:         {sizes}")
    print(f"Patterns:      {patterns}")
    print(f"Blue mode:     {blue_mode.name}")
    print(f"Seed:          {args.seed}")

    all_meta = []

    print(f"\nGenerating {len(sizes) * len(patterns)} test vectors...")

    for size in sizes:
        for pattern in patterns:
            name = f"{pattern}_{size}x{size}"
            seed = args.seed + size
            image = to_rgba_image(generate_pixels(pattern, size, seed))
            meta = write_vector(
                args.output_dir, name, image, blue_mode,
                extra={'pattern': pattern, 'seed': seed},
            )
            all_meta.append(meta)

    manifest = {
        "generator": "generate.py",
        "seed": args.seed,
        "blue_mode": blue_mode.name,
        "vectors": [
            {
                "name": m['name'],
                "pattern": m['pattern'],
                "width": m['input']['width'],
                "height": m['input']['height'],
                "input_file": m['input']['file'],
                "compressed_file": m['output']['compressed']['file'],
                "compressed_md5": m['output']['compressed']['md5'],
            }
            for m in all_meta
        ]
    }

    manifest_file = args.output_dir / "manifest.json"
    with open(manifest_file, 'w') as f:
        json.dump(manifest, f, indent=2)

    total_input = sum(m['input']['size'] for m in all_meta)
    total_compressed = sum(m['output']['compressed']['size'] for m in all_meta)

    print("\n" + "=" * 60)
    print(f"Generated {len(all_meta)} test vectors")
    print(f"Total input:      {total_input:,} bytes")
    print(f"Total compressed: {total_compressed:,} bytes")
    print(f"Manifest: {manifest_file}")
    print("=" * 60)


if __name__ == '__main__':
    main()
