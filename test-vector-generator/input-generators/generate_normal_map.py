#!/usr/bin/env python3
"""
Generate a normal map test vector from a YAML configuration.
Tangent-space normals of scattered hemispherical bumps, the typical
content BC5 is used for.
"""
import sys
import yaml
import numpy as np
from pathlib import Path

from bc5 import BlueMode
from common import ImageGenerator, encode_normal, fill_channel, create_empty_image, write_vector


class NormalMapGenerator(ImageGenerator):
    """Generator for bump-field normal maps."""

    def __init__(self, config: dict):
        size = config['input']['size']
        seed = config['input']['seed']
        super().__init__(size, seed)

        self.num_bumps = config['input']['num_bumps']
        self.min_radius = config['input']['min_radius']
        self.max_radius = config['input']['max_radius']

    def generate_pixels(self) -> np.ndarray:
        """Accumulate bump heights, then derive normals from the gradient."""
        size = self.size
        ys, xs = np.mgrid[0:size, 0:size].astype(np.float64)
        height = np.zeros((size, size))

        for _ in range(self.num_bumps):
            cx, cy = np.random.uniform(0, size, 2)
            radius = np.random.uniform(self.min_radius, self.max_radius)
            d2 = ((xs - cx) ** 2 + (ys - cy) ** 2) / radius ** 2
            height += np.sqrt(np.clip(1 - d2, 0, None)) * radius

        dy, dx = np.gradient(height)
        length = np.sqrt(dx ** 2 + dy ** 2 + 1)
        red, green = encode_normal(-dx / length, -dy / length)

        pixels = create_empty_image(size)
        fill_channel(pixels, 0, red)
        fill_channel(pixels, 1, green)
        fill_channel(pixels, 2, (1 / length * 0.5 + 0.5) * 255)
        pixels[:, :, 3] = 255
        return pixels


def main():
    if len(sys.argv) != 2:
        print("Usage: generate_normal_map.py <config.yaml>")
        sys.exit(1)

    config_file = sys.argv[1]

    # Load configuration
    with open(config_file, 'r') as f:
        config = yaml.safe_load(f)

    print(f"Generating normal map test vector: {config['name']}")
    print(f"Description: {config['description'].strip()}")

    output_dir = Path(config['output']['dir'])
    blue_mode = BlueMode[config['output'].get('blue_mode', 'ZERO')]

    generator = NormalMapGenerator(config)

    print(f"\nGenerating {config['input']['size']}x{config['input']['size']} image "
          f"with {config['input']['num_bumps']} bumps...")

    write_vector(
        output_dir, config['name'], generator.generate(), blue_mode,
        extra={'pattern': 'normal-map', 'seed': config['input']['seed']},
    )

    print("\nDone!")

    return 0


if __name__ == '__main__':
    sys.exit(main())
