"""
Common utilities for test vector generation.
Provides shared functions for creating deterministic RGBA images and
writing BC5 reference vectors.
"""
import json
import hashlib
import numpy as np
from pathlib import Path
from typing import Dict, Tuple

from bc5 import BC5Image, BlueMode, DecompressParams, RGBAImage
from bc5.container import encode_bytes


def set_deterministic_seed(seed: int):
    """Set seed for reproducible random generation."""
    np.random.seed(seed)


def calculate_md5(data: bytes) -> str:
    """Calculate MD5 hash of data."""
    return hashlib.md5(data).hexdigest()


def create_empty_image(size: int) -> np.ndarray:
    """Create an all-zero square RGBA pixel array."""
    return np.zeros((size, size, 4), dtype=np.uint8)


def fill_channel(pixels: np.ndarray, channel: int, values: np.ndarray):
    """Write values into one channel, clipped to [0, 255]."""
    pixels[:, :, channel] = np.clip(values, 0, 255).astype(np.uint8)


def to_rgba_image(pixels: np.ndarray) -> RGBAImage:
    """Convert an (H, W, 4) uint8 array to an RGBAImage."""
    height, width = pixels.shape[:2]
    return RGBAImage.from_bytes(pixels.tobytes(), width, height)


def encode_normal(nx: np.ndarray, ny: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Map normal x/y components in [-1, 1] to red/green bytes."""
    red = (nx * 0.5 + 0.5) * 255
    green = (ny * 0.5 + 0.5) * 255
    return red, green


class ImageGenerator:
    """Base class for test image generation."""

    def __init__(self, size: int, seed: int = 42):
        if size <= 0 or size % 4 != 0:
            raise ValueError(f"Image size must be a positive multiple of 4, got {size}")
        self.size = size
        self.seed = seed
        set_deterministic_seed(seed)

    def generate_pixels(self) -> np.ndarray:
        """Generate an (size, size, 4) uint8 array. Override in subclasses."""
        raise NotImplementedError

    def generate(self) -> RGBAImage:
        """Generate the image."""
        return to_rgba_image(self.generate_pixels())


def write_vector(
    output_dir: Path,
    name: str,
    image: RGBAImage,
    blue_mode: BlueMode = BlueMode.ZERO,
    extra: Dict = None,
) -> Dict:
    """
    Write input, expected output and metadata for one vector.

    Layout:
        <output_dir>/input/<name>.rgba
        <output_dir>/expected-output/<name>.bc5
        <output_dir>/expected-output/<name>.decompressed.rgba
        <output_dir>/expected-output/<name>-metadata.json
    """
    input_dir = output_dir / 'input'
    expected_dir = output_dir / 'expected-output'
    input_dir.mkdir(parents=True, exist_ok=True)
    expected_dir.mkdir(parents=True, exist_ok=True)

    input_data = image.to_bytes()
    input_file = input_dir / f"{name}.rgba"
    input_file.write_bytes(input_data)

    img = BC5Image.from_image(image)
    compressed = encode_bytes(img)
    compressed_file = expected_dir / f"{name}.bc5"
    compressed_file.write_bytes(compressed)

    decompressed = img.decompress(DecompressParams(blue_mode=blue_mode)).to_bytes()
    decompressed_file = expected_dir / f"{name}.decompressed.rgba"
    decompressed_file.write_bytes(decompressed)

    metadata = {
        'name': name,
        'input': {
            'file': input_file.name,
            'width': image.width,
            'height': image.height,
            'size': len(input_data),
            'md5': calculate_md5(input_data),
        },
        'output': {
            'compressed': {
                'file': compressed_file.name,
                'size': len(compressed),
                'md5': calculate_md5(compressed),
            },
            'decompressed': {
                'file': decompressed_file.name,
                'blue_mode': blue_mode.name,
                'md5': calculate_md5(decompressed),
            },
        },
    }
    if extra:
        metadata.update(extra)

    meta_file = expected_dir / f"{name}-metadata.json"
    with open(meta_file, 'w') as f:
        json.dump(metadata, f, indent=2)

    ratio = len(input_data) / len(compressed) if compressed else 0
    print(f"  {name}: {image.width}x{image.height}, "
          f"{len(compressed):,} bytes (ratio: {ratio:.2f}x)")
    print(f"    MD5: {metadata['output']['compressed']['md5']}")

    return metadata
