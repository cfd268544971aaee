"""
BC5 block compression and decompression.

Each 4x4 block is stored in 16 bytes:

    Bytes 0-1:   red reference values (c0, c1)
    Bytes 2-7:   sixteen 3-bit red palette indices
    Bytes 8-9:   green reference values (c0, c1)
    Bytes 10-15: sixteen 3-bit green palette indices

Blue and alpha are not stored. On decompression blue is synthesized
according to a BlueMode and alpha is set to 1.
"""

import math
from enum import IntEnum

from bc5.errors import InvalidDimensionsError, InvalidLengthError
from bc5.image import RGBAImage
from bc5.indices import pack_indices, unpack_indices
from bc5.palette import denormalize, generate_palette, nearest_index, normalize

BLOCK_SIZE = 4
PIXELS_PER_BLOCK = BLOCK_SIZE * BLOCK_SIZE
ENCODED_BLOCK_SIZE = 16

# Alpha written to every decompressed pixel
DECOMPRESSED_ALPHA = 1


class BlueMode(IntEnum):
    """How the blue channel is filled in during decompression."""

    ZERO = 0  # always 0
    ONE = 1  # always 255
    COMPUTE_NORMAL = 2  # sqrt(1 - (2r-1)^2 + (2g-1)^2) / 2 + 0.5
    COPY_RED = 3  # same as red


def compress_block(block: RGBAImage) -> bytes:
    """
    Compress a 4x4 block into 16 bytes.

    Reference values are the per-channel min and max, passed to the
    palette generator in (min, max) order. Each pixel then takes the
    index of its nearest palette entry.

    Args:
        block: 4x4 RGBA block

    Returns:
        16-byte encoded block

    Raises:
        InvalidDimensionsError: If block is not 4x4
    """
    if block.width != BLOCK_SIZE or block.height != BLOCK_SIZE:
        raise InvalidDimensionsError(
            f"Block must be {BLOCK_SIZE}x{BLOCK_SIZE}, "
            f"got {block.width}x{block.height}"
        )

    pixels = list(block.pixels())

    reds = [p[0] for p in pixels]
    greens = [p[1] for p in pixels]

    pal_r = generate_palette(normalize(min(reds)), normalize(max(reds)))
    pal_g = generate_palette(normalize(min(greens)), normalize(max(greens)))

    r_indices = [nearest_index(pal_r, normalize(v)) for v in reds]
    g_indices = [nearest_index(pal_g, normalize(v)) for v in greens]

    out = bytearray(ENCODED_BLOCK_SIZE)
    out[0] = denormalize(pal_r[0])
    out[1] = denormalize(pal_r[1])
    out[2:8] = pack_indices(r_indices)
    out[8] = denormalize(pal_g[0])
    out[9] = denormalize(pal_g[1])
    out[10:16] = pack_indices(g_indices)
    return bytes(out)


def compute_blue(blue_mode: BlueMode, red: float, green: float) -> int:
    """
    Compute the blue byte for one pixel.

    Args:
        blue_mode: Blue reconstruction mode
        red: Normalized red palette value
        green: Normalized green palette value

    Returns:
        Blue byte value
    """
    if blue_mode == BlueMode.COMPUTE_NORMAL:
        z = math.sqrt(1 - (2 * red - 1) ** 2 + (2 * green - 1) ** 2)
        return denormalize(z / 2 + 0.5)
    if blue_mode == BlueMode.COPY_RED:
        return denormalize(red)
    if blue_mode == BlueMode.ONE:
        return denormalize(1.0)
    return 0


def decompress_block(data: bytes, blue_mode: BlueMode = BlueMode.ZERO) -> RGBAImage:
    """
    Decompress 16 bytes into a 4x4 block.

    Args:
        data: 16-byte encoded block
        blue_mode: Blue reconstruction mode

    Returns:
        4x4 RGBA block

    Raises:
        InvalidLengthError: If data is not exactly 16 bytes
    """
    if len(data) != ENCODED_BLOCK_SIZE:
        raise InvalidLengthError(
            f"Block must be {ENCODED_BLOCK_SIZE} bytes, got {len(data)}"
        )

    pal_r = generate_palette(normalize(data[0]), normalize(data[1]))
    r_indices = unpack_indices(data[2:8])

    pal_g = generate_palette(normalize(data[8]), normalize(data[9]))
    g_indices = unpack_indices(data[10:16])

    block = RGBAImage(BLOCK_SIZE, BLOCK_SIZE)
    for i in range(PIXELS_PER_BLOCK):
        red = pal_r[r_indices[i]]
        green = pal_g[g_indices[i]]
        block.set_pixel(
            i % BLOCK_SIZE,
            i // BLOCK_SIZE,
            (
                denormalize(red),
                denormalize(green),
                compute_blue(blue_mode, red, green),
                DECOMPRESSED_ALPHA,
            ),
        )
    return block
