"""
Full-image BC5 compression.

Splits a square image into 4x4 blocks, compresses each block
independently and concatenates the 16-byte results in row-major
block order.
"""

from bc5.block import BLOCK_SIZE, ENCODED_BLOCK_SIZE, compress_block
from bc5.errors import InvalidDimensionsError
from bc5.image import RGBAImage
from bc5.tiler import block_count, map_blocks, tile


class CompressParams:
    """Compression settings."""

    def __init__(self, workers: int = 1) -> None:
        """
        Initialize compression parameters.

        Args:
            workers: Number of threads compressing blocks (1 = serial)
        """
        self.workers = workers


def check_dimensions(width: int, height: int) -> None:
    """
    Verify an image can be compressed.

    Raises:
        InvalidDimensionsError: If the image is not square or its size
            is not a multiple of 4
    """
    if width != height:
        raise InvalidDimensionsError(f"Image must be square, got {width}x{height}")
    if width % BLOCK_SIZE != 0:
        raise InvalidDimensionsError(
            f"Image size must be a multiple of {BLOCK_SIZE}, got {width}"
        )


def compress_image(image: RGBAImage, params: "CompressParams | None" = None) -> bytes:
    """
    Compress an image to BC5 block data.

    Blue and alpha are discarded.

    Args:
        image: Square source image with a size that is a multiple of 4
        params: Compression parameters (None = use defaults)

    Returns:
        Concatenated 16-byte blocks

    Raises:
        InvalidDimensionsError: If the image is not square or not a
            multiple of 4
    """
    if params is None:
        params = CompressParams()

    check_dimensions(image.width, image.height)

    blocks = tile(image)
    output = bytearray(block_count(image.width, image.height) * ENCODED_BLOCK_SIZE)

    def compress_one(i: int) -> None:
        pos = i * ENCODED_BLOCK_SIZE
        output[pos : pos + ENCODED_BLOCK_SIZE] = compress_block(blocks[i])

    map_blocks(compress_one, len(blocks), params.workers)

    return bytes(output)
