"""
Splitting images into 4x4 blocks and reassembling them.

Blocks are ordered row-major by block coordinate: block rows outer,
block columns inner.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed

from bc5.block import BLOCK_SIZE, ENCODED_BLOCK_SIZE, BlueMode, decompress_block
from bc5.errors import InvalidDimensionsError
from bc5.image import ZERO_PIXEL, RGBAImage


def block_count(width: int, height: int) -> int:
    """Number of 4x4 blocks covering a width x height image."""
    return (width // BLOCK_SIZE) * (height // BLOCK_SIZE)


def tile(image: RGBAImage, block_size: int = BLOCK_SIZE) -> list:
    """
    Split an image into blocks.

    Args:
        image: Source image (dimensions must be multiples of block_size)
        block_size: Block edge length in pixels

    Returns:
        List of block_size x block_size images in row-major block order

    Raises:
        InvalidDimensionsError: If a dimension is not a multiple of block_size
    """
    if image.width % block_size != 0 or image.height % block_size != 0:
        raise InvalidDimensionsError(
            f"Image size {image.width}x{image.height} is not a multiple "
            f"of {block_size}"
        )

    blocks = []
    for by in range(image.height // block_size):
        for bx in range(image.width // block_size):
            blocks.append(
                image.sub_image(bx * block_size, by * block_size, block_size, block_size)
            )
    return blocks


def untile(blocks: list, width: int, height: int) -> RGBAImage:
    """
    Reassemble decompressed blocks into a full image.

    Pixel (x, y) comes from block (y // 4) * (width // 4) + (x // 4)
    at in-block position (x % 4, y % 4).

    Args:
        blocks: 4x4 blocks in row-major block order
        width: Image width in pixels
        height: Image height in pixels

    Returns:
        Reassembled image
    """
    image = RGBAImage(width, height)
    blocks_per_row = width // BLOCK_SIZE
    for y in range(height):
        for x in range(width):
            block_ix = (y // BLOCK_SIZE) * blocks_per_row + (x // BLOCK_SIZE)
            image.set_pixel(
                x, y, blocks[block_ix].get_pixel(x % BLOCK_SIZE, y % BLOCK_SIZE)
            )
    return image


def point_query(
    data: bytes,
    width: int,
    height: int,
    blue_mode: BlueMode,
    x: int,
    y: int,
) -> tuple:
    """
    Decompress a single pixel without decompressing the whole image.

    Only the block holding (x, y) is decoded. The byte offset of that
    block is (y // 4) * height + (x // 4) * 16; the row term uses the
    image height, unlike untile().

    Args:
        data: Concatenated encoded blocks
        width: Image width in pixels
        height: Image height in pixels
        blue_mode: Blue reconstruction mode
        x: Column
        y: Row

    Returns:
        (r, g, b, a) tuple, or the zero pixel if (x, y) is out of bounds

    Raises:
        InvalidLengthError: If the block at the computed offset is cut short
    """
    if x < 0 or x >= width or y < 0 or y >= height:
        return ZERO_PIXEL

    offset = (y // BLOCK_SIZE) * height + (x // BLOCK_SIZE) * ENCODED_BLOCK_SIZE
    block = decompress_block(data[offset : offset + ENCODED_BLOCK_SIZE], blue_mode)
    return block.get_pixel(x % BLOCK_SIZE, y % BLOCK_SIZE)


def map_blocks(func, count: int, workers: int = 1) -> None:
    """
    Call func(index) for every block index in [0, count).

    With more than one worker the calls are spread over a thread pool.
    func is responsible for storing its result in the slot for its index.
    Exceptions raised by func propagate to the caller.

    Args:
        func: Callable taking a block index
        count: Number of blocks
        workers: Number of worker threads
    """
    indices = list(range(count))

    if workers <= 1 or count <= 1:
        for i in indices:
            func(i)
        return

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(func, i) for i in indices]
        for future in as_completed(futures):
            future.result()
