"""
Full-image BC5 decompression and the BC5Image container type.

BC5Image holds compressed block data together with the image size and
the blue reconstruction mode used when it is decompressed.
"""

from bc5.block import ENCODED_BLOCK_SIZE, BlueMode, decompress_block
from bc5.compress import CompressParams, compress_image
from bc5.errors import InvalidLengthError
from bc5.image import RGBAImage
from bc5.tiler import block_count, map_blocks, point_query, untile


class DecompressParams:
    """Decompression settings."""

    def __init__(self, blue_mode: BlueMode = BlueMode.ZERO, workers: int = 1) -> None:
        """
        Initialize decompression parameters.

        Args:
            blue_mode: Blue reconstruction mode
            workers: Number of threads decompressing blocks (1 = serial)
        """
        self.blue_mode = BlueMode(blue_mode)
        self.workers = workers


def decompress_image(
    data: bytes,
    width: int,
    height: int,
    params: "DecompressParams | None" = None,
) -> RGBAImage:
    """
    Decompress BC5 block data into an image.

    Args:
        data: Concatenated 16-byte blocks in row-major block order
        width: Image width in pixels
        height: Image height in pixels
        params: Decompression parameters (None = use defaults)

    Returns:
        Decompressed image (alpha is 1 everywhere)

    Raises:
        InvalidLengthError: If data holds fewer blocks than width x height needs
    """
    if params is None:
        params = DecompressParams()

    count = block_count(width, height)
    if len(data) < count * ENCODED_BLOCK_SIZE:
        raise InvalidLengthError(
            f"{width}x{height} image needs {count * ENCODED_BLOCK_SIZE} bytes "
            f"of block data, got {len(data)}"
        )

    blocks = [None] * count

    def decompress_one(i: int) -> None:
        pos = i * ENCODED_BLOCK_SIZE
        blocks[i] = decompress_block(
            data[pos : pos + ENCODED_BLOCK_SIZE], params.blue_mode
        )

    map_blocks(decompress_one, len(blocks), params.workers)

    return untile(blocks, width, height)


class BC5Image:
    """BC5 compressed red/green image data."""

    def __init__(
        self,
        data: bytes = b"",
        width: int = 0,
        height: int = 0,
        blue_mode: BlueMode = BlueMode.ZERO,
    ) -> None:
        """
        Initialize a BC5 image.

        Args:
            data: Concatenated 16-byte blocks
            width: Image width in pixels
            height: Image height in pixels
            blue_mode: Blue reconstruction mode for decompression
        """
        self.data = bytes(data)
        self.width = width
        self.height = height
        self.blue_mode = BlueMode(blue_mode)

    @classmethod
    def from_image(
        cls, image: RGBAImage, params: "CompressParams | None" = None
    ) -> "BC5Image":
        """Compress an RGBA image into a new BC5Image."""
        result = cls()
        result.set_from_image(image, params)
        return result

    @property
    def rect(self) -> tuple:
        """(width, height) of the image."""
        return (self.width, self.height)

    @property
    def size(self) -> int:
        """Number of bytes of pixel data held (width * height)."""
        return self.width * self.height

    def set_from_image(
        self, image: RGBAImage, params: "CompressParams | None" = None
    ) -> None:
        """
        Replace the contents with the compressed form of image.

        Blue and alpha of the source are discarded.

        Raises:
            InvalidDimensionsError: If the image is not square or not a
                multiple of 4
        """
        self.data = compress_image(image, params)
        self.width = image.width
        self.height = image.height

    def decompress(self, params: "DecompressParams | None" = None) -> RGBAImage:
        """
        Decompress the whole image.

        Args:
            params: Decompression parameters (None = use this image's blue_mode)
        """
        if params is None:
            params = DecompressParams(blue_mode=self.blue_mode)
        return decompress_image(self.data, self.width, self.height, params)

    def at(self, x: int, y: int) -> tuple:
        """Decompress and return the pixel at (x, y)."""
        return point_query(self.data, self.width, self.height, self.blue_mode, x, y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BC5Image):
            return NotImplemented
        return (
            self.data == other.data
            and self.width == other.width
            and self.height == other.height
            and self.blue_mode == other.blue_mode
        )

    def __repr__(self) -> str:
        return (
            f"BC5Image({self.width}x{self.height}, {len(self.data)} bytes, "
            f"{self.blue_mode.name})"
        )
