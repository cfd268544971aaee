"""
In-memory RGBA pixel buffer.

RGBAImage is the pixel source for compression and the pixel sink for
decompression. Pixels are stored row-major, 4 bytes per pixel in
R, G, B, A order, with a row stride of width * 4 bytes.

Pixels are exchanged as (r, g, b, a) tuples of ints in [0, 255].
"""

from bc5.errors import InvalidDimensionsError, InvalidLengthError

BYTES_PER_PIXEL = 4
ZERO_PIXEL = (0, 0, 0, 0)


class RGBAImage:
    """Fixed-size RGBA image backed by a bytearray."""

    def __init__(self, width: int, height: int, pix: "bytes | None" = None) -> None:
        """
        Initialize an image.

        Args:
            width: Width in pixels
            height: Height in pixels
            pix: Initial pixel bytes (None = all zeros)

        Raises:
            InvalidDimensionsError: If width or height is negative
            InvalidLengthError: If pix is not width * height * 4 bytes
        """
        if width < 0 or height < 0:
            raise InvalidDimensionsError(f"Invalid image size {width}x{height}")

        self.width = width
        self.height = height
        self.stride = width * BYTES_PER_PIXEL

        size = self.stride * height
        if pix is None:
            self.pix = bytearray(size)
        else:
            if len(pix) != size:
                raise InvalidLengthError(
                    f"Pixel data must be {size} bytes for {width}x{height}, "
                    f"got {len(pix)}"
                )
            self.pix = bytearray(pix)

    @classmethod
    def from_bytes(cls, data: bytes, width: int, height: int) -> "RGBAImage":
        """Create an image from raw row-major RGBA bytes."""
        return cls(width, height, data)

    def to_bytes(self) -> bytes:
        """Return the raw row-major RGBA bytes."""
        return bytes(self.pix)

    def _offset(self, x: int, y: int) -> int:
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            raise IndexError(
                f"Pixel ({x}, {y}) out of range for {self.width}x{self.height}"
            )
        return y * self.stride + x * BYTES_PER_PIXEL

    def get_pixel(self, x: int, y: int) -> tuple:
        """
        Get the pixel at (x, y).

        Returns:
            (r, g, b, a) tuple

        Raises:
            IndexError: If (x, y) is outside the image
        """
        i = self._offset(x, y)
        return tuple(self.pix[i : i + BYTES_PER_PIXEL])

    def set_pixel(self, x: int, y: int, pixel: tuple) -> None:
        """
        Set the pixel at (x, y).

        Args:
            x: Column
            y: Row
            pixel: (r, g, b, a) tuple

        Raises:
            IndexError: If (x, y) is outside the image
        """
        i = self._offset(x, y)
        self.pix[i : i + BYTES_PER_PIXEL] = bytes(pixel)

    def sub_image(self, x: int, y: int, width: int, height: int) -> "RGBAImage":
        """
        Copy a rectangular region into a new image.

        Raises:
            IndexError: If the region extends outside the image
        """
        if x < 0 or y < 0 or x + width > self.width or y + height > self.height:
            raise IndexError(
                f"Region ({x}, {y}, {width}x{height}) out of range for "
                f"{self.width}x{self.height}"
            )

        result = RGBAImage(width, height)
        row_bytes = width * BYTES_PER_PIXEL
        for row in range(height):
            src = (y + row) * self.stride + x * BYTES_PER_PIXEL
            dst = row * result.stride
            result.pix[dst : dst + row_bytes] = self.pix[src : src + row_bytes]
        return result

    def pixels(self):
        """Yield every pixel in row-major order."""
        for i in range(0, len(self.pix), BYTES_PER_PIXEL):
            yield tuple(self.pix[i : i + BYTES_PER_PIXEL])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RGBAImage):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self.pix == other.pix
        )

    def __repr__(self) -> str:
        return f"RGBAImage({self.width}x{self.height})"
