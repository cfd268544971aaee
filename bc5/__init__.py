"""
BC5 Red/Green Block Compression

Python implementation of the BC5 block compression format: each 4x4
block of a red/green image is stored in 16 bytes as two palette
references plus sixteen 3-bit indices per channel.
"""

__version__ = "1.0.0"

from bc5.block import BlueMode, compress_block, decompress_block
from bc5.compress import CompressParams, compress_image
from bc5.decompress import BC5Image, DecompressParams, decompress_image
from bc5.errors import (
    BadSignatureError,
    BC5Error,
    InvalidDimensionsError,
    InvalidLengthError,
    TruncatedError,
)
from bc5.image import RGBAImage
from bc5.tiler import point_query

__all__ = [
    "BC5Error",
    "BC5Image",
    "BadSignatureError",
    "BlueMode",
    "CompressParams",
    "DecompressParams",
    "InvalidDimensionsError",
    "InvalidLengthError",
    "RGBAImage",
    "TruncatedError",
    "__version__",
    "compress_block",
    "compress_image",
    "decompress_block",
    "decompress_image",
    "point_query",
]
