"""
BC5 container format.

Layout (all integers big-endian):

    Bytes 0-3:   signature "BC5 " (0x42433520)
    Bytes 4-7:   width in pixels (u32)
    Bytes 8-11:  height in pixels (u32)
    Bytes 12-:   concatenated 16-byte blocks in row-major block order

The blue reconstruction mode is not stored; decoded images use
BlueMode.ZERO until the caller changes it.
"""

import struct

from bc5.decompress import BC5Image
from bc5.errors import BadSignatureError, TruncatedError

SIGNATURE = b"BC5 "
HEADER_FORMAT = ">III"
HEADER_SIZE = struct.calcsize(HEADER_FORMAT)


def str_to_dword(s: str) -> int:
    """Interpret a 4-character ASCII string as a big-endian u32."""
    return struct.unpack(">I", s.encode("ascii"))[0]


SIGNATURE_DWORD = str_to_dword(SIGNATURE.decode("ascii"))


def encode_header(width: int, height: int) -> bytes:
    """Build the 12-byte container header."""
    return struct.pack(HEADER_FORMAT, SIGNATURE_DWORD, width, height)


def decode_bytes(data: bytes) -> BC5Image:
    """
    Decode a BC5 container from bytes.

    Args:
        data: Complete container bytes

    Returns:
        Decoded BC5Image

    Raises:
        TruncatedError: If the header is incomplete or no block data follows
        BadSignatureError: If the signature is not "BC5 "
    """
    if len(data) < HEADER_SIZE:
        raise TruncatedError("not enough data for BC5")

    signature, width, height = struct.unpack_from(HEADER_FORMAT, data)
    if signature != SIGNATURE_DWORD:
        raise BadSignatureError("invalid file signature")

    if len(data) < HEADER_SIZE + 1:
        raise TruncatedError("no image data found")

    return BC5Image(bytes(data[HEADER_SIZE:]), width, height)


def decode(stream) -> BC5Image:
    """
    Read and decode a BC5 container from a binary stream.

    The stream is read to the end.
    """
    return decode_bytes(stream.read())


def encode_bytes(img: BC5Image) -> bytes:
    """Encode a BC5Image as container bytes."""
    return encode_header(img.width, img.height) + img.data


def encode(img: BC5Image, stream) -> None:
    """
    Write a BC5Image to a binary stream.

    The header is written first, then the block data.

    Raises:
        OSError: If either write is short
    """
    n = stream.write(encode_header(img.width, img.height))
    if n != HEADER_SIZE:
        raise OSError("failed to write header")

    n = stream.write(img.data)
    if n != len(img.data):
        raise OSError("failed to write image data")


def read_file(path: str) -> BC5Image:
    """Load a BC5 container file."""
    with open(path, "rb") as f:
        return decode(f)


def write_file(img: BC5Image, path: str) -> None:
    """Save a BC5Image as a container file."""
    with open(path, "wb") as f:
        encode(img, f)
