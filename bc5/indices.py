"""
Packing of 3-bit palette indices.

A BC5 channel stores sixteen 3-bit indices in a 48-bit field.

Bit Ordering:
Index i (i = 0 is the first pixel in scan order) occupies bits
[3i, 3i + 3) of the field, counted from the LSB. The field is stored as
6 bytes big-endian, so the first pixel lands in the low bits of the
last byte.
"""

from bc5.errors import InvalidLengthError

INDEX_BITS = 3
INDEX_COUNT = 16
INDEX_MASK = (1 << INDEX_BITS) - 1
PACKED_SIZE = 6


def pack_indices(indices: list) -> bytes:
    """
    Pack 16 palette indices into 6 bytes.

    Args:
        indices: Sixteen values in [0, 7]

    Returns:
        6-byte big-endian field

    Raises:
        InvalidLengthError: If there are not exactly 16 indices
        ValueError: If an index is outside [0, 7]
    """
    if len(indices) != INDEX_COUNT:
        raise InvalidLengthError(
            f"Expected {INDEX_COUNT} indices, got {len(indices)}"
        )

    value = 0
    for i, ix in enumerate(indices):
        if ix < 0 or ix > INDEX_MASK:
            raise ValueError(f"Index {ix} at position {i} out of range [0, 7]")
        value |= ix << (INDEX_BITS * i)

    return value.to_bytes(PACKED_SIZE, "big")


def unpack_indices(data: bytes) -> list:
    """
    Unpack 16 palette indices from 6 bytes.

    Args:
        data: 6-byte big-endian field

    Returns:
        List of sixteen indices in [0, 7]

    Raises:
        InvalidLengthError: If data is not exactly 6 bytes
    """
    if len(data) != PACKED_SIZE:
        raise InvalidLengthError(
            f"Index field must be {PACKED_SIZE} bytes, got {len(data)}"
        )

    value = int.from_bytes(data, "big")
    return [(value >> (INDEX_BITS * i)) & INDEX_MASK for i in range(INDEX_COUNT)]
