"""
Channel palette generation.

Each channel of a BC5 block stores two reference values (c0, c1). The
remaining six palette entries are derived from them:

- c0 > c1: six values interpolated in sevenths between c0 and c1
- c0 <= c1: four values interpolated in fifths, then the fixed values 0 and 1

All values are normalized floats in [0, 1].
"""

PALETTE_SIZE = 8

# (c0 weight, c1 weight) for entries 2..7 when c0 > c1
_SEVENTHS = ((6, 1), (5, 2), (4, 3), (3, 4), (2, 5), (1, 6))

# (c0 weight, c1 weight) for entries 2..5 when c0 <= c1
_FIFTHS = ((4, 1), (3, 2), (2, 3), (1, 4))


def normalize(v: int) -> float:
    """Convert a byte value to a float in [0, 1]."""
    return v / 255


def denormalize(v: float) -> int:
    """
    Convert a normalized float back to a byte value.

    The scaled value is truncated toward zero and stored into 8 bits, so
    values above 1.0 wrap around.
    """
    return int(v * 255) & 0xFF


def generate_palette(c0: float, c1: float) -> list:
    """
    Generate the 8-entry palette for one channel.

    Args:
        c0: First reference value (normalized)
        c1: Second reference value (normalized)

    Returns:
        List of 8 normalized palette values
    """
    palette = [c0, c1]
    if c0 > c1:
        for w0, w1 in _SEVENTHS:
            palette.append((w0 * c0 + w1 * c1) / 7)
    else:
        for w0, w1 in _FIFTHS:
            palette.append((w0 * c0 + w1 * c1) / 5)
        palette.append(0.0)
        palette.append(1.0)
    return palette


def nearest_index(palette: list, value: float) -> int:
    """
    Find the palette entry closest to value.

    Ties resolve to the lowest index.

    Args:
        palette: Normalized palette values
        value: Normalized channel value

    Returns:
        Index of the closest entry
    """
    best = 0
    for i in range(len(palette)):
        if abs(palette[i] - value) < abs(palette[best] - value):
            best = i
    return best
