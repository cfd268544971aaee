"""Tests for channel palette generation."""

import pytest

from bc5.palette import (
    PALETTE_SIZE,
    denormalize,
    generate_palette,
    nearest_index,
    normalize,
)


class TestNormalize:
    """Test byte/float conversion."""

    def test_normalize_range(self) -> None:
        """Test normalize maps 0 and 255 to 0.0 and 1.0."""
        assert normalize(0) == 0.0
        assert normalize(255) == 1.0

    def test_denormalize_truncates(self) -> None:
        """Test denormalize truncates toward zero."""
        assert denormalize(0.5) == 127
        assert denormalize(1.0) == 255
        assert denormalize(0.0) == 0

    def test_denormalize_wraps_to_byte(self) -> None:
        """Test values above 1.0 wrap around like an 8-bit store."""
        assert denormalize(2.0) == 254

    def test_every_byte_survives(self) -> None:
        """Test denormalize(normalize(v)) is exact for every byte."""
        for v in range(256):
            assert denormalize(normalize(v)) == v


class TestGeneratePalette:
    """Test palette generation."""

    def test_size(self) -> None:
        """Test palette always has 8 entries."""
        assert len(generate_palette(0.2, 0.8)) == PALETTE_SIZE
        assert len(generate_palette(0.8, 0.2)) == PALETTE_SIZE

    def test_endpoints_verbatim(self) -> None:
        """Test entries 0 and 1 are the reference values in given order."""
        pal = generate_palette(0.8, 0.2)
        assert pal[0] == 0.8
        assert pal[1] == 0.2

        pal = generate_palette(0.2, 0.8)
        assert pal[0] == 0.2
        assert pal[1] == 0.8

    def test_sevenths_when_c0_greater(self) -> None:
        """Test six interpolated entries when c0 > c1."""
        pal = generate_palette(1.0, 0.0)
        assert pal[2:] == pytest.approx([6 / 7, 5 / 7, 4 / 7, 3 / 7, 2 / 7, 1 / 7])

    def test_sevenths_weights(self) -> None:
        """Test weighting of both references in the c0 > c1 branch."""
        c0, c1 = 0.9, 0.3
        pal = generate_palette(c0, c1)
        assert pal[2] == pytest.approx((6 * c0 + 1 * c1) / 7)
        assert pal[7] == pytest.approx((1 * c0 + 6 * c1) / 7)

    def test_fifths_when_c0_not_greater(self) -> None:
        """Test four interpolated entries plus 0 and 1 when c0 <= c1."""
        pal = generate_palette(0.0, 1.0)
        assert pal[2:6] == pytest.approx([0.2, 0.4, 0.6, 0.8])
        assert pal[6] == 0
        assert pal[7] == 1

    def test_fixed_entries_ignore_references(self) -> None:
        """Test entries 6 and 7 are exactly 0 and 1 for any c0 <= c1."""
        for c0, c1 in [(0.1, 0.3), (0.5, 0.5), (0.9, 1.0), (0.0, 0.0)]:
            pal = generate_palette(c0, c1)
            assert pal[0] == c0
            assert pal[1] == c1
            assert pal[6] == 0
            assert pal[7] == 1

    def test_equal_references(self) -> None:
        """Test equal references take the fifths branch."""
        pal = generate_palette(0.4, 0.4)
        assert pal[2:6] == pytest.approx([0.4, 0.4, 0.4, 0.4])
        assert pal[6:] == [0.0, 1.0]


class TestNearestIndex:
    """Test nearest palette entry selection."""

    def test_exact_match(self) -> None:
        """Test a value equal to an entry selects it."""
        pal = generate_palette(0.0, 1.0)
        assert nearest_index(pal, 1.0) == 1
        assert nearest_index(pal, 0.4) == 3

    def test_closest(self) -> None:
        """Test a value between entries selects the closer one."""
        pal = generate_palette(0.0, 1.0)
        assert nearest_index(pal, 0.41) == 3
        assert nearest_index(pal, 0.79) == 5

    def test_tie_lowest_index(self) -> None:
        """Test ties go to the lowest index."""
        pal = generate_palette(0.0, 1.0)
        # Entries 0 and 6 are both 0.0
        assert nearest_index(pal, 0.0) == 0
        # Entries 1 and 7 are both 1.0
        assert nearest_index(pal, 1.0) == 1

    def test_degenerate_palette(self) -> None:
        """Test equal references select index 0."""
        pal = generate_palette(0.5, 0.5)
        assert nearest_index(pal, 0.5) == 0
