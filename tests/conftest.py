"""Pytest configuration and fixtures."""

import pytest

from bc5.image import RGBAImage


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--fast",
        action="store_true",
        default=False,
        help="Skip slow tests (large test vectors, threaded round-trips)",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests when --fast flag is used."""
    if config.getoption("--fast"):
        skip_slow = pytest.mark.skip(reason="skipped with --fast flag")
        for item in items:
            if "slow" in item.keywords:
                item.add_marker(skip_slow)


def make_solid(width: int, height: int, pixel: tuple) -> RGBAImage:
    """Create an image filled with a single pixel value."""
    return RGBAImage(width, height, bytes(pixel) * (width * height))


def make_pattern(width: int, height: int) -> RGBAImage:
    """Create a deterministic image with varied red and green values."""
    image = RGBAImage(width, height)
    for y in range(height):
        for x in range(width):
            image.set_pixel(
                x,
                y,
                ((x * 37 + y * 11) % 256, (x * 13 + y * 53) % 256, 77, 255),
            )
    return image


@pytest.fixture
def solid_8x8() -> RGBAImage:
    """8x8 image with R=100, G=200 everywhere."""
    return make_solid(8, 8, (100, 200, 50, 255))


@pytest.fixture
def pattern_16x16() -> RGBAImage:
    """16x16 image with varied red and green values."""
    return make_pattern(16, 16)
