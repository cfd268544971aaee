"""
Conversion between RGBAImage and Pillow images.
"""

from PIL import Image

from bc5.image import RGBAImage


def from_pil(img: Image.Image) -> RGBAImage:
    """Convert a Pillow image of any mode to an RGBAImage."""
    if img.mode != "RGBA":
        img = img.convert("RGBA")
    width, height = img.size
    return RGBAImage(width, height, img.tobytes())


def to_pil(image: RGBAImage) -> Image.Image:
    """Convert an RGBAImage to a Pillow image in RGBA mode."""
    return Image.frombytes("RGBA", (image.width, image.height), image.to_bytes())


def load_image(path: str) -> RGBAImage:
    """Load any image format Pillow can read."""
    with Image.open(path) as img:
        return from_pil(img)


def save_image(image: RGBAImage, path: str) -> None:
    """Save an image; the format follows the file extension."""
    to_pil(image).save(path)
