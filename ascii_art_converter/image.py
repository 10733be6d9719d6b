"""
Image to ASCII Converter

Decodes an image, reduces it to a grid of Luma samples and maps each sample
to a character from the symbol map.

Pipeline:
1. Decode with Pillow (ReadError / DecodeError on failure)
2. Flatten alpha onto white and convert to grayscale
3. Scale down to the ASCII grid, widening columns for tall glyphs
4. Area-average each cell and look up its symbol
"""

from typing import BinaryIO, Optional, Union
import io

import cv2
import numpy as np
from PIL import Image, UnidentifiedImageError

from .config import ConverterConfig
from .dimension import Dimension
from .errors import DecodeError, ReadError
from .symbol_map import SYMBOL_FOR_BRIGHTNESS


ImageSource = Union[bytes, bytearray, BinaryIO]


def load_image(source: ImageSource) -> Image.Image:
    """
    Decode image data into a fully loaded PIL Image.

    Args:
        source: Raw image bytes or a seekable binary file object

    Raises:
        ReadError: if the image format cannot be recognized
        DecodeError: if the format is known but the data is malformed
    """
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)

    try:
        image = Image.open(source)
    except UnidentifiedImageError as e:
        raise ReadError(str(e)) from e
    except (OSError, EOFError, SyntaxError, ValueError, Image.DecompressionBombError) as e:
        raise DecodeError(str(e)) from e

    try:
        image.load()
    except (OSError, EOFError, SyntaxError, ValueError) as e:
        raise DecodeError(str(e)) from e

    return image


def to_luma(image: Image.Image) -> Image.Image:
    """Convert any image mode to 8-bit grayscale, flattening alpha onto white."""
    if image.mode == "L" and "transparency" not in image.info:
        return image

    if image.mode in ("RGBA", "LA", "PA") or "transparency" in image.info:
        rgba = image.convert("RGBA")
        background = Image.new("RGBA", rgba.size, (255, 255, 255, 255))
        image = Image.alpha_composite(background, rgba)

    return image.convert("L")


class SourceImage:
    """
    An image that can be converted to ASCII text.

    Example:
        >>> with open("goldfish.jpeg", "rb") as f:
        ...     print(SourceImage(f).convert_to_ascii())
    """

    def __init__(self, source: ImageSource, config: Optional[ConverterConfig] = None):
        self.source = source
        self.config = config or ConverterConfig()

    def grid_dimensions(self, image_size) -> Dimension:
        """
        Character grid for an image of the given (width, height).

        The image is scaled down to max_ascii_dimension, then the column count
        is multiplied by glyph_aspect_ratio so the text keeps the image's shape.
        """
        dimension = Dimension.from_size(image_size)
        dimension.scale_down(self.config.max_ascii_dimension)
        dimension.width *= self.config.glyph_aspect_ratio
        return dimension

    def sample(self, luma: Image.Image) -> np.ndarray:
        """Area-average the grayscale image down to one value per character cell."""
        grid = self.grid_dimensions(luma.size)
        if grid.is_empty:
            return np.zeros((grid.height, grid.width), dtype=np.uint8)

        pixels = np.array(luma, dtype=np.uint8)
        return cv2.resize(pixels, grid.size, interpolation=cv2.INTER_AREA)

    def convert_to_ascii(self) -> str:
        """
        Convert the image to ASCII art, one '\\n'-terminated line per row.

        Raises:
            ReadError: if the image format cannot be recognized
            DecodeError: if the image data is malformed
        """
        luma = to_luma(load_image(self.source))
        cells = self.sample(luma)

        chars = SYMBOL_FOR_BRIGHTNESS[cells]
        return "".join("".join(row) + "\n" for row in chars)
