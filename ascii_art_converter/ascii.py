"""
ASCII to Image Converter

Turns ASCII art into a grayscale PNG. Each character becomes one pixel whose
brightness comes from the symbol map; the raster is then scaled up to a
viewable size and narrowed to undo the tall shape of monospace glyphs.
"""

from typing import List, Optional
import io

import numpy as np
from PIL import Image

from .config import ConverterConfig
from .dimension import Dimension
from .errors import WriteError
from .symbol_map import brightness_for_symbol


def split_lines(text: str) -> List[str]:
    """
    Split text into lines the way a text file reader does.

    Lines end at '\\n' (an optional '\\r' before it is dropped) and a final
    terminator does not start an extra empty line.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class AsciiArt:
    """
    ASCII text that can be converted to a PNG.

    Example:
        >>> png_bytes = AsciiArt("$@B\\n. .").convert_to_image()
    """

    def __init__(self, text: str, config: Optional[ConverterConfig] = None):
        self.config = config or ConverterConfig()
        self._lines = split_lines(text)

    def get_dimensions(self) -> Dimension:
        """
        Size of the text block: width is the longest line in characters,
        height is the number of lines.
        """
        width = max((len(line) for line in self._lines), default=0)
        return Dimension(width=width, height=len(self._lines))

    def to_raster(self) -> np.ndarray:
        """
        Build the 1-char-to-1-pixel brightness raster.

        Cells past the end of a short line stay at 0.

        Raises:
            UnknownASCIISymbol: on the first character not in the symbol map
        """
        dimension = self.get_dimensions()
        raster = np.zeros((dimension.height, dimension.width), dtype=np.uint8)

        for row, line in enumerate(self._lines):
            for col, char in enumerate(line):
                raster[row, col] = brightness_for_symbol(char)

        return raster

    def convert_to_image(self) -> bytes:
        """
        Convert the text to PNG bytes.

        Raises:
            UnknownASCIISymbol: if the text contains an unsupported character
            WriteError: if the PNG cannot be written (including empty text)
        """
        raster = self.to_raster()

        dimension = self.get_dimensions()
        if dimension.is_empty:
            raise WriteError("cannot encode an empty image")

        dimension.scale_up(self.config.min_image_dimension)

        # Fonts draw ASCII taller than it is wide, so narrow the image to match.
        target_size = (
            max(1, dimension.width // self.config.glyph_aspect_ratio),
            dimension.height,
        )
        image = Image.fromarray(raster).resize(target_size, Image.Resampling.BILINEAR)

        buffer = io.BytesIO()
        try:
            image.save(buffer, format="PNG")
        except (OSError, ValueError) as e:
            raise WriteError(str(e)) from e

        return buffer.getvalue()
