"""
ASCII <-> Image Pipeline

Public interface for both conversion directions:
- ascii_to_image(): ASCII text -> PNG bytes
- image_to_ascii(): image bytes or binary file -> ASCII text

Both are pure in-memory transformations and safe to call concurrently.
"""

from typing import Optional

from .ascii import AsciiArt
from .config import ConverterConfig
from .image import ImageSource, SourceImage


class AsciiArtConverter:
    """
    Bidirectional ASCII art converter sharing one configuration.

    Example:
        >>> converter = AsciiArtConverter()
        >>> png = converter.to_image("$@B%\\n.  .")
        >>> text = converter.to_ascii(png)
    """

    def __init__(self, config: Optional[ConverterConfig] = None):
        self.config = config or ConverterConfig()

    def to_image(self, text: str) -> bytes:
        """
        Convert ASCII art to PNG bytes.

        Raises:
            UnknownASCIISymbol: if the text has a character outside the symbol map
            WriteError: if the PNG could not be written
        """
        return AsciiArt(text, self.config).convert_to_image()

    def to_ascii(self, source: ImageSource) -> str:
        """
        Convert image bytes (or a seekable binary file) to ASCII art.

        Raises:
            ReadError: if the image format is not recognized
            DecodeError: if the image data is malformed
        """
        return SourceImage(source, self.config).convert_to_ascii()


# Convenience functions for quick usage
def ascii_to_image(text: str, config: Optional[ConverterConfig] = None) -> bytes:
    """Convert ASCII art to PNG bytes."""
    return AsciiArtConverter(config).to_image(text)


def image_to_ascii(source: ImageSource, config: Optional[ConverterConfig] = None) -> str:
    """Convert an image to ASCII art."""
    return AsciiArtConverter(config).to_ascii(source)
