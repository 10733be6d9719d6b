"""
ASCII Art Converter

Converts ASCII art to grayscale PNG images and images back to ASCII art:
- Symbol map: 70 density-ordered characters <-> brightness bytes
- Aspect-ratio preserving scaling in both directions
- Pillow for decoding/encoding, OpenCV for area-averaged sampling
"""

__version__ = "0.1.0"

from .config import ConverterConfig
from .dimension import Dimension
from .errors import (
    ConvertError,
    DecodeError,
    ReadError,
    UnknownASCIISymbol,
    WriteError,
)
from .pipeline import AsciiArtConverter, ascii_to_image, image_to_ascii
from .symbol_map import SYMBOLS, brightness_for_symbol, symbol_for_brightness

__all__ = [
    "AsciiArtConverter",
    "ConverterConfig",
    "ConvertError",
    "DecodeError",
    "Dimension",
    "ReadError",
    "SYMBOLS",
    "UnknownASCIISymbol",
    "WriteError",
    "ascii_to_image",
    "brightness_for_symbol",
    "image_to_ascii",
    "symbol_for_brightness",
]
