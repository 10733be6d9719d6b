"""
Symbol Map

Maps Luma brightness (0-255) to ASCII characters and back. The ramp is the
70-character density ramp from http://paulbourke.net/dataformats/asciiart/,
ordered from the most ink ('$') to the least (' ').

The byte range is cut into 70 contiguous buckets of BRIGHTNESS_DIVISOR width,
one per symbol.
"""

from typing import Dict
import numpy as np

from .errors import UnknownASCIISymbol


# ============================================================================
# SYMBOL TABLE
# ============================================================================

# Sorted by visual density (dark to light)
SYMBOLS = "$@B%8&WM#*oahkbdpqwmZO0QLCJUYXzcvunxrjft/\\|()1{}[]?-_+~<>i!lI;:,\"^`'. "

# Roughly 256 / 70
BRIGHTNESS_DIVISOR = 3.65


def symbol_for_brightness(brightness: int) -> str:
    """
    Map a brightness byte to a character in the symbol map.

    Args:
        brightness: Luma value in the range 0-255

    Returns:
        One of the 70 characters in SYMBOLS
    """
    if not 0 <= brightness <= 255:
        raise ValueError(f"brightness must be in 0-255, got {brightness}")
    return SYMBOLS[int(brightness / BRIGHTNESS_DIVISOR)]


def _first_byte_per_symbol() -> Dict[str, int]:
    # Walk downwards so each symbol keeps the lowest byte of its bucket.
    table = {}
    for brightness in range(255, -1, -1):
        table[symbol_for_brightness(brightness)] = brightness
    return table


_BRIGHTNESS_FOR_SYMBOL = _first_byte_per_symbol()

# Vectorized lookup: SYMBOL_FOR_BRIGHTNESS[luma_array] -> array of characters
SYMBOL_FOR_BRIGHTNESS = np.array([symbol_for_brightness(b) for b in range(256)])
SYMBOL_FOR_BRIGHTNESS.setflags(write=False)


def brightness_for_symbol(symbol: str) -> int:
    """
    Map a character in the symbol map to a brightness byte.

    The returned byte is the start of the symbol's bucket, so mapping it back
    with symbol_for_brightness() always gives the same symbol.
    Truncating position * BRIGHTNESS_DIVISOR would fall one bucket short for
    most symbols, so e.g. '@' maps to 4 rather than 3.

    Raises:
        UnknownASCIISymbol: if the character is not in the symbol map
    """
    try:
        return _BRIGHTNESS_FOR_SYMBOL[symbol]
    except KeyError:
        raise UnknownASCIISymbol(symbol) from None


def is_known_symbol(symbol: str) -> bool:
    """Check whether a character can be converted to a brightness."""
    return symbol in _BRIGHTNESS_FOR_SYMBOL
