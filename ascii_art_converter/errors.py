"""
Conversion Errors

Every failure the converter can report:
- ReadError: the image format could not be recognized
- DecodeError: the format was recognized but the content is malformed
- WriteError: the PNG encoder could not serialize the output
- UnknownASCIISymbol: text contains a character outside the symbol map

Input validation errors (raised before any conversion is attempted) live
under InputError so callers can tell "bad request" from "bad content".
"""


class ConvertError(Exception):
    """Base class for all conversion failures."""

    def __eq__(self, other):
        return type(self) is type(other) and self.args == other.args

    def __hash__(self):
        return hash((type(self), self.args))


class ReadError(ConvertError):
    """The image codec could not guess the input format."""


class DecodeError(ConvertError):
    """The image codec recognized the format but could not parse the data."""


class WriteError(ConvertError):
    """The PNG encoder failed to write the output buffer."""


class UnknownASCIISymbol(ConvertError):
    """
    Raised when text contains a character that is not in the symbol map.

    Attributes:
        symbol: The offending character
    """

    def __init__(self, symbol: str):
        super().__init__(symbol)
        self.symbol = symbol

    def __str__(self) -> str:
        return f"unsupported ASCII symbol: {self.symbol!r}"


# ============================================================================
# INPUT VALIDATION
# ============================================================================

class InputError(ValueError):
    """Base class for input rejected before conversion."""


class EmptyInputError(InputError):
    """No text or image data was supplied."""


class NotAsciiInputError(InputError):
    """Text contains characters outside 7-bit ASCII."""


class UnsupportedImageTypeError(InputError):
    """Image data is not a PNG or JPEG."""
