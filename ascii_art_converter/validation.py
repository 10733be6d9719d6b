"""
Input validation for callers that accept user-submitted text or images.

These checks run before conversion so front ends can reject bad submissions
with a friendly message instead of a conversion error.
"""

from typing import Optional
import io

from PIL import Image

from .errors import EmptyInputError, NotAsciiInputError, UnsupportedImageTypeError


SUPPORTED_IMAGE_FORMATS = ("PNG", "JPEG")


def validate_ascii_input(text: Optional[str]) -> str:
    """
    Check that submitted ASCII art is present and is 7-bit ASCII.

    Returns:
        The text, unchanged

    Raises:
        EmptyInputError: if the text is empty
        NotAsciiInputError: if the text has non-ASCII characters
    """
    if not text:
        raise EmptyInputError("no ASCII text was submitted")
    if not text.isascii():
        raise NotAsciiInputError("text contains non-ASCII characters")
    return text


def detect_image_format(data: bytes) -> Optional[str]:
    """Sniff the image format from its header, or None if unrecognized."""
    try:
        with Image.open(io.BytesIO(data)) as image:
            return image.format
    except (OSError, EOFError, SyntaxError, ValueError, Image.DecompressionBombError):
        return None


def validate_image_input(data: Optional[bytes]) -> bytes:
    """
    Check that submitted image data is present and is a PNG or JPEG.

    Returns:
        The data, unchanged

    Raises:
        EmptyInputError: if no bytes were submitted
        UnsupportedImageTypeError: for any other format
    """
    if not data:
        raise EmptyInputError("no image was submitted")

    image_format = detect_image_format(data)
    if image_format not in SUPPORTED_IMAGE_FORMATS:
        raise UnsupportedImageTypeError(
            f"unsupported image type: {image_format or 'unknown'}. "
            f"Supported: {', '.join(SUPPORTED_IMAGE_FORMATS)}"
        )
    return data
