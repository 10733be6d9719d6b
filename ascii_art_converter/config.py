"""
Converter Configuration

Policy constants for both conversion directions, with optional overrides
from the environment.
"""

from dataclasses import dataclass
import os


DEFAULT_MIN_IMAGE_DIMENSION = 500
DEFAULT_MAX_ASCII_DIMENSION = 100
DEFAULT_GLYPH_ASPECT_RATIO = 2

ENV_MIN_IMAGE_DIMENSION = "ASCII_ART_MIN_IMAGE_DIMENSION"
ENV_MAX_ASCII_DIMENSION = "ASCII_ART_MAX_ASCII_DIMENSION"
ENV_GLYPH_ASPECT_RATIO = "ASCII_ART_GLYPH_ASPECT_RATIO"


@dataclass(frozen=True)
class ConverterConfig:
    """Configuration for ASCII <-> image conversion."""
    min_image_dimension: int = DEFAULT_MIN_IMAGE_DIMENSION  # Larger image side, in pixels, for ASCII -> image
    max_ascii_dimension: int = DEFAULT_MAX_ASCII_DIMENSION  # Larger grid side, before widening, for image -> ASCII
    glyph_aspect_ratio: int = DEFAULT_GLYPH_ASPECT_RATIO    # Character cells are ~2x taller than wide

    def __post_init__(self):
        for name in ("min_image_dimension", "max_ascii_dimension", "glyph_aspect_ratio"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

    @classmethod
    def from_env(cls) -> "ConverterConfig":
        """
        Build a config, letting environment variables override the defaults.

        Reads ASCII_ART_MIN_IMAGE_DIMENSION, ASCII_ART_MAX_ASCII_DIMENSION and
        ASCII_ART_GLYPH_ASPECT_RATIO. Unset or empty variables keep the default.
        """
        return cls(
            min_image_dimension=_int_from_env(ENV_MIN_IMAGE_DIMENSION, DEFAULT_MIN_IMAGE_DIMENSION),
            max_ascii_dimension=_int_from_env(ENV_MAX_ASCII_DIMENSION, DEFAULT_MAX_ASCII_DIMENSION),
            glyph_aspect_ratio=_int_from_env(ENV_GLYPH_ASPECT_RATIO, DEFAULT_GLYPH_ASPECT_RATIO),
        )


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
