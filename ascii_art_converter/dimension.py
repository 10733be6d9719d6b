"""
Dimensions for ASCII and image sizes.

Dimensions are scaled up or down so generated ASCII and images stay a
reasonable size for people to look at. Scaling always preserves the
width/height ratio, up to integer truncation.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class Dimension:
    """
    Width and height of an image or block of text.

    Attributes:
        width: Width in pixels (or characters)
        height: Height in pixels (or lines)
    """
    width: int = 0
    height: int = 0

    @classmethod
    def from_size(cls, size: Tuple[int, int]) -> "Dimension":
        """Create a Dimension from a PIL-style (width, height) tuple."""
        return cls(width=size[0], height=size[1])

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def scale_down(self, max_dimension: int):
        """Scale so neither side is larger than max_dimension."""
        if self.width <= max_dimension and self.height <= max_dimension:
            return
        self._scale(max_dimension)

    def scale_up(self, min_dimension: int):
        """Scale so the larger side is at least min_dimension."""
        if self.width >= min_dimension or self.height >= min_dimension:
            return
        self._scale(min_dimension)

    def _scale(self, factor: int):
        """
        Pin the larger side to factor and scale the other side by the same ratio.

        A zero-sized side has no ratio to preserve, so it is left alone.
        """
        if self.is_empty:
            return

        if self.width > self.height:
            ratio = self.height / self.width
            self.width, self.height = factor, int(factor * ratio)
        else:
            ratio = self.width / self.height
            self.width, self.height = int(factor * ratio), factor
