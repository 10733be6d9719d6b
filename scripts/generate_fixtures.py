"""
Generate the reference fixtures used by tests/test_pipeline.py.

- tests/assets/bands.pgm: 8x6 grayscale image, one flat brightness per row
- tests/assets/bands.txt: the ASCII expected from bands.pgm
- tests/assets/dark_block.txt: 20x10 block of '$'
- tests/assets/dark_block.pgm: the 250x250 raster expected from dark_block.txt

Expected outputs are built from the symbol table and pixel values, not by
running the converter, so the tests stay independent of it.
"""

import os
import sys

import numpy as np
from PIL import Image

# Add project to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ascii_art_converter.symbol_map import symbol_for_brightness

ASSETS = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "tests", "assets")

BAND_LEVELS = (0, 50, 100, 150, 200, 255)
BAND_WIDTH = 8


def create_bands_image():
    """One row per level; rows are flat so the area resize is exact."""
    rows = np.repeat(np.array(BAND_LEVELS, dtype=np.uint8)[:, None], BAND_WIDTH, axis=1)
    return Image.fromarray(rows)


def main():
    print("🎨 Generating band image...")
    create_bands_image().save(os.path.join(ASSETS, "bands.pgm"))
    with open(os.path.join(ASSETS, "bands.txt"), "w", encoding="utf-8", newline="") as f:
        for level in BAND_LEVELS:
            f.write(symbol_for_brightness(level) * BAND_WIDTH * 2 + "\n")
    print("✅ Saved 'tests/assets/bands.pgm' and 'tests/assets/bands.txt'")

    print("\n🏁 Generating dark block...")
    with open(os.path.join(ASSETS, "dark_block.txt"), "w", encoding="utf-8", newline="") as f:
        f.write(("$" * 20 + "\n") * 10)
    Image.new('L', (250, 250), 0).save(os.path.join(ASSETS, "dark_block.pgm"))
    print("✅ Saved 'tests/assets/dark_block.txt' and 'tests/assets/dark_block.pgm'")


if __name__ == "__main__":
    main()
