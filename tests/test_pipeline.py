"""
End-to-end tests for the public conversion functions.

Reference fixtures in tests/assets are committed and can be rebuilt with
scripts/generate_fixtures.py.
"""

import io
import os
import threading
import unittest

import numpy as np
from PIL import Image

from ascii_art_converter import (
    AsciiArtConverter,
    ConverterConfig,
    DecodeError,
    ReadError,
    UnknownASCIISymbol,
    ascii_to_image,
    image_to_ascii,
)

ASSETS = os.path.join(os.path.dirname(__file__), "assets")


def asset(name: str) -> str:
    return os.path.join(ASSETS, name)


class TestPipeline(unittest.TestCase):

    def test_round_trip_dark_block(self):
        """20x10 '$' -> 250x250 black PNG -> 200x100 grid of '$'."""
        text = "\n".join(["$" * 20] * 10)
        png = ascii_to_image(text)
        self.assertEqual(image_to_ascii(png), ("$" * 200 + "\n") * 100)

    def test_unknown_symbol(self):
        with self.assertRaises(UnknownASCIISymbol) as ctx:
            ascii_to_image("P")
        self.assertEqual(ctx.exception, UnknownASCIISymbol("P"))

    def test_bad_image_data(self):
        with self.assertRaises((ReadError, DecodeError)):
            image_to_ascii(b"\x00\x01\x02 not an image")

    def test_converter_shares_config(self):
        converter = AsciiArtConverter(ConverterConfig(min_image_dimension=100, glyph_aspect_ratio=1))
        png = converter.to_image("$$")
        self.assertEqual(Image.open(io.BytesIO(png)).size, (100, 50))

        text = converter.to_ascii(png)
        self.assertEqual(text, ("$" * 100 + "\n") * 50)

    def test_concurrent_calls(self):
        with open(asset("castle.txt"), encoding="utf-8") as f:
            text = f.read()
        expected = ascii_to_image(text)

        results = []

        def worker():
            results.append(ascii_to_image(text))

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(len(results), 4)
        self.assertTrue(all(r == expected for r in results))


class TestReferenceFixtures(unittest.TestCase):

    def test_bands_match_reference_ascii(self):
        # 8x6 rows of 0, 50, 100, 150, 200, 255 -> columns doubled, one symbol per row
        with open(asset("bands.txt"), encoding="utf-8", newline="") as f:
            expected = f.read()
        with open(asset("bands.pgm"), "rb") as f:
            self.assertEqual(image_to_ascii(f), expected)

    def test_dark_block_matches_reference_raster(self):
        with open(asset("dark_block.txt"), encoding="utf-8") as f:
            text = f.read()
        with Image.open(asset("dark_block.pgm")) as reference:
            expected = np.array(reference)

        image = Image.open(io.BytesIO(ascii_to_image(text)))
        self.assertEqual(image.format, "PNG")
        self.assertEqual(image.mode, "L")
        self.assertEqual(image.size, (250, 250))
        np.testing.assert_array_equal(np.array(image), expected)


if __name__ == '__main__':
    unittest.main()
