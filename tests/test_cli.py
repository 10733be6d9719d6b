import contextlib
import io
import os
import shutil
import struct
import tempfile
import unittest
import zlib
from unittest.mock import patch

from PIL import Image

from ascii_art_converter.cli import main

ASSETS = os.path.join(os.path.dirname(__file__), "assets")
CLEAN_ENV = {
    "ASCII_ART_MIN_IMAGE_DIMENSION": "",
    "ASCII_ART_MAX_ASCII_DIMENSION": "",
    "ASCII_ART_GLYPH_ASPECT_RATIO": "",
}


@patch.dict(os.environ, CLEAN_ENV)
class TestCli(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.mkdtemp()
        self.castle = os.path.join(self.tmp, "castle.txt")
        shutil.copy(os.path.join(ASSETS, "castle.txt"), self.castle)

    def tearDown(self):
        shutil.rmtree(self.tmp)

    def run_cli(self, *argv):
        out, err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            code = main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def write_text(self, name, text):
        path = os.path.join(self.tmp, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        return path

    def test_to_image(self):
        output_dir = os.path.join(self.tmp, "output")
        code, out, _ = self.run_cli("to-image", self.castle, "--output-dir", output_dir)

        self.assertEqual(code, 0)
        png_path = os.path.join(output_dir, "castle.png")
        self.assertTrue(os.path.exists(png_path))
        self.assertIn("directory created", out)
        self.assertEqual(Image.open(png_path).size, (250, 205))

    def test_to_image_then_to_ascii(self):
        output_dir = os.path.join(self.tmp, "output")
        self.run_cli("to-image", self.castle, "-o", output_dir)

        txt_path = os.path.join(self.tmp, "castle_back.txt")
        code, _, _ = self.run_cli("to-ascii", os.path.join(output_dir, "castle.png"), "-o", txt_path)

        self.assertEqual(code, 0)
        with open(txt_path, encoding="utf-8") as f:
            lines = f.read().splitlines()
        # 250x205 -> 100x82 -> 200 columns
        self.assertEqual(len(lines), 82)
        self.assertTrue(all(len(line) == 200 for line in lines))

    def test_to_ascii_prints(self):
        image_path = os.path.join(self.tmp, "black.png")
        Image.new('L', (4, 2), 0).save(image_path)

        code, out, _ = self.run_cli("to-ascii", image_path)
        self.assertEqual(code, 0)
        self.assertEqual(out, "$$$$$$$$\n$$$$$$$$\n")

    def test_config_overrides(self):
        image_path = os.path.join(self.tmp, "black.png")
        Image.new('L', (4, 2), 0).save(image_path)

        code, out, _ = self.run_cli("--glyph-aspect", "1", "to-ascii", image_path)
        self.assertEqual(code, 0)
        self.assertEqual(out, "$$$$\n$$$$\n")

    def test_unknown_symbol(self):
        path = self.write_text("hello.txt", "Hello!")
        code, _, err = self.run_cli("to-image", path, "-o", self.tmp)
        self.assertEqual(code, 1)
        self.assertIn("'H'", err)

    def test_not_ascii(self):
        path = self.write_text("blocks.txt", "░▒▓")
        code, _, _ = self.run_cli("to-image", path, "-o", self.tmp)
        self.assertEqual(code, 1)

    def test_unsupported_image(self):
        gif_path = os.path.join(self.tmp, "anim.gif")
        Image.new('L', (4, 4), 0).save(gif_path)
        code, _, err = self.run_cli("to-ascii", gif_path)
        self.assertEqual(code, 1)
        self.assertIn("unsupported image type", err)

    def test_oversized_image(self):
        def chunk(tag, data):
            return struct.pack(">I", len(data)) + tag + data + struct.pack(">I", zlib.crc32(tag + data))

        image_path = os.path.join(self.tmp, "huge.png")
        with open(image_path, "wb") as f:
            f.write(b"\x89PNG\r\n\x1a\n")
            f.write(chunk(b"IHDR", struct.pack(">IIBBBBB", 20000, 20000, 8, 0, 0, 0, 0)))
            f.write(chunk(b"IEND", b""))

        code, _, err = self.run_cli("to-ascii", image_path)
        self.assertEqual(code, 1)
        self.assertIn("Oops", err)

    def test_missing_file(self):
        code, _, err = self.run_cli("to-ascii", os.path.join(self.tmp, "nope.png"))
        self.assertEqual(code, 1)
        self.assertIn("Can't open file", err)

    def test_invalid_override(self):
        code, _, _ = self.run_cli("--min-dimension", "0", "to-image", self.castle, "-o", self.tmp)
        self.assertEqual(code, 1)


if __name__ == '__main__':
    unittest.main()
