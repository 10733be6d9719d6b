#!/usr/bin/env python3
"""
ASCII Art Converter - Command Line

Usage:
    ascii-art-converter to-image castle.txt            # writes ./output/castle.png
    ascii-art-converter to-ascii goldfish.jpeg         # prints ASCII art
    ascii-art-converter --help
"""

import argparse
from dataclasses import replace
import os
import sys
from typing import List, Optional

from .config import ConverterConfig
from .errors import ConvertError
from .pipeline import AsciiArtConverter
from .validation import validate_ascii_input, validate_image_input


DEFAULT_OUTPUT_DIR = "./output"


def build_config(args: argparse.Namespace) -> ConverterConfig:
    """Start from the environment config and apply any command-line overrides."""
    overrides = {
        "min_image_dimension": args.min_dimension,
        "max_ascii_dimension": args.max_dimension,
        "glyph_aspect_ratio": args.glyph_aspect,
    }
    return replace(
        ConverterConfig.from_env(),
        **{name: value for name, value in overrides.items() if value is not None},
    )


def convert_text_file(converter: AsciiArtConverter, input_path: str, output_dir: str) -> str:
    """Convert an ASCII text file to a PNG in output_dir. Returns the PNG path."""
    with open(input_path, "r", encoding="utf-8") as f:
        text = validate_ascii_input(f.read())

    png = converter.to_image(text)

    if os.path.isdir(output_dir):
        print(f"📁 \"{output_dir}\" directory exists.")
    else:
        os.makedirs(output_dir)
        print(f"📁 \"{output_dir}\" directory created.")

    stem = os.path.basename(input_path).split(".")[0]
    output_path = os.path.join(output_dir, f"{stem}.png")
    print(f"🎨 Creating PNG file: {output_path}")
    with open(output_path, "wb") as f:
        f.write(png)

    return output_path


def convert_image_file(converter: AsciiArtConverter, input_path: str, output_path: Optional[str]) -> str:
    """Convert an image file to ASCII, printing it or saving it to output_path."""
    with open(input_path, "rb") as f:
        data = validate_image_input(f.read())

    ascii_text = converter.to_ascii(data)

    if output_path:
        os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(ascii_text)
        print(f"✅ Saved to {output_path}")
    else:
        print(ascii_text, end="")

    return ascii_text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ascii-art-converter",
        description="Convert ASCII art to images and images to ASCII art",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ascii-art-converter to-image castle.txt
    Write ./output/castle.png

  ascii-art-converter to-image castle.txt --output-dir pngs
    Write pngs/castle.png

  ascii-art-converter to-ascii goldfish.jpeg -o goldfish.txt
    Save the ASCII art instead of printing it
"""
    )

    parser.add_argument(
        "--min-dimension",
        type=int,
        default=None,
        help="Minimum size of the larger side of generated images (default: 500)"
    )

    parser.add_argument(
        "--max-dimension",
        type=int,
        default=None,
        help="Maximum size of the larger side of the ASCII grid (default: 100)"
    )

    parser.add_argument(
        "--glyph-aspect",
        type=int,
        default=None,
        help="How many times taller a character is than wide (default: 2)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    to_image = subparsers.add_parser("to-image", help="Convert an ASCII text file to a PNG")
    to_image.add_argument("input", help="Path to the ASCII text file")
    to_image.add_argument(
        "--output-dir", "-o",
        default=DEFAULT_OUTPUT_DIR,
        help=f"Directory for the PNG (default: {DEFAULT_OUTPUT_DIR})"
    )

    to_ascii = subparsers.add_parser("to-ascii", help="Convert a PNG or JPEG to ASCII art")
    to_ascii.add_argument("input", help="Path to the image")
    to_ascii.add_argument(
        "--output", "-o",
        default=None,
        help="Output text file (prints to stdout if omitted)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        converter = AsciiArtConverter(build_config(args))
        if args.command == "to-image":
            convert_text_file(converter, args.input, args.output_dir)
            print("✅ Done.")
        else:
            convert_image_file(converter, args.input, args.output)
    except (ConvertError, ValueError) as e:
        print(f"❌ Oops! There was a problem: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"❌ Can't open file: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
