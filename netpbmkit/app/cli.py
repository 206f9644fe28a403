from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from ..codec.formats import FORMATS
from ..codec.types import Magic
from ..convert_job import ConvertJobBuilder, ConvertSettings
from ..rendering.converters import load_raster
from ..transport.file import FileTransport


def _parse_size(value: str) -> Tuple[int, int]:
    try:
        width, height = (int(part) for part in value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected WIDTHxHEIGHT, got {value!r}") from None
    if width < 0 or height < 0:
        raise argparse.ArgumentTypeError("Size must not be negative")
    return width, height


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="netpbmkit",
        description="netpbmkit: convert and transform Netpbm (PBM/PGM/PPM) images.",
    )
    parser.add_argument("path", nargs="?", help="Input image (.pbm/.pgm/.ppm/.pnm/.png/.jpg/...)")
    parser.add_argument("-o", "--output", metavar="PATH", help="Output file (default: stdout)")
    parser.add_argument(
        "--format",
        choices=[magic.value for magic in Magic],
        help="Output encoding; the image kind is reduced or promoted to match",
    )
    parser.add_argument("--invert", action="store_true", help="Invert samples")
    parser.add_argument("--flip", action="store_true", help="Mirror horizontally")
    parser.add_argument("--flop", action="store_true", help="Mirror vertically")
    parser.add_argument("--rotate", type=int, default=0, metavar="N", help="Rotate N quarter turns clockwise")
    parser.add_argument("--resize", type=_parse_size, metavar="WxH", help="Nearest-neighbour resize")
    parser.add_argument("--max-value", type=int, metavar="N", help="Rescale greymap/pixmap depth")
    parser.add_argument("--png", action="store_true", help="Write a PNG instead of a Netpbm file")
    parser.add_argument("--info", action="store_true", help="Print image format and size and exit")
    parser.add_argument("--list-formats", action="store_true", help="List supported encodings and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def list_formats() -> int:
    for magic, fmt in FORMATS.items():
        print(f"{magic.value}  {fmt.description}")
    return 0


def show_info(path: str) -> int:
    raster = load_raster(path)
    line = f"{path}: {raster.magic.value} {raster.kind.value} {raster.width}x{raster.height}"
    if raster.max_value is not None:
        line += f" max={raster.max_value}"
    print(line)
    return 0


def build_settings(args: argparse.Namespace) -> ConvertSettings:
    return ConvertSettings(
        target_magic=Magic(args.format) if args.format else None,
        invert=args.invert,
        flip=args.flip,
        flop=args.flop,
        quarter_turns=args.rotate,
        resize=args.resize,
        max_value=args.max_value,
        png=args.png,
    )


def convert(args: argparse.Namespace) -> int:
    data = ConvertJobBuilder(build_settings(args)).build_from_file(args.path)
    if args.output:
        FileTransport(args.output).write(data)
    else:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.list_formats:
        return list_formats()
    if not args.path:
        print("Missing input path. Use --help for usage.", file=sys.stderr)
        return 2
    try:
        if args.info:
            return show_info(args.path)
        return convert(args)
    except Exception as exc:
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
