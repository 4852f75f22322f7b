import argparse
import logging
import sys
from pathlib import Path

from .convert import OUTPUT_FORMATS, convert_file
from .errors import ConversionError

logger = logging.getLogger("egaify")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
  parser = argparse.ArgumentParser(
    prog="egaify",
    description="Convert an image to 16-colour EGA planar data.",
  )
  parser.add_argument("input", type=Path, help="Input image (any format Pillow can read)")
  parser.add_argument("output", type=Path, help="Destination for the planar data")
  parser.add_argument(
    "--format",
    choices=OUTPUT_FORMATS,
    default="raw",
    help="Write raw bytes or a C source array (default: raw)",
  )
  parser.add_argument("--name", help="Array name for C output (defaults to the output file name)")
  parser.add_argument("--preview", type=Path, help="Also save the converted image as a PNG preview")
  parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
  return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
  args = parse_args(argv)
  logging.basicConfig(
    level=logging.DEBUG if args.verbose else logging.INFO,
    format="%(levelname)s %(name)s: %(message)s",
  )

  try:
    convert_file(args.input, args.output, args.format, args.name, preview=args.preview)
  except ConversionError as e:
    logger.error("%s failed: %s", e.stage, e)
    return 1
  return 0


if __name__ == "__main__":
  sys.exit(main())
