import logging
import re
from pathlib import Path
from typing import NamedTuple

from PIL import Image

from .errors import ConversionError, DecodeError, OutputError
from .palette import nearest_index
from .planar import check_layout, pack
from .preview import save_preview

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("raw", "c")
HIGH_BIT_DEPTH_MODES = ("I", "I;16", "I;16L", "I;16B", "I;16N")
C_BYTES_PER_LINE = 32


class DecodedImage(NamedTuple):
  width: int
  height: int
  pixels: bytes
  bytes_per_pixel: int


def decode_image(path: str | Path) -> DecodedImage:
  try:
    with Image.open(path) as img:
      if img.mode in HIGH_BIT_DEPTH_MODES:
        # Converting straight to RGB clips 16-bit samples instead of scaling them.
        img = img.convert("I").point(lambda v: v * (1 / 256)).convert("L")
      if img.mode not in ("RGB", "RGBA"):
        img = img.convert("RGB")
      pixels = img.tobytes()
      width, height = img.size
      bytes_per_pixel = len(img.mode)
  except (OSError, ValueError, Image.DecompressionBombError) as e:
    raise DecodeError(f"Error decoding image {path}: {e}") from e

  logger.debug("decoded %s: %dx%d, %d bytes per pixel", path, width, height, bytes_per_pixel)
  return DecodedImage(width, height, pixels, bytes_per_pixel)


def quantize(image: DecodedImage) -> list[int]:
  check_layout(image.width, image.height)
  if image.bytes_per_pixel not in (3, 4):
    raise DecodeError(f"Expected 3 or 4 bytes per pixel, got {image.bytes_per_pixel}")
  expected = image.width * image.height * image.bytes_per_pixel
  if len(image.pixels) < expected:
    raise DecodeError(f"Pixel buffer holds {len(image.pixels)} bytes, expected {expected}")
  pixels = image.pixels
  step = image.bytes_per_pixel
  indices = [
    nearest_index(pixels[i], pixels[i + 1], pixels[i + 2])
    for i in range(0, image.width * image.height * step, step)
  ]
  logger.debug("quantized %d pixels (%r)", len(indices), nearest_index.cache_info())
  return indices


def convert(image: DecodedImage) -> bytes:
  return pack(quantize(image), image.width, image.height)


def write_raw(path: str | Path, data: bytes) -> None:
  with open(path, "wb") as out:
    out.write(data)
    out.flush()


def c_identifier(text: str) -> str:
  name = re.sub(r"\W", "_", text)
  if not name or name[0].isdigit():
    name = "_" + name
  return name


def write_c_source(
  path: str | Path, data: bytes, width: int, height: int, name: str | None = None
) -> None:
  path = Path(path)
  name = c_identifier(name or path.stem)
  with open(path, "w") as out:
    print(f"// This file was generated by egaify from a {width}x{height} image", file=out)
    print(f"const unsigned int {name}_width = {width};", file=out)
    print(f"const unsigned int {name}_height = {height};", file=out)
    print(f"const unsigned int {name}_len = {len(data)};", file=out)
    print(f"const unsigned char {name}[] = {{", file=out)
    for i in range(0, len(data), C_BYTES_PER_LINE):
      out.write(",".join("0x{:02x}".format(byte) for byte in data[i:i + C_BYTES_PER_LINE]))
      if i + C_BYTES_PER_LINE < len(data):
        out.write(",")
      out.write("\n")
    print("};", file=out)
    out.flush()


def convert_file(
  source: str | Path,
  destination: str | Path,
  output_format: str = "raw",
  name: str | None = None,
  preview: str | Path | None = None,
) -> bytes:
  if output_format not in OUTPUT_FORMATS:
    raise ConversionError(f"Unknown output format {output_format!r}")

  image = decode_image(source)
  planar = convert(image)

  try:
    if output_format == "c":
      write_c_source(destination, planar, image.width, image.height, name)
    else:
      write_raw(destination, planar)
  except OSError as e:
    raise OutputError(f"Error writing output file {destination}: {e}", planar) from e

  if preview is not None:
    try:
      save_preview(preview, planar, image.width, image.height)
    except (OSError, ValueError) as e:
      raise OutputError(f"Error writing preview {preview}: {e}", planar) from e

  logger.info(
    "Wrote %d bytes of planar EGA data to %s (width=%d height=%d)",
    len(planar),
    destination,
    image.width,
    image.height,
  )
  return planar
