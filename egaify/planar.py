"""Packing of 4-bit palette indices into EGA bit-planes.

The output consists of four planes stored one after another. Plane ``p``
holds bit ``p`` of every pixel's color code, one bit per pixel, eight
horizontally adjacent pixels to a byte with the leftmost pixel in the most
significant bit. Rows follow each other without padding, which is why the
width has to be a multiple of 8.
"""

import logging
from collections.abc import Sequence

from .errors import AllocationError, LayoutError

logger = logging.getLogger(__name__)

PLANE_COUNT = 4
PIXELS_PER_BYTE = 8
INDEX_MASK = 0x0F


def check_layout(width: int, height: int) -> None:
  if width <= 0 or height <= 0:
    raise LayoutError(f"Image size must be positive, got {width}x{height}")
  if width % PIXELS_PER_BYTE != 0:
    raise LayoutError(
      f"Width must be a multiple of {PIXELS_PER_BYTE} for planar conversion, got {width}"
    )


def plane_size(width: int, height: int) -> int:
  check_layout(width, height)
  return width * height // PIXELS_PER_BYTE


def pack(indices: Sequence[int], width: int, height: int) -> bytes:
  """Pack row-major palette indices into four sequential bit-planes.

  Only the low 4 bits of each index are used: an index of 31 is packed
  exactly like 15. Existing assets were produced with this truncation, so
  out-of-range values are tolerated rather than rejected.
  """
  size = plane_size(width, height)
  if len(indices) != width * height:
    raise LayoutError(f"Expected {width * height} indices for {width}x{height}, got {len(indices)}")

  try:
    out = bytearray(size * PLANE_COUNT)
  except MemoryError as e:
    raise AllocationError(f"Failed to allocate {size * PLANE_COUNT} byte planar buffer") from e

  for y in range(height):
    row_start = y * width
    for x in range(width):
      pixel_index = indices[row_start + x] & INDEX_MASK
      if pixel_index == 0:
        continue
      bit = 1 << (7 - x % PIXELS_PER_BYTE)
      byte_offset = (row_start + x) // PIXELS_PER_BYTE
      for plane in range(PLANE_COUNT):
        if (pixel_index >> plane) & 1:
          out[plane * size + byte_offset] |= bit

  logger.debug("packed %dx%d pixels into %d planes of %d bytes", width, height, PLANE_COUNT, size)
  return bytes(out)


def unpack(planar: bytes, width: int, height: int) -> list[int]:
  size = plane_size(width, height)
  if len(planar) != size * PLANE_COUNT:
    raise LayoutError(
      f"Planar buffer for {width}x{height} must be {size * PLANE_COUNT} bytes, got {len(planar)}"
    )

  indices = [0] * (width * height)
  for i in range(width * height):
    byte_offset = i // PIXELS_PER_BYTE
    bit = 0x80 >> (i % PIXELS_PER_BYTE)
    value = 0
    for plane in range(PLANE_COUNT):
      if planar[plane * size + byte_offset] & bit:
        value |= 1 << plane
    indices[i] = value
  return indices
