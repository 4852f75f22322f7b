"""Convert true-colour images into 16-colour EGA planar data."""

from .convert import DecodedImage, convert, convert_file, decode_image, quantize
from .display import PlanarDisplay, upload
from .errors import AllocationError, ConversionError, DecodeError, LayoutError, OutputError
from .palette import EGA_PALETTE, nearest_index, palette_bytes
from .planar import PLANE_COUNT, pack, plane_size, unpack

__all__ = [
  "EGA_PALETTE",
  "PLANE_COUNT",
  "AllocationError",
  "ConversionError",
  "DecodeError",
  "DecodedImage",
  "LayoutError",
  "OutputError",
  "PlanarDisplay",
  "convert",
  "convert_file",
  "decode_image",
  "nearest_index",
  "pack",
  "palette_bytes",
  "plane_size",
  "quantize",
  "unpack",
  "upload",
]
