"""Hand-off of a planar buffer to a display adapter.

Switching video modes and programming the sequencer is platform specific, so
the package only describes the capability it needs and drives whatever
implementation the caller provides, such as an emulator.
"""

from typing import Protocol

from .errors import LayoutError
from .planar import PIXELS_PER_BYTE, PLANE_COUNT, plane_size

ALL_PLANES_MASK = (1 << PLANE_COUNT) - 1


class PlanarDisplay(Protocol):

  def set_planar_mode(self) -> None:
    ...

  def set_plane_write_mask(self, mask: int) -> None:
    ...

  def set_line_stride(self, stride: int) -> None:
    ...

  def write_plane(self, data: bytes) -> None:
    ...


def upload(display: PlanarDisplay, planar: bytes, width: int, height: int) -> None:
  size = plane_size(width, height)
  if len(planar) != size * PLANE_COUNT:
    raise LayoutError(
      f"Planar buffer for {width}x{height} must be {size * PLANE_COUNT} bytes, got {len(planar)}"
    )

  display.set_planar_mode()
  display.set_plane_write_mask(ALL_PLANES_MASK)
  display.set_line_stride(width // PIXELS_PER_BYTE)
  for plane in range(PLANE_COUNT):
    display.set_plane_write_mask(1 << plane)
    display.write_plane(planar[plane * size:(plane + 1) * size])
  display.set_plane_write_mask(ALL_PLANES_MASK)
