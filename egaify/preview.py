from pathlib import Path

from PIL import Image

from .palette import palette_bytes
from .planar import unpack


def render_planar(planar: bytes, width: int, height: int) -> Image.Image:
  indices = unpack(planar, width, height)
  img = Image.new("P", (width, height))
  img.putpalette(palette_bytes(), "RGB")
  img.putdata(indices)
  return img


def save_preview(path: str | Path, planar: bytes, width: int, height: int) -> None:
  render_planar(planar, width, height).save(path)
