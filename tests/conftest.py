from pathlib import Path

import pytest
from PIL import Image

from egaify.palette import EGA_PALETTE


@pytest.fixture
def palette_row_png(tmp_path: Path) -> Path:
  """An 8x1 RGB image whose pixels are the first eight palette colors."""
  path = tmp_path / "row.png"
  img = Image.new("RGB", (8, 1))
  img.putdata(list(EGA_PALETTE[:8]))
  img.save(path)
  return path
