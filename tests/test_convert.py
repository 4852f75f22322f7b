from pathlib import Path

import pytest
from PIL import Image

from egaify.convert import DecodedImage, c_identifier, convert, convert_file, decode_image, quantize
from egaify.errors import ConversionError, DecodeError, LayoutError, OutputError
from egaify.palette import EGA_PALETTE

ROW_PLANAR = bytes([0x55, 0x33, 0x0F, 0x00])


def test_decode_rgb(palette_row_png: Path) -> None:
  image = decode_image(palette_row_png)

  assert (image.width, image.height, image.bytes_per_pixel) == (8, 1, 3)
  assert image.pixels[3:6] == bytes(EGA_PALETTE[1])


def test_decode_rgba_keeps_alpha_channel(tmp_path: Path) -> None:
  path = tmp_path / "alpha.png"
  Image.new("RGBA", (8, 2), (0xFF, 0xFF, 0xFF, 0)).save(path)

  image = decode_image(path)

  assert image.bytes_per_pixel == 4
  # Alpha is ignored: fully transparent white is still white.
  assert quantize(image) == [15] * 16


def test_decode_grayscale_is_converted_to_rgb(tmp_path: Path) -> None:
  path = tmp_path / "gray.png"
  Image.new("L", (8, 1), 0xAA).save(path)

  image = decode_image(path)

  assert image.bytes_per_pixel == 3
  assert quantize(image) == [7] * 8


def test_decode_garbage(tmp_path: Path) -> None:
  path = tmp_path / "broken.png"
  path.write_bytes(b"definitely not an image")

  with pytest.raises(DecodeError):
    decode_image(path)


def test_decode_missing_file(tmp_path: Path) -> None:
  with pytest.raises(DecodeError):
    decode_image(tmp_path / "missing.png")


def test_layout_checked_before_pixels_are_read() -> None:
  # The pixel buffer is empty: reading a single pixel would raise IndexError.
  image = DecodedImage(7, 1, b"", 3)

  with pytest.raises(LayoutError):
    quantize(image)


def test_short_pixel_buffer_rejected() -> None:
  with pytest.raises(DecodeError):
    quantize(DecodedImage(8, 1, bytes(10), 3))


@pytest.mark.parametrize("bytes_per_pixel", [1, 2, 5])
def test_unsupported_pixel_size_rejected(bytes_per_pixel: int) -> None:
  image = DecodedImage(8, 1, bytes(8 * bytes_per_pixel), bytes_per_pixel)

  with pytest.raises(DecodeError):
    quantize(image)


def test_sixteen_bit_grayscale_is_scaled(tmp_path: Path) -> None:
  path = tmp_path / "deep.png"
  Image.new("I;16", (8, 1), 40000).save(path)

  image = decode_image(path)

  assert image.bytes_per_pixel == 3
  # 40000 / 256 is about 156, which is closest to light grey.
  assert quantize(image) == [7] * 8


def test_convert_palette_row(palette_row_png: Path) -> None:
  image = decode_image(palette_row_png)

  assert quantize(image) == list(range(8))
  assert convert(image) == ROW_PLANAR


def test_all_black_image() -> None:
  image = DecodedImage(16, 4, bytes(16 * 4 * 4), 4)

  assert convert(image) == bytes(32)


def test_convert_file_raw(palette_row_png: Path, tmp_path: Path) -> None:
  out_path = tmp_path / "row.raw"

  planar = convert_file(palette_row_png, out_path)

  assert planar == ROW_PLANAR
  assert out_path.read_bytes() == ROW_PLANAR


def test_convert_file_c_source(palette_row_png: Path, tmp_path: Path) -> None:
  out_path = tmp_path / "title-screen.c"

  convert_file(palette_row_png, out_path, output_format="c")

  source = out_path.read_text()
  assert "const unsigned int title_screen_width = 8;" in source
  assert "const unsigned int title_screen_height = 1;" in source
  assert "const unsigned int title_screen_len = 4;" in source
  assert "const unsigned char title_screen[] = {\n0x55,0x33,0x0f,0x00\n};" in source


def test_c_source_wraps_lines(tmp_path: Path) -> None:
  path = tmp_path / "wide.png"
  Image.new("RGB", (64, 2), (0xFF, 0xFF, 0xFF)).save(path)
  out_path = tmp_path / "wide.h"

  convert_file(path, out_path, output_format="c", name="wide_img")

  lines = out_path.read_text().splitlines()
  data_lines = lines[lines.index("const unsigned char wide_img[] = {") + 1:lines.index("};")]
  assert len(data_lines) == 2
  assert data_lines[0].endswith(",")
  assert not data_lines[1].endswith(",")
  assert data_lines[0].count("0xff") == 32


def test_c_identifier() -> None:
  assert c_identifier("title-screen") == "title_screen"
  assert c_identifier("2x") == "_2x"


def test_unknown_format(palette_row_png: Path, tmp_path: Path) -> None:
  with pytest.raises(ConversionError):
    convert_file(palette_row_png, tmp_path / "out", output_format="bmp")


def test_no_output_on_layout_error(tmp_path: Path) -> None:
  path = tmp_path / "odd.png"
  Image.new("RGB", (7, 1)).save(path)
  out_path = tmp_path / "odd.raw"

  with pytest.raises(LayoutError):
    convert_file(path, out_path)
  assert not out_path.exists()


def test_output_error_keeps_result(palette_row_png: Path, tmp_path: Path) -> None:
  with pytest.raises(OutputError) as excinfo:
    convert_file(palette_row_png, tmp_path)

  assert excinfo.value.data == ROW_PLANAR
  assert excinfo.value.stage == "write"


def test_convert_file_with_preview(palette_row_png: Path, tmp_path: Path) -> None:
  preview_path = tmp_path / "preview.png"

  convert_file(palette_row_png, tmp_path / "row.raw", preview=preview_path)

  with Image.open(preview_path) as img:
    assert list(img.convert("RGB").getdata()) == list(EGA_PALETTE[:8])
