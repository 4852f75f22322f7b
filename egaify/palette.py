import functools

# The standard IBM EGA palette, in 8-bit intensities. The position of each
# entry is the 4-bit color code written into the planes, so the order must
# never change.
EGA_PALETTE: tuple[tuple[int, int, int], ...] = (
  (0x00, 0x00, 0x00),  # black
  (0x00, 0x00, 0xAA),  # blue
  (0x00, 0xAA, 0x00),  # green
  (0x00, 0xAA, 0xAA),  # cyan
  (0xAA, 0x00, 0x00),  # red
  (0xAA, 0x00, 0xAA),  # magenta
  (0xAA, 0x55, 0x00),  # brown
  (0xAA, 0xAA, 0xAA),  # light grey
  (0x55, 0x55, 0x55),  # dark grey
  (0x55, 0x55, 0xFF),  # bright blue
  (0x55, 0xFF, 0x55),  # bright green
  (0x55, 0xFF, 0xFF),  # bright cyan
  (0xFF, 0x55, 0x55),  # bright red
  (0xFF, 0x55, 0xFF),  # bright magenta
  (0xFF, 0xFF, 0x55),  # yellow
  (0xFF, 0xFF, 0xFF),  # white
)
PALETTE_LEN = len(EGA_PALETTE)


@functools.lru_cache(maxsize=None)
def nearest_index(r: int, g: int, b: int) -> int:
  best_idx = 0
  best_dist = None
  for i, (pr, pg, pb) in enumerate(EGA_PALETTE):
    dist = (r - pr)**2 + (g - pg)**2 + (b - pb)**2
    # Strict comparison: on a tie the lower index wins.
    if best_dist is None or dist < best_dist:
      best_dist = dist
      best_idx = i
  return best_idx


def palette_bytes() -> bytes:
  return bytes(component for color in EGA_PALETTE for component in color)
