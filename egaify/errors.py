class ConversionError(Exception):
  stage = "convert"


class DecodeError(ConversionError):
  stage = "decode"


class LayoutError(ConversionError):
  stage = "layout"


class AllocationError(ConversionError):
  stage = "allocate"


class OutputError(ConversionError):
  """Raised when the converted buffer could not be written out.

  The conversion itself succeeded; the in-memory result stays available on
  ``data`` so the caller can retry the write elsewhere.
  """

  stage = "write"

  def __init__(self, message: str, data: bytes):
    super().__init__(message)
    self.data = data
