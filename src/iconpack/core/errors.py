"""
Error types raised by the package generator.

Generation is fail-fast: any malformed image aborts the whole call and the
error is surfaced to the caller unmodified.
"""

from typing import Optional


class MalformedInputError(ValueError):
  """
  Raised when an image source cannot be turned into a component.

  Covers markup that does not parse, a root element without a well-formed
  ``viewBox``, and file names that do not yield a usable identifier.

  Attributes:
      path (Optional[str]): The image path being processed, if known.
      reason (str): Human readable description of the defect.
  """

  def __init__(self, reason: str, path: Optional[str] = None) -> None:
    self.path = path
    self.reason = reason
    message = f"{path}: {reason}" if path else reason
    super().__init__(message)

  def with_path(self, path: str) -> "MalformedInputError":
    """
    Returns a copy of the error annotated with the offending image path.

    Args:
        path (str): The image path.

    Returns:
        MalformedInputError: A new error carrying the same reason.
    """
    return MalformedInputError(self.reason, path=path)
