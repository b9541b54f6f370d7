"""
Enumerations for iconpack.
"""

from enum import Enum


class OutputKind(str, Enum):
  """
  Kinds of files emitted by the generator, in emission order.
  """

  MANIFEST = "manifest"
  INDEX = "index"
  PRIMITIVE = "primitive"
  COMPONENT = "component"
