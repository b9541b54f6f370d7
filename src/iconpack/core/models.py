"""
Data structures flowing through the package generator.

Inputs (`ImageSource`, `GenerationRequest`) are supplied by whatever locates
the SVG files on disk; outputs (`OutputFile`) are consumed by whatever writes
them to a destination. All models are frozen so a request can be reused
across calls without hidden state.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from iconpack.enums import OutputKind


class ImageSource(BaseModel):
  """
  A single SVG file to be converted into a component.
  """

  model_config = ConfigDict(frozen=True)

  path: str = Field(..., description="Filesystem-style identifier. Only the base name is used.")
  source: str = Field(..., description="Raw SVG markup.")


class GenerationRequest(BaseModel):
  """
  Everything needed for one generation pass.
  """

  model_config = ConfigDict(frozen=True)

  images: List[ImageSource] = Field(default_factory=list, description="Images in emission order.")
  version: str = Field(..., min_length=1, description="Version string injected verbatim into the manifest.")


class ViewBox(BaseModel):
  """
  Parsed ``viewBox`` attribute of an SVG root element.
  """

  model_config = ConfigDict(frozen=True)

  min_x: int
  min_y: int
  width: int
  height: int


class ComponentUnit(BaseModel):
  """
  A rendered component derived from one `ImageSource`.

  The file stem and the exported symbol are identical by construction.
  """

  model_config = ConfigDict(frozen=True)

  path: str = Field(..., description="Path of the originating image.")
  symbol_name: str = Field(..., description="Exported component identifier, e.g. 'ArrowLeftIcon'.")
  file_stem: str = Field(..., description="Output file name without extension.")
  rendered_source: str = Field(..., description="TSX module source.")

  @property
  def filepath(self) -> str:
    """
    Returns:
        str: The relative path of the component module.
    """
    return f"{self.file_stem}.tsx"


class OutputFile(BaseModel):
  """
  One emitted file.
  """

  model_config = ConfigDict(frozen=True)

  filepath: str = Field(..., description="Path relative to the package root.")
  source: str = Field(..., description="Full text content.")
  kind: OutputKind = Field(OutputKind.COMPONENT, description="What the file provides.")
