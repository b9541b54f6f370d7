"""
Package Configuration.

Holds the fixed identity of the generated npm package (name, peer dependency
ranges, publish settings) and the suffix appended to component names. The
defaults describe the published icon package; projects may override them in
``pyproject.toml``::

    [tool.iconpack]
    package_name = "@acme/icons"
    symbol_suffix = "Glyph"
"""

import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from iconpack.core.naming import DEFAULT_SUFFIX

DEFAULT_PACKAGE_NAME = "@artsy/icons"
DEFAULT_REGISTRY = "https://registry.npmjs.org"
DEFAULT_PEER_DEPENDENCIES: Dict[str, str] = {
  "react": ">=16.2.0",
  "styled-components": "^4",
  "styled-system": "^5",
}


class PackageConfig(BaseModel):
  """
  Static settings shared by every generation pass.
  """

  model_config = ConfigDict(frozen=True)

  package_name: str = Field(DEFAULT_PACKAGE_NAME, min_length=1, description="npm package name.")
  symbol_suffix: str = Field(DEFAULT_SUFFIX, description="Appended to every component name (e.g. 'Icon').")
  peer_dependencies: Dict[str, str] = Field(
    default_factory=lambda: dict(DEFAULT_PEER_DEPENDENCIES),
    description="Peer dependency ranges written to the manifest.",
  )
  access: str = Field("public", description="publishConfig.access value.")
  registry: str = Field(DEFAULT_REGISTRY, description="publishConfig.registry value.")

  @field_validator("symbol_suffix")
  @classmethod
  def validate_suffix(cls, v: str) -> str:
    """
    Ensures the suffix can trail an identifier.

    Args:
        v (str): Raw suffix.

    Returns:
        str: The suffix unchanged.

    Raises:
        ValueError: If the suffix contains characters not allowed in identifiers.
    """
    if v and not all(ch.isascii() and (ch.isalnum() or ch in "_$") for ch in v):
      raise ValueError(f"Invalid symbol suffix: '{v}'. Use letters, digits, '_' or '$'.")
    return v

  @classmethod
  def load(cls, search_path: Optional[Path] = None, **overrides: Any) -> "PackageConfig":
    """
    Loads settings from ``[tool.iconpack]`` in the nearest pyproject.toml.

    Keyword overrides that are not None take precedence over file values.

    Args:
        search_path (Optional[Path]): Directory to start searching from.
            Defaults to the current working directory.
        **overrides: Field values to force.

    Returns:
        PackageConfig: The resolved configuration.

    Raises:
        ValueError: If the merged settings fail validation.
    """
    toml_config, _ = _load_toml_settings(search_path or Path.cwd())
    merged = {**toml_config, **{k: v for k, v in overrides.items() if v is not None}}
    try:
      return cls.model_validate(merged)
    except ValidationError as e:
      raise ValueError(f"Package configuration validation failed: {e}") from e


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches the directory and its parents for 'pyproject.toml'.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The ``tool.iconpack`` table and the
      directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      with open(toml_path, "rb") as f:
        data = tomllib.load(f)
      return data.get("tool", {}).get("iconpack", {}), parent

  return {}, None
