"""
Package Generator.

Maps a `GenerationRequest` to the ordered list of files making up the icon
package:

1. ``package.json`` (manifest)
2. ``index.ts`` (aggregate re-exports)
3. ``Box.tsx`` (shared layout primitive)
4. ``<SymbolName>.tsx`` for every image, in input order

Generation is pure and fail-fast. Any malformed image raises
`MalformedInputError` before anything is returned.
"""

from typing import Dict, List, Optional

from rich.markup import escape

from iconpack.config import PackageConfig
from iconpack.core.errors import MalformedInputError
from iconpack.core.models import ComponentUnit, GenerationRequest, ImageSource, OutputFile
from iconpack.core.naming import symbol_name_for
from iconpack.core.renderers import (
  BOX_PATH,
  INDEX_PATH,
  MANIFEST_PATH,
  create_environment,
  render_box,
  render_component,
  render_index,
  render_manifest,
)
from iconpack.core.svg import FragmentOptions, extract_view_box, fragmentize
from iconpack.enums import OutputKind
from iconpack.utils.console import log_success, log_warning

FRAGMENT_OPTIONS = FragmentOptions(
  expand_props=False,
  svg_props={"style": "{svgStyle}", "fill": "currentColor"},
)


class PackageGenerator:
  """
  Renders icon packages for a fixed `PackageConfig`.

  The instance holds only read-only state (config and template environment)
  and can be reused across requests.
  """

  def __init__(self, config: Optional[PackageConfig] = None) -> None:
    self.config = config or PackageConfig()
    self._env = create_environment()

  def build_component(self, image: ImageSource) -> ComponentUnit:
    """
    Converts one image into its component module.

    Args:
        image (ImageSource): Path and markup.

    Returns:
        ComponentUnit: Name and rendered source.

    Raises:
        MalformedInputError: If the name or markup is unusable.
    """
    symbol = symbol_name_for(image.path, self.config.symbol_suffix)
    try:
      view_box = extract_view_box(image.source)
      fragment = fragmentize(image.source, FRAGMENT_OPTIONS)
    except MalformedInputError as e:
      raise e.with_path(image.path) from e

    source = render_component(self._env, symbol, view_box, fragment)
    return ComponentUnit(path=image.path, symbol_name=symbol, file_stem=symbol, rendered_source=source)

  def generate(self, request: GenerationRequest) -> List[OutputFile]:
    """
    Renders every file of the package.

    Args:
        request (GenerationRequest): Images and version.

    Returns:
        List[OutputFile]: Manifest, index, Box, then one file per image.

    Raises:
        MalformedInputError: On the first image that cannot be converted.
    """
    units = [self.build_component(image) for image in request.images]
    _warn_collisions(units)

    files = [
      OutputFile(
        filepath=MANIFEST_PATH,
        source=render_manifest(self.config, request.version),
        kind=OutputKind.MANIFEST,
      ),
      OutputFile(filepath=INDEX_PATH, source=render_index(self._env, units), kind=OutputKind.INDEX),
      OutputFile(filepath=BOX_PATH, source=render_box(self._env), kind=OutputKind.PRIMITIVE),
    ]
    files.extend(OutputFile(filepath=u.filepath, source=u.rendered_source, kind=OutputKind.COMPONENT) for u in units)

    log_success(f"Generated {len(units)} component(s) for version {request.version}")
    return files


def _warn_collisions(units: List[ComponentUnit]) -> None:
  # Collisions are reported but not resolved: the later image wins in the index.
  seen: Dict[str, str] = {}
  for unit in units:
    previous = seen.get(unit.symbol_name)
    if previous is not None:
      log_warning(
        f"[symbol]{unit.symbol_name}[/symbol] from [path]{escape(unit.path)}[/path] shadows [path]{escape(previous)}[/path]"
      )
    seen[unit.symbol_name] = unit.path


def generate(request: GenerationRequest, config: Optional[PackageConfig] = None) -> List[OutputFile]:
  """
  Convenience wrapper around `PackageGenerator.generate`.

  Args:
      request (GenerationRequest): Images and version.
      config (Optional[PackageConfig]): Package settings. Defaults apply if None.

  Returns:
      List[OutputFile]: The package files in emission order.
  """
  return PackageGenerator(config).generate(request)
