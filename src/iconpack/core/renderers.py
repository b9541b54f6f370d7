"""
Output Renderers.

One rendering function per emitted file kind. TypeScript outputs come from
Jinja2 templates shipped in ``iconpack/templates``; the manifest is built as a
dictionary and serialized with `json`, so every interpolated value is quoted
and escaped by a serializer rather than by string concatenation.

Templates use ``[[ ]]`` / ``[% %]`` delimiters because ``{{`` is ordinary JSX.
"""

import json
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence

from jinja2 import Environment, PackageLoader, StrictUndefined

from iconpack.config import PackageConfig
from iconpack.core.models import ComponentUnit, ViewBox

# Absolute-fill style applied to every embedded <svg>.
SVG_STYLE: Mapping[str, str] = MappingProxyType(
  {
    "position": "absolute",
    "top": "0",
    "right": "0",
    "bottom": "0",
    "left": "0",
    "width": "100%",
    "height": "100%",
  }
)

INDEX_WARNING = "For internal use only. Import from the individual files rather than from the index."

MANIFEST_PATH = "package.json"
INDEX_PATH = "index.ts"
BOX_PATH = "Box.tsx"


def js_literal(value: Any, indent: Optional[int] = None) -> str:
  """
  Serializes a value as a JavaScript literal.

  Args:
      value (Any): JSON-compatible value (mappings are converted to dicts).
      indent (Optional[int]): Pretty-print indentation.

  Returns:
      str: JSON text, valid as a JS/TS expression.
  """
  if isinstance(value, Mapping):
    value = dict(value)
  return json.dumps(value, indent=indent, ensure_ascii=False)


def create_environment() -> Environment:
  """
  Builds the Jinja2 environment used for TypeScript outputs.

  Returns:
      Environment: Configured with the package templates and a ``js`` filter.
  """
  env = Environment(
    loader=PackageLoader("iconpack", "templates"),
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    undefined=StrictUndefined,
    block_start_string="[%",
    block_end_string="%]",
    variable_start_string="[[",
    variable_end_string="]]",
    comment_start_string="[#",
    comment_end_string="#]",
  )
  env.filters["js"] = js_literal
  return env


def render_component(env: Environment, symbol_name: str, view_box: ViewBox, fragment: str) -> str:
  """
  Renders the TSX module for one icon.

  Args:
      env (Environment): Template environment.
      symbol_name (str): Component identifier, also used as displayName.
      view_box (ViewBox): Parsed viewBox; only width and height are used.
      fragment (str): JSX for the <svg> element.

  Returns:
      str: Module source with a default export.
  """
  return env.get_template("component.tsx.j2").render(
    symbol_name=symbol_name,
    width=view_box.width,
    height=view_box.height,
    fragment=fragment,
    svg_style=SVG_STYLE,
  )


def render_index(env: Environment, units: Sequence[ComponentUnit]) -> str:
  """
  Renders the aggregate module re-exporting every component.

  Args:
      env (Environment): Template environment.
      units (Sequence[ComponentUnit]): Components in emission order.

  Returns:
      str: Module source listing ``ICONS`` and one re-export per component.
  """
  icons: List[Dict[str, str]] = [{"fileName": u.file_stem, "componentName": u.symbol_name} for u in units]
  return env.get_template("index.ts.j2").render(icons=icons, warning=INDEX_WARNING)


def render_box(env: Environment) -> str:
  """Renders the shared styled-system Box primitive."""
  return env.get_template("Box.tsx.j2").render()


def render_manifest(config: PackageConfig, version: str) -> str:
  """
  Renders package.json.

  Args:
      config (PackageConfig): Fixed package identity and dependency ranges.
      version (str): Injected verbatim.

  Returns:
      str: Pretty-printed JSON with a trailing newline.
  """
  manifest = {
    "name": config.package_name,
    "version": version,
    "peerDependencies": dict(config.peer_dependencies),
    "main": "index.js",
    "types": "index.d.ts",
    "publishConfig": {
      "access": config.access,
      "registry": config.registry,
    },
  }
  return js_literal(manifest, indent=2) + "\n"
