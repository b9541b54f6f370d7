"""
Tests for Output Renderers.

Verifies:
1. Component module layout (Box wrapper, size, displayName, default export).
2. Index module (warning, ICONS listing, re-exports).
3. Box primitive composition.
4. Manifest content and escaping.
"""

import json

import pytest

from iconpack.config import PackageConfig
from iconpack.core.models import ComponentUnit, ViewBox
from iconpack.core.renderers import (
  SVG_STYLE,
  create_environment,
  js_literal,
  render_box,
  render_component,
  render_index,
  render_manifest,
)

EXPECTED_DOT_COMPONENT = """import * as React from "react";
import { Box, BoxProps } from "./Box";

const svgStyle: React.CSSProperties = {
  "position": "absolute",
  "top": "0",
  "right": "0",
  "bottom": "0",
  "left": "0",
  "width": "100%",
  "height": "100%"
};

const DotIcon = (props: BoxProps) => {
  return (
    <Box position="relative" width={8} height={8} {...props}>
      <svg viewBox="0 0 8 8" />
    </Box>
  );
};

DotIcon.displayName = "DotIcon";

export default DotIcon;
"""


@pytest.fixture
def env():
  return create_environment()


def _unit(name: str) -> ComponentUnit:
  return ComponentUnit(path=f"{name}.svg", symbol_name=name, file_stem=name, rendered_source="")


def test_render_component_exact(env):
  """Verify the full module text for a minimal fragment."""
  source = render_component(env, "DotIcon", ViewBox(min_x=0, min_y=0, width=8, height=8), '<svg viewBox="0 0 8 8" />')
  assert source == EXPECTED_DOT_COMPONENT


def test_render_component_indents_multiline_fragment(env):
  """Every fragment line is nested inside the Box."""
  fragment = '<svg viewBox="0 0 2 2">\n  <path d="M0 0" />\n</svg>'
  source = render_component(env, "PIcon", ViewBox(min_x=0, min_y=0, width=2, height=2), fragment)

  assert '      <svg viewBox="0 0 2 2">\n        <path d="M0 0" />\n      </svg>\n    </Box>' in source


def test_render_component_size_ignores_origin(env):
  """Only width and height reach the output."""
  source = render_component(env, "XIcon", ViewBox(min_x=-7, min_y=99, width=30, height=12), "<svg />")

  assert "width={30} height={12}" in source
  assert "-7" not in source
  assert "99" not in source


def test_render_index_single(env):
  """Verify warning, listing and re-export for one component."""
  source = render_index(env, [_unit("CheckIcon")])

  assert source == (
    'console.warn("For internal use only. Import from the individual files rather than from the index.");\n'
    "\n"
    "export const ICONS = [\n"
    "  {\n"
    '    "fileName": "CheckIcon",\n'
    '    "componentName": "CheckIcon"\n'
    "  }\n"
    "];\n"
    "\n"
    'export { default as CheckIcon } from "./CheckIcon";\n'
  )


def test_render_index_empty(env):
  """An empty package still warns and exports an empty listing."""
  source = render_index(env, [])

  assert "console.warn(" in source
  assert source.endswith("export const ICONS = [];\n")
  assert "export {" not in source


def test_render_index_preserves_order_and_duplicates(env):
  """Listing order follows input order; duplicates are not removed."""
  source = render_index(env, [_unit("BIcon"), _unit("AIcon"), _unit("BIcon")])

  exports = [line for line in source.splitlines() if line.startswith("export { default")]
  assert exports == [
    'export { default as BIcon } from "./BIcon";',
    'export { default as AIcon } from "./AIcon";',
    'export { default as BIcon } from "./BIcon";',
  ]
  listing = json.loads(source.split("export const ICONS = ", 1)[1].split(";\n", 1)[0])
  assert [entry["componentName"] for entry in listing] == ["BIcon", "AIcon", "BIcon"]


def test_render_box(env):
  """The primitive composes styled-system helpers and omits the color prop."""
  source = render_box(env)

  assert 'import styled from "styled-components";' in source
  assert 'Omit<ColorProps, "color">' in source
  assert "export const Box = styled.div<BoxProps>(flexbox, layout, position, space, color);" in source


def test_render_manifest_defaults():
  """Verify the fixed manifest fields."""
  manifest = json.loads(render_manifest(PackageConfig(), "1.2.3"))

  assert manifest == {
    "name": "@artsy/icons",
    "version": "1.2.3",
    "peerDependencies": {
      "react": ">=16.2.0",
      "styled-components": "^4",
      "styled-system": "^5",
    },
    "main": "index.js",
    "types": "index.d.ts",
    "publishConfig": {"access": "public", "registry": "https://registry.npmjs.org"},
  }


def test_render_manifest_escapes_version():
  """Quotes in the version cannot break the JSON document."""
  text = render_manifest(PackageConfig(), '1.0.0-"beta"')
  assert json.loads(text)["version"] == '1.0.0-"beta"'


def test_render_manifest_only_version_varies():
  """Two versions differ on exactly one line."""
  a = render_manifest(PackageConfig(), "1.0.0").splitlines()
  b = render_manifest(PackageConfig(), "2.0.0").splitlines()

  diffs = [(x, y) for x, y in zip(a, b) if x != y]
  assert len(a) == len(b)
  assert diffs == [('  "version": "1.0.0",', '  "version": "2.0.0",')]


def test_svg_style_is_read_only():
  """The shared style mapping cannot be mutated."""
  with pytest.raises(TypeError):
    SVG_STYLE["top"] = "1px"  # type: ignore[index]


def test_js_literal():
  """Mappings and strings serialize to JS literals."""
  assert js_literal(SVG_STYLE).startswith('{"position": "absolute"')
  assert js_literal("a\"b") == '"a\\"b"'
