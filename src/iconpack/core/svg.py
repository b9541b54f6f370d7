"""
SVG Markup Transformer.

Parses raw SVG markup with lxml and provides the two capabilities the
generator needs:

- `extract_view_box`: reads the root ``viewBox`` into a `ViewBox`.
- `fragmentize`: re-emits the document as a JSX fragment suitable for inline
  composition inside a React component.

Editor metadata (comments, processing instructions, elements and attributes in
foreign namespaces such as Inkscape/Sodipodi) is dropped from fragments.
"""

import json
import re
from typing import Dict, List, Optional, Tuple

from lxml import etree
from pydantic import BaseModel, ConfigDict, Field

from iconpack.core.errors import MalformedInputError
from iconpack.core.models import ViewBox

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"
XML_NS = "http://www.w3.org/XML/1998/namespace"

INDENT = "  "

# JSX renames that are not simple hyphen-to-camel conversions.
_ATTRIBUTE_ALIASES: Dict[str, str] = {
  "class": "className",
  "for": "htmlFor",
  "tabindex": "tabIndex",
}

_HYPHEN_RE = re.compile(r"-([a-z0-9])")
_VIEWBOX_SPLIT_RE = re.compile(r"[\s,]+")
_INTEGER_RE = re.compile(r"^-?[0-9]+$")


class FragmentOptions(BaseModel):
  """
  Controls how markup is rewritten into a fragment.
  """

  model_config = ConfigDict(frozen=True)

  expand_props: bool = Field(False, description="Append a '{...props}' spread to the root element.")
  svg_props: Dict[str, str] = Field(
    default_factory=dict,
    description="Attributes injected on the root. Values wrapped in braces are emitted as JSX expressions.",
  )


def _parser() -> etree.XMLParser:
  # Markup is always re-encoded as UTF-8, whatever the XML declaration says.
  return etree.XMLParser(
    encoding="utf-8",
    resolve_entities=False,
    no_network=True,
    remove_comments=True,
    remove_pis=True,
  )


def parse_svg(markup: str) -> etree._Element:
  """
  Parses SVG markup into an lxml element tree.

  Args:
      markup (str): Raw SVG text. An XML declaration is allowed.

  Returns:
      etree._Element: The root element.

  Raises:
      MalformedInputError: If the markup is not well-formed XML.
  """
  try:
    return etree.fromstring(markup.strip().encode("utf-8"), _parser())
  except (etree.XMLSyntaxError, ValueError) as e:
    raise MalformedInputError(f"unparseable markup ({e})") from e


def extract_view_box(markup: str) -> ViewBox:
  """
  Reads the root ``viewBox`` attribute.

  Tokens are separated by whitespace and/or commas and must be integers.

  Args:
      markup (str): Raw SVG text.

  Returns:
      ViewBox: The four parsed values.

  Raises:
      MalformedInputError: If the attribute is missing, does not contain four
          tokens, or contains non-integer tokens.
  """
  root = parse_svg(markup)
  raw = root.get("viewBox")
  if raw is None:
    raise MalformedInputError("root element has no viewBox attribute")

  tokens = [t for t in _VIEWBOX_SPLIT_RE.split(raw.strip()) if t]
  if len(tokens) != 4:
    raise MalformedInputError(f"viewBox '{raw}' must have four values, found {len(tokens)}")

  if not all(_INTEGER_RE.match(t) for t in tokens):
    raise MalformedInputError(f"viewBox '{raw}' contains non-integer values")

  min_x, min_y, width, height = (int(t) for t in tokens)

  return ViewBox(min_x=min_x, min_y=min_y, width=width, height=height)


def fragmentize(markup: str, options: Optional[FragmentOptions] = None) -> str:
  """
  Converts SVG markup into a JSX fragment.

  Only the element tree is emitted; wrapping it in a component is left to the
  caller.

  Args:
      markup (str): Raw SVG text.
      options (Optional[FragmentOptions]): Root prop injection and spreading.

  Returns:
      str: JSX source, indented with two spaces, without a trailing newline.

  Raises:
      MalformedInputError: If the markup is not well-formed XML.
  """
  opts = options or FragmentOptions()
  root = parse_svg(markup)

  attrs = _namespace_declarations(root) + _jsx_attributes(root)
  for name, value in opts.svg_props.items():
    attrs = [(k, v) for k, v in attrs if k != name]
    attrs.append((name, _injected_value(value)))
  if opts.expand_props:
    attrs.append(("", "{...props}"))

  return "\n".join(_render(root, attrs, depth=0))


def _render(el: etree._Element, attrs: List[Tuple[str, str]], depth: int) -> List[str]:
  pad = INDENT * depth
  tag = etree.QName(el).localname
  opening = f"{pad}<{tag}{_format_attributes(attrs)}"

  body: List[str] = []
  body.extend(_text_lines(el.text, depth + 1))
  for child in el:
    if _is_svg_element(child):
      body.extend(_render(child, _jsx_attributes(child), depth + 1))
    body.extend(_text_lines(child.tail, depth + 1))

  if not body:
    return [f"{opening} />"]
  return [f"{opening}>", *body, f"{pad}</{tag}>"]


def _is_svg_element(el: etree._Element) -> bool:
  if not isinstance(el.tag, str):
    return False
  return etree.QName(el).namespace in (None, SVG_NS)


def _text_lines(text: Optional[str], depth: int) -> List[str]:
  if not text or not text.strip():
    return []
  return [f"{INDENT * depth}{{{_js_string(text.strip())}}}"]


def _namespace_declarations(root: etree._Element) -> List[Tuple[str, str]]:
  decls = []
  for prefix, uri in root.nsmap.items():
    if prefix is None:
      decls.append(("xmlns", _quoted(uri)))
    elif uri == XLINK_NS:
      decls.append(("xmlnsXlink", _quoted(uri)))
  return sorted(decls)


def _jsx_attributes(el: etree._Element) -> List[Tuple[str, str]]:
  out = []
  for key, value in el.attrib.items():
    name = jsx_attribute_name(key)
    if name is None:
      continue
    if name == "style":
      out.append((name, _style_object(value)))
    else:
      out.append((name, _quoted(value)))
  return out


def jsx_attribute_name(key: str) -> Optional[str]:
  """
  Maps an XML attribute name (possibly namespaced in Clark notation) to JSX.

  Args:
      key (str): Attribute name as exposed by lxml, e.g. 'stroke-width' or
          '{http://www.w3.org/1999/xlink}href'.

  Returns:
      Optional[str]: The JSX prop name, or None for foreign-namespace
      attributes that should be dropped.
  """
  qname = etree.QName(key)
  local = qname.localname
  if qname.namespace == XLINK_NS:
    return "xlink" + _camel(local[:1].upper() + local[1:])
  if qname.namespace == XML_NS:
    return "xml" + local[:1].upper() + local[1:]
  if qname.namespace is not None:
    return None

  if local in _ATTRIBUTE_ALIASES:
    return _ATTRIBUTE_ALIASES[local]
  if local.startswith(("data-", "aria-")):
    return local
  return _camel(local)


def _camel(name: str) -> str:
  return _HYPHEN_RE.sub(lambda m: m.group(1).upper(), name)


def _style_object(css: str) -> str:
  """
  Converts an inline CSS declaration list into a JSX style object literal.
  """
  entries = []
  for declaration in css.split(";"):
    if ":" not in declaration:
      continue
    prop, value = declaration.split(":", 1)
    prop, value = prop.strip(), value.strip()
    if not prop:
      continue
    if prop.startswith("--"):
      key = _js_string(prop)
    elif prop.startswith("-ms-"):
      key = _camel(prop[1:])
    else:
      # '-webkit-transform' -> 'WebkitTransform'
      key = _camel(prop)
    entries.append(f"{key}: {_js_string(value)}")

  if not entries:
    return "{{}}"
  return "{{ " + ", ".join(entries) + " }}"


def _injected_value(value: str) -> str:
  if value.startswith("{") and value.endswith("}"):
    return value
  return _quoted(value)


def _quoted(value: str) -> str:
  # JSX attribute strings decode HTML entities and cannot escape quotes.
  if any(ch in value for ch in '"&{}\n'):
    return "{" + _js_string(value) + "}"
  return f'"{value}"'


def _js_string(value: str) -> str:
  return json.dumps(value, ensure_ascii=False)


def _format_attributes(attrs: List[Tuple[str, str]]) -> str:
  parts = []
  for name, value in attrs:
    parts.append(value if not name else f"{name}={value}")
  return "".join(f" {p}" for p in parts)
