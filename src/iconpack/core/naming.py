"""
Symbol Name Derivation.

Turns an image path into the identifier exported by its component module.
Word splitting mirrors lodash's ``upperFirst(camelCase(name))``, which is the
convention consumers of the generated package already rely on:

- ``arrow-left`` -> ``ArrowLeft``
- ``XMLHttp`` -> ``XmlHttp``
- ``icon2x`` -> ``Icon2X``
- ``Cafe`` with an acute e -> ``Cafe`` (accents are stripped)
- ``don't`` -> ``Dont`` (apostrophes are removed)
"""

import re
import unicodedata
from pathlib import PurePosixPath
from typing import List

from iconpack.core.errors import MalformedInputError

# Acronym followed by a capitalised word, capitalised/lowercase word, bare acronym, digit run.
_WORD_RE = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")
_APOSTROPHE_RE = re.compile("['\u2019]")
_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

DEFAULT_SUFFIX = "Icon"


def deburr(name: str) -> str:
  """
  Strips diacritics so accented letters count as their base letter.
  """
  decomposed = unicodedata.normalize("NFKD", name)
  return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def split_words(name: str) -> List[str]:
  """
  Splits a file name into words on separators, case changes and digits.

  Args:
      name (str): Raw base name (e.g. 'arrow-left', 'chevronUp').

  Returns:
      List[str]: Words in original order.
  """
  return _WORD_RE.findall(_APOSTROPHE_RE.sub("", deburr(name)))


def pascal_case(name: str) -> str:
  """
  Args:
      name (str): Raw base name.

  Returns:
      str: PascalCase form, e.g. 'ArrowLeft'.
  """
  return "".join(word[:1].upper() + word[1:].lower() for word in split_words(name))


def base_stem(path: str) -> str:
  """
  Extracts the base file name without its extension.

  Both forward and backward slashes are treated as separators.

  Args:
      path (str): Filesystem-style path.

  Returns:
      str: The stem, e.g. 'check' for 'folder/check.svg'.
  """
  return PurePosixPath(path.replace("\\", "/")).stem


def is_identifier(name: str) -> bool:
  """
  Checks whether a string is a valid TypeScript identifier (ASCII subset).
  """
  return bool(_IDENTIFIER_RE.match(name))


def symbol_name_for(path: str, suffix: str = DEFAULT_SUFFIX) -> str:
  """
  Derives the exported component name for an image.

  Args:
      path (str): Image path; only its base name is considered.
      suffix (str): Appended to the PascalCase stem.

  Returns:
      str: e.g. 'ArrowLeftIcon' for 'icons/arrow-left.svg'.

  Raises:
      MalformedInputError: If the base name yields no words, or the result
          would start with a digit.
  """
  stem = pascal_case(base_stem(path))
  if not stem:
    raise MalformedInputError("file name contains no usable characters", path=path)

  symbol = f"{stem}{suffix}"
  if not is_identifier(symbol):
    raise MalformedInputError(f"derived name '{symbol}' is not a valid identifier", path=path)
  return symbol
