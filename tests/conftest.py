"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Console capture for asserting on log output.
- Small SVG samples shared across test modules.
"""

import io
import sys
from pathlib import Path

import pytest
from rich.console import Console

# Add src to path so we can import 'iconpack' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from iconpack.utils.console import reset_console, set_console  # noqa: E402

CHECK_SVG = (
  '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">'
  '<path d="M9 16.17 4.83 12l-1.42 1.41L9 19 21 7l-1.41-1.41z"/>'
  "</svg>"
)

CLOSE_SVG = '<svg viewBox="0 0 18 18"><path d="M1 1l16 16M17 1 1 17" stroke-width="2"/></svg>'


@pytest.fixture
def check_svg() -> str:
  return CHECK_SVG


@pytest.fixture
def close_svg() -> str:
  return CLOSE_SVG


@pytest.fixture
def captured_console():
  """
  Routes iconpack logging into an in-memory console for the duration of a test.

  Yields:
      Console: A recording console; use ``export_text()`` to read output.
  """
  capture = Console(record=True, file=io.StringIO(), width=200)
  set_console(capture)
  yield capture
  reset_console()
