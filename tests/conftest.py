"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Shared library specifications.
- Console capture for CLI output assertions.
"""

import sys
from io import StringIO
from pathlib import Path

import pytest

# Add src to path so we can import 'style_import' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from rich.console import Console  # noqa: E402

from style_import.config import LibrarySpec  # noqa: E402
from style_import.utils.console import reset_console, set_console  # noqa: E402


@pytest.fixture
def ui_kit() -> LibrarySpec:
  """The `ui-kit` library resolving `styles/<kebab-name>.css`."""
  return LibrarySpec(library_name="ui-kit", resolve_style=lambda name: f"styles/{name}.css")


@pytest.fixture
def style_lib() -> LibrarySpec:
  """The `lib` library resolving `style/<kebab-name>`."""
  return LibrarySpec(library_name="lib", resolve_style=lambda name: "style/" + name)


@pytest.fixture
def captured_console():
  """
  Redirects console and log output into a recording buffer.

  Yields:
      Console: The recording console; use `export_text()` to read it.
  """
  recorder = Console(file=StringIO(), width=200, record=True)
  set_console(recorder)
  yield recorder
  reset_console()
