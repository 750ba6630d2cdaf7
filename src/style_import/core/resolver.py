"""
Style Import Resolution.

Turns the components imported from a library into the style import
statements that load their CSS.
"""

from typing import Iterable, List, Optional, Set

from style_import.config import LibrarySpec
from style_import.utils.console import log_debug
from style_import.utils.naming import get_change_case_name
from style_import.utils.paths import PathLike, resolve_node_modules


def style_statement(path: str) -> str:
  return f"import '{path}';"


def resolve_styles(
  lib: LibrarySpec,
  identifiers: Iterable[str],
  cwd: Optional[PathLike] = None,
  seen: Optional[Set[str]] = None,
) -> List[str]:
  """
  Resolves the style imports for components of one library.

  Each identifier is converted with the library's naming convention, passed to
  its `resolve_style` callback and, for `es_module` libraries, resolved inside
  the project's ``node_modules``. Exceptions raised by `resolve_style` are not
  caught.

  Args:
      lib (LibrarySpec): The matched library.
      identifiers (Iterable[str]): Original imported names.
      cwd (Optional[PathLike]): Project directory for `es_module` resolution.
      seen (Optional[Set[str]]): Statements already emitted for this file.
          Matching statements are skipped and new ones are added to it.

  Returns:
      List[str]: Unique ``import '<path>';`` statements in first-seen order.
  """
  resolve_style = lib.resolve_style
  if not lib.library_name or not callable(resolve_style):
    return []

  statements = {}
  for identifier in identifiers:
    name = get_change_case_name(identifier, lib.library_name_change_case)
    path = resolve_style(name)
    if not path:
      log_debug("no style for %s from %s", identifier, lib.library_name)
      continue
    path = str(path)
    if lib.es_module:
      path = resolve_node_modules(path, cwd=cwd)

    statement = style_statement(path)
    if seen is not None and statement in seen:
      continue
    statements[statement] = None

  if seen is not None:
    seen.update(statements)
  log_debug("import sets: %s", list(statements))
  return list(statements)
