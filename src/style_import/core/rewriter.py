"""
Statement rewriting helpers.

- `style_block`: the text prepended for one matched import.
- `rewrite_deep_imports`: splits a named import from a legacy library into
  per-component default imports::

      import { Button, Table as T } from "element-ui"
      # becomes
      import Button from "element-ui/lib/button"
      import T from "element-ui/lib/table"
"""

import re
from typing import Iterable, List

from style_import.config import LibrarySpec
from style_import.core.extractor import Binding


def style_block(statements: Iterable[str]) -> str:
  return "".join(f"{statement}\n" for statement in statements)


def rewrite_deep_imports(statement: str, lib: LibrarySpec, bindings: List[Binding]) -> str:
  """
  Rewrites a named import into deep per-component imports.

  Only statements importing exactly `lib.library_name` are rewritten; anything
  else is returned unchanged.

  Args:
      statement (str): The import statement text.
      lib (LibrarySpec): Library with `lib_directory` set.
      bindings (List[Binding]): Named bindings of the statement.

  Returns:
      str: Replacement text for the statement.
  """
  if not lib.lib_directory or not bindings:
    return statement

  pattern = re.compile(r"import\s+\{[^}]*\}\s+from\s+([\"'])" + re.escape(lib.library_name) + r"\1")
  replacement = "\n".join(
    f'import {b.local} from "{lib.library_name}/{lib.lib_directory}/{b.imported.lower()}"' for b in bindings
  )
  return pattern.sub(lambda _: replacement, statement)
