"""
Cheap textual prefilter.

Rejects files that cannot contain an import of a registered library before
any lexing happens. A matching import always spells the library name inside
quotes, so a file without ``'name'`` or ``"name"`` for every registered name
can be skipped safely. The converse does not hold (a quoted name may appear in
an unrelated string), which only costs a scan.
"""

from typing import Iterable, Union

from style_import.config import LibrarySpec
from style_import.core.registry import LibraryRegistry


def need_transform(code: str, libs: Union[LibraryRegistry, Iterable[LibrarySpec]]) -> bool:
  """
  Checks whether `code` plausibly imports any registered library.

  Args:
      code (str): Raw source text.
      libs: The registry (or any iterable of specs).

  Returns:
      bool: True if some library name appears single- or double-quoted.
  """
  for lib in libs:
    name = lib.library_name
    if name and (f"'{name}'" in code or f'"{name}"' in code):
      return True
  return False
