"""
Include/Exclude file filtering.

Mirrors how bundler plugins select the module ids they transform: glob
patterns are anchored at the project root unless they are absolute or start
with ``**``, and exclusion wins over inclusion.
"""

import fnmatch
import posixpath
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Union

from style_import.utils.paths import PathLike, normalize_path

Patterns = Optional[Union[str, Sequence[str]]]


def _as_list(patterns: Patterns) -> List[str]:
  if patterns is None:
    return []
  if isinstance(patterns, str):
    return [patterns]
  return list(patterns)


def _anchor(pattern: str, root: str) -> str:
  pattern = pattern.replace("\\", "/")
  if pattern.startswith("**") or posixpath.isabs(pattern):
    return pattern
  return posixpath.join(root, pattern)


def create_filter(include: Patterns, exclude: Patterns, root: Optional[PathLike] = None) -> Callable[[str], bool]:
  """
  Builds a predicate deciding whether a module id should be transformed.

  Args:
      include (Patterns): Glob(s) an id must match. Empty means "everything".
      exclude (Patterns): Glob(s) that reject an id.
      root (Optional[PathLike]): Directory relative patterns are resolved against.

  Returns:
      Callable[[str], bool]: The filter predicate.
  """
  base = normalize_path(root if root is not None else Path.cwd())
  includes = [_anchor(p, base) for p in _as_list(include)]
  excludes = [_anchor(p, base) for p in _as_list(exclude)]

  def _filter(file_id: str) -> bool:
    if not isinstance(file_id, str) or "\0" in file_id:
      return False
    path = normalize_path(file_id)
    if not posixpath.isabs(path):
      path = normalize_path(posixpath.join(base, path))

    if any(fnmatch.fnmatchcase(path, p) for p in excludes):
      return False
    if not includes:
      return True
    return any(fnmatch.fnmatchcase(path, p) for p in includes)

  return _filter
