"""
Filesystem path helpers.

Build tools exchange module ids as POSIX-style strings, whatever the host OS,
so generated paths are normalized to forward slashes.
"""

import os
import posixpath
from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


def normalize_path(value: PathLike) -> str:
  """
  Converts a path to a normalized POSIX string.

  Args:
      value (PathLike): e.g. ``C:\\proj\\node_modules\\..\\x.css``.

  Returns:
      str: Forward-slash path with ``.``/``..`` segments collapsed.
  """
  return posixpath.normpath(str(value).replace("\\", "/"))


def resolve_node_modules(*parts: str, cwd: Optional[PathLike] = None) -> str:
  """
  Resolves a package-relative path inside the dependency install directory.

  Segments are concatenated even if they start with a slash, so
  ``resolve_node_modules("/ui/x.css")`` stays inside ``node_modules``.

  Args:
      *parts (str): Path segments below ``node_modules``.
      cwd (Optional[PathLike]): Project working directory. Defaults to the process cwd.

  Returns:
      str: Normalized absolute path.
  """
  base = normalize_path(cwd if cwd is not None else os.getcwd())
  segments = [base, "node_modules", *(normalize_path(p) for p in parts if p)]
  return normalize_path("/".join(segments))
