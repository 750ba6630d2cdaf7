"""
Component Library Registry.

Maps module specifiers to their `LibrarySpec`. The registry is built once
from configuration and exposes no mutators.
"""

from typing import Iterable, Iterator, Optional, Tuple

from style_import.config import LibrarySpec


class LibraryRegistry:
  """
  Immutable, ordered collection of library specifications.

  Lookup is exact string equality on `LibrarySpec.library_name`; when names
  repeat, the first registered entry wins.
  """

  __slots__ = ("_libs",)

  def __init__(self, libs: Iterable[LibrarySpec] = ()) -> None:
    self._libs: Tuple[LibrarySpec, ...] = tuple(libs)

  @property
  def libs(self) -> Tuple[LibrarySpec, ...]:
    return self._libs

  def match(self, specifier: Optional[str]) -> Optional[LibrarySpec]:
    """
    Finds the library registered under a module specifier.

    Args:
        specifier (Optional[str]): Module specifier text, e.g. ``"ant-design-vue"``.

    Returns:
        Optional[LibrarySpec]: The first matching spec, or None.
    """
    if not specifier:
      return None
    for lib in self._libs:
      if lib.library_name == specifier:
        return lib
    return None

  def names(self) -> Tuple[str, ...]:
    """Registered library names, in registration order, without empty names."""
    return tuple(lib.library_name for lib in self._libs if lib.library_name)

  def __iter__(self) -> Iterator[LibrarySpec]:
    return iter(self._libs)

  def __len__(self) -> int:
    return len(self._libs)

  def __repr__(self) -> str:
    return f"LibraryRegistry({list(self.names())!r})"
