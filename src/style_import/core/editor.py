"""
Source Text Editor.

`SourceEditor` records edits against an immutable original text and renders
the result in one pass, optionally with a source map.

Supported edits:

- `prepend`: insert text before everything (including earlier prepends).
- `overwrite`: replace a range of the original; ranges must not overlap.

Text that is not edited is copied byte for byte.
"""

import bisect
import posixpath
from typing import Dict, Iterator, List, Optional, Tuple

from style_import.core.sourcemap import Segment, SourceMap, encode_mappings


def _utf16_len(text: str) -> int:
  # Source map columns count UTF-16 code units.
  return len(text.encode("utf-16-le")) // 2


class SourceEditor:
  """
  Accumulates edits for one file.

  Attributes:
      original (str): The unmodified source text.
  """

  def __init__(self, original: str) -> None:
    self.original = original
    self._intro = ""
    self._overwrites: Dict[int, Tuple[int, str]] = {}

  def prepend(self, content: str) -> "SourceEditor":
    """
    Inserts `content` at the very start of the output.

    Later calls end up before earlier ones.
    """
    self._intro = content + self._intro
    return self

  def overwrite(self, start: int, end: int, content: str) -> "SourceEditor":
    """
    Replaces ``original[start:end]`` with `content`.

    Args:
        start (int): Start offset in the original text.
        end (int): End offset in the original text (exclusive).
        content (str): Replacement text.

    Returns:
        SourceEditor: self, for chaining.

    Raises:
        ValueError: If the range is empty, out of bounds, or overlaps another overwrite.
    """
    if not 0 <= start < end <= len(self.original):
      raise ValueError(f"Invalid overwrite range [{start}, {end}) for text of length {len(self.original)}")
    for other_start, (other_end, _) in self._overwrites.items():
      if start < other_end and other_start < end:
        raise ValueError(f"Overwrite [{start}, {end}) overlaps [{other_start}, {other_end})")
    self._overwrites[start] = (end, content)
    return self

  @property
  def has_changed(self) -> bool:
    return bool(self._intro) or any(
      content != self.original[start:end] for start, (end, content) in self._overwrites.items()
    )

  def _chunks(self) -> Iterator[Tuple[str, Optional[int], bool]]:
    """
    Yields output pieces as ``(text, original_offset, edited)``.

    Inserted text has no original offset; overwrites map to their range start.
    """
    if self._intro:
      yield self._intro, None, True
    pos = 0
    for start in sorted(self._overwrites):
      end, content = self._overwrites[start]
      if pos < start:
        yield self.original[pos:start], pos, False
      if content:
        yield content, start, True
      pos = end
    if pos < len(self.original):
      yield self.original[pos:], pos, False

  def to_string(self) -> str:
    return "".join(text for text, _, _ in self._chunks())

  def __str__(self) -> str:
    return self.to_string()

  def generate_map(
    self,
    source: Optional[str] = None,
    file: Optional[str] = None,
    include_content: bool = True,
  ) -> SourceMap:
    """
    Builds a source map from the output back to the original text.

    Unedited text gets a segment at the start of every chunk and every line;
    each line of replacement text maps to the start of the range it replaced;
    prepended text is unmapped.

    Args:
        source (Optional[str]): Name of the original file (``sources[0]``).
        file (Optional[str]): Name of the generated file. Defaults to the basename of `source`.
        include_content (bool): Embed the original text as ``sourcesContent``.

    Returns:
        SourceMap: The map.
    """
    line_starts = [0]
    for i, ch in enumerate(self.original):
      if ch == "\n":
        line_starts.append(i + 1)

    def locate(offset: int) -> Tuple[int, int]:
      line = bisect.bisect_right(line_starts, offset) - 1
      return line, _utf16_len(self.original[line_starts[line] : offset])

    lines: List[List[Segment]] = [[]]
    gen_column = 0
    for text, origin, edited in self._chunks():
      pieces = text.split("\n")
      offset = origin
      for index, piece in enumerate(pieces):
        if index > 0:
          lines.append([])
          gen_column = 0
        if origin is not None and (piece or index < len(pieces) - 1):
          line, column = locate(origin if edited else offset)
          lines[-1].append((gen_column, 0, line, column))
        gen_column += _utf16_len(piece)
        if offset is not None:
          offset += len(piece) + 1

    name = source or ""
    return SourceMap(
      file=file if file is not None else (posixpath.basename(name) or None),
      sources=[name],
      sourcesContent=[self.original] if include_content else None,
      names=[],
      mappings=encode_mappings(lines),
    )
