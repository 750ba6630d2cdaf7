"""
Tests for the Source Text Editor.

Verifies:
1. Prepends stack in reverse call order.
2. Overwrites replace ranges and reject overlaps.
3. Generated source maps point back at original positions.
"""

import pytest

from style_import.core.editor import SourceEditor


def test_prepend_order():
  editor = SourceEditor("abc\ndef")
  editor.prepend("X\n").prepend("Y\n")
  assert editor.to_string() == "Y\nX\nabc\ndef"
  assert str(editor) == editor.to_string()


def test_overwrite():
  editor = SourceEditor("hello world")
  editor.overwrite(0, 5, "HELLO")
  assert editor.to_string() == "HELLO world"


@pytest.mark.parametrize("start, end", [(3, 8), (0, 1), (4, 5)])
def test_overlapping_overwrite_rejected(start, end):
  editor = SourceEditor("hello world")
  editor.overwrite(0, 5, "HELLO")
  with pytest.raises(ValueError, match="overlaps"):
    editor.overwrite(start, end, "x")


def test_adjacent_overwrites_allowed():
  editor = SourceEditor("hello world")
  editor.overwrite(0, 5, "HELLO").overwrite(5, 6, "_")
  assert editor.to_string() == "HELLO_world"


@pytest.mark.parametrize("start, end", [(-1, 2), (3, 3), (5, 2), (0, 99)])
def test_invalid_range_rejected(start, end):
  with pytest.raises(ValueError, match="Invalid overwrite range"):
    SourceEditor("hello").overwrite(start, end, "x")


def test_has_changed():
  editor = SourceEditor("hello")
  assert not editor.has_changed
  editor.overwrite(0, 5, "hello")
  assert not editor.has_changed
  editor.prepend("x")
  assert editor.has_changed


def test_map_skips_prepended_lines():
  editor = SourceEditor("a\nb")
  editor.prepend("x\n")
  smap = editor.generate_map(source="/src/f.js")

  assert smap.file == "f.js"
  assert smap.sources == ["/src/f.js"]
  assert smap.sourcesContent == ["a\nb"]
  assert smap.mappings == ";AAAA;AACA"
  assert smap.decoded() == [[], [(0, 0, 0, 0)], [(0, 0, 1, 0)]]


def test_map_after_overwrite():
  code = "import { A } from 'x';\nfoo()"
  editor = SourceEditor(code)
  editor.overwrite(0, 21, 'import A from "x/a"')

  assert editor.to_string() == 'import A from "x/a";\nfoo()'
  assert editor.generate_map(source="f.js").decoded() == [[(0, 0, 0, 0), (19, 0, 0, 21)], [(0, 0, 1, 0)]]


def test_map_without_content():
  smap = SourceEditor("a").generate_map(source="f.js", include_content=False)
  assert smap.sourcesContent is None


def test_map_columns_count_utf16_units():
  code = "x('\U0001F600'); bar"
  editor = SourceEditor(code)
  editor.overwrite(code.index("bar"), len(code), "baz")

  # The emoji is one code point but two UTF-16 units.
  assert editor.generate_map(source="f.js").decoded() == [[(0, 0, 0, 0), (10, 0, 0, 10)]]
