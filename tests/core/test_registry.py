"""
Tests for the Component Library Registry and the textual prefilter.
"""

import pytest

from style_import.config import LibrarySpec
from style_import.core.prefilter import need_transform
from style_import.core.registry import LibraryRegistry


def test_exact_match(ui_kit):
  registry = LibraryRegistry([ui_kit])
  assert registry.match("ui-kit") is ui_kit
  assert registry.match("ui-kit/es") is None
  assert registry.match("UI-KIT") is None
  assert registry.match(None) is None
  assert registry.match("") is None


def test_first_registration_wins():
  first = LibrarySpec(library_name="lib", style_template="one/{name}")
  second = LibrarySpec(library_name="lib", style_template="two/{name}")
  assert LibraryRegistry([first, second]).match("lib") is first


def test_registry_is_read_only(ui_kit):
  registry = LibraryRegistry([ui_kit])
  assert len(registry) == 1
  assert list(registry) == [ui_kit]
  assert registry.names() == ("ui-kit",)
  with pytest.raises(AttributeError):
    registry.extra = []


def test_names_skip_unnamed_libraries(ui_kit):
  assert LibraryRegistry([LibrarySpec(), ui_kit]).names() == ("ui-kit",)


@pytest.mark.parametrize(
  "code, expected",
  [
    ("import { A } from 'ui-kit'", True),
    ('import { A } from "ui-kit"', True),
    ("const name = 'ui-kit';", True),
    ("import { A } from 'ui-kit/es'", False),
    ("// ui-kit", False),
    ("import React from 'react'", False),
  ],
)
def test_need_transform(ui_kit, code, expected):
  assert need_transform(code, LibraryRegistry([ui_kit])) is expected


def test_need_transform_ignores_unnamed_library():
  assert need_transform("const s = '';", [LibrarySpec()]) is False
