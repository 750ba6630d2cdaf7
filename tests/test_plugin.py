"""
Tests for the plugin lifecycle and the top-level `transform` helper.
"""

from pathlib import Path

import pytest

import style_import
from style_import import BuildConfig, LibrarySpec, create_plugin

CODE = "import { MyButton } from 'ui-kit';"
EXPECTED = "import 'styles/my-button.css';\nimport { MyButton } from 'ui-kit';"


@pytest.fixture
def plugin():
  return create_plugin(libs=[{"libraryName": "ui-kit", "resolveStyle": lambda n: f"styles/{n}.css"}])


def test_transform_after_config_resolved(plugin):
  plugin.config_resolved(BuildConfig(root=Path("/proj")))

  assert plugin.name == "vite:style-import"
  assert plugin.build.root == Path("/proj")
  assert plugin.transform(CODE, "/proj/src/App.vue").code == EXPECTED


def test_transform_requires_config(plugin):
  with pytest.raises(RuntimeError, match="before config_resolved"):
    plugin.transform(CODE, "/proj/src/App.vue")


def test_config_resolves_once(plugin):
  plugin.config_resolved(BuildConfig())
  with pytest.raises(RuntimeError, match="already resolved"):
    plugin.config_resolved(BuildConfig())


def test_build_is_none_before_resolution(plugin):
  assert plugin.build is None


def test_transform_helper(ui_kit):
  assert style_import.transform(CODE, libs=[ui_kit]) == EXPECTED


def test_transform_helper_returns_input_when_unmatched(ui_kit):
  code = "import React from 'react';"
  assert style_import.transform(code, libs=[ui_kit]) is code


def test_transform_helper_accepts_any_file_id(ui_kit):
  assert style_import.transform(CODE, libs=[ui_kit], file_id="notes.txt") == EXPECTED


def test_library_spec_exported():
  assert style_import.LibrarySpec is LibrarySpec
