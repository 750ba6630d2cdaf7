"""
Tests for configuration models and pyproject.toml loading.

Verifies:
1. camelCase aliases and template-based resolvers on LibrarySpec.
2. Immutability of configuration models.
3. Loading [tool.style_import] by searching parent directories.
4. Errors for invalid configuration.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from style_import.config import (
  DEFAULT_EXCLUDE,
  DEFAULT_INCLUDE,
  BuildConfig,
  LibrarySpec,
  PluginOptions,
  TemplateStyleResolver,
)
from style_import.enums import BuildCommand

PYPROJECT = """
[project]
name = "frontend"

[tool.style_import]
include = ["**/*.js"]

[[tool.style_import.libs]]
library_name = "ant-design-vue"
style_template = "ant-design-vue/es/{name}/style/index"
es_module = true

[[tool.style_import.libs]]
libraryName = "element-ui"
styleTemplate = "element-ui/lib/theme-chalk/{name}.css"
libDirectory = "lib"
"""


def test_camel_case_aliases():
  resolve = lambda name: name  # noqa: E731
  lib = LibrarySpec.model_validate(
    {
      "libraryName": "ui",
      "resolveStyle": resolve,
      "libraryNameChangeCase": "pascalCase",
      "esModule": True,
      "libDirectory": "lib",
    }
  )

  assert lib.library_name == "ui"
  assert lib.resolve_style is resolve
  assert lib.library_name_change_case == "pascalCase"
  assert lib.es_module is True
  assert lib.lib_directory == "lib"


def test_defaults():
  lib = LibrarySpec(library_name="ui")
  assert lib.resolve_style is None
  assert lib.library_name_change_case == "kebab-case"
  assert lib.es_module is False
  assert lib.lib_directory is None


def test_style_template_builds_resolver():
  lib = LibrarySpec(library_name="ui", style_template="ui/{name}.css")
  assert lib.resolve_style == TemplateStyleResolver("ui/{name}.css")
  assert lib.resolve_style("button") == "ui/button.css"


def test_explicit_resolver_wins_over_template():
  resolve = lambda name: "explicit"  # noqa: E731
  lib = LibrarySpec(library_name="ui", style_template="ui/{name}.css", resolve_style=resolve)
  assert lib.resolve_style is resolve


def test_models_are_frozen():
  with pytest.raises(ValidationError):
    LibrarySpec(library_name="ui").library_name = "other"
  with pytest.raises(ValidationError):
    BuildConfig().command = BuildCommand.BUILD


def test_plugin_option_defaults():
  options = PluginOptions()
  assert options.include == DEFAULT_INCLUDE
  assert options.exclude == DEFAULT_EXCLUDE
  assert options.libs == ()


def test_plugin_option_lists_become_tuples():
  options = PluginOptions(include=["src/**/*.js"], libs=[{"libraryName": "ui"}])
  assert options.include == ("src/**/*.js",)
  assert options.libs[0].library_name == "ui"


@pytest.mark.parametrize(
  "is_production, sourcemap, expected",
  [(True, True, True), (True, "hidden", True), (True, False, False), (False, True, False)],
)
def test_needs_sourcemap(is_production, sourcemap, expected):
  assert BuildConfig(is_production=is_production, sourcemap=sourcemap).needs_sourcemap is expected


def test_invalid_sourcemap_mode():
  with pytest.raises(ValidationError, match="Unknown sourcemap mode"):
    BuildConfig(sourcemap="external")


def test_load_searches_parents(tmp_path):
  (tmp_path / "pyproject.toml").write_text(PYPROJECT, encoding="utf-8")
  nested = tmp_path / "src" / "components"
  nested.mkdir(parents=True)

  options = PluginOptions.load(search_path=nested)

  assert options.include == ("**/*.js",)
  assert options.config_dir == tmp_path.resolve()
  assert options.exclude == DEFAULT_EXCLUDE
  ant, element = options.libs
  assert ant.es_module is True
  assert ant.resolve_style("date-picker") == "ant-design-vue/es/date-picker/style/index"
  assert element.library_name == "element-ui"
  assert element.lib_directory == "lib"
  assert element.resolve_style("button") == "element-ui/lib/theme-chalk/button.css"


def test_load_explicit_file(tmp_path):
  config = tmp_path / "style.toml"
  config.write_text(PYPROJECT, encoding="utf-8")
  options = PluginOptions.load(config_file=config)
  assert len(options.libs) == 2
  assert options.config_dir == tmp_path.resolve()


def test_load_without_configuration(tmp_path):
  (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
  options = PluginOptions.load(search_path=tmp_path)
  assert options == PluginOptions()
  assert options.config_dir is None


def test_load_invalid_section(tmp_path):
  (tmp_path / "pyproject.toml").write_text(
    '[[tool.style_import.libs]]\nlibrary_name = "ui"\nes_module = "maybe"\n', encoding="utf-8"
  )
  with pytest.raises(ValueError, match="Invalid style-import configuration"):
    PluginOptions.load(search_path=tmp_path)


def test_load_malformed_toml(tmp_path):
  (tmp_path / "pyproject.toml").write_text("[tool.style_import\n", encoding="utf-8")
  with pytest.raises(ValueError):
    PluginOptions.load(search_path=tmp_path)


def test_default_root_is_cwd():
  assert BuildConfig().root == Path.cwd()
