"""
Configuration models.

- `LibrarySpec`: one component library and how to locate its styles.
- `PluginOptions`: include/exclude globs and the library list, optionally
  loaded from ``[tool.style_import]`` in ``pyproject.toml``.
- `BuildConfig`: the host build settings, resolved once per process.

All models are frozen: they are created during startup and only read afterwards.
"""

import sys
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from style_import.enums import BuildCommand, NamingConvention

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

DEFAULT_INCLUDE: Tuple[str, ...] = ("**/*.vue", "**/*.ts", "**/*.js", "**/*.tsx", "**/*.jsx")
DEFAULT_EXCLUDE = "node_modules/**"
TOOL_SECTIONS = ("style_import", "style-import")


class TemplateStyleResolver:
  """
  Style resolver built from a ``str.format`` template.

  Used when configuration comes from TOML, which cannot express callables::

      TemplateStyleResolver("ant-design-vue/es/{name}/style/index")("date-picker")
      # 'ant-design-vue/es/date-picker/style/index'
  """

  __slots__ = ("template",)

  def __init__(self, template: str) -> None:
    self.template = template

  def __call__(self, name: str) -> str:
    return self.template.format(name=name)

  def __eq__(self, other: object) -> bool:
    return isinstance(other, TemplateStyleResolver) and other.template == self.template

  def __hash__(self) -> int:
    return hash(self.template)

  def __repr__(self) -> str:
    return f"TemplateStyleResolver({self.template!r})"


class LibrarySpec(BaseModel):
  """
  A registered component library.

  Field names accept both snake_case and the camelCase spellings used by
  JavaScript configuration (``libraryName``, ``resolveStyle``, ...).
  """

  model_config = ConfigDict(frozen=True, populate_by_name=True, arbitrary_types_allowed=True)

  library_name: str = Field("", alias="libraryName", description="Module specifier the library is imported by.")
  resolve_style: Optional[Callable[[str], Any]] = Field(
    None, alias="resolveStyle", description="Maps a converted component name to its style module path."
  )
  library_name_change_case: Union[NamingConvention, str] = Field(
    NamingConvention.KEBAB,
    alias="libraryNameChangeCase",
    description="Naming convention applied to identifiers before `resolve_style`.",
  )
  es_module: bool = Field(False, alias="esModule", description="Resolve style paths inside node_modules.")
  lib_directory: Optional[str] = Field(
    None, alias="libDirectory", description="Per-component directory used to rewrite deep imports on build."
  )
  style_template: Optional[str] = Field(
    None, alias="styleTemplate", description="`str.format` template with a `{name}` field, used if no resolver."
  )

  @model_validator(mode="before")
  @classmethod
  def build_template_resolver(cls, data: Any) -> Any:
    """
    Derives `resolve_style` from `style_template` when no callable is given.

    Args:
        data (Any): Raw input.

    Returns:
        Any: Input with `resolve_style` filled in where applicable.
    """
    if not isinstance(data, dict):
      return data
    template = data.get("style_template", data.get("styleTemplate"))
    has_resolver = data.get("resolve_style") is not None or data.get("resolveStyle") is not None
    if template and not has_resolver:
      data = {**data, "resolve_style": TemplateStyleResolver(template)}
      data.pop("resolveStyle", None)
    return data

  @field_validator("resolve_style", mode="before")
  @classmethod
  def tolerate_non_callable(cls, v: Any) -> Any:
    # A non-callable resolver is a no-op library, not a configuration error.
    return v if callable(v) else None


class PluginOptions(BaseModel):
  """
  User options for the style import transform.
  """

  model_config = ConfigDict(frozen=True)

  include: Union[str, Tuple[str, ...]] = Field(DEFAULT_INCLUDE, description="Glob(s) of module ids to transform.")
  exclude: Union[str, Tuple[str, ...]] = Field(DEFAULT_EXCLUDE, description="Glob(s) of module ids to skip.")
  libs: Tuple[LibrarySpec, ...] = Field(default_factory=tuple, description="Registered component libraries.")
  config_dir: Optional[Path] = Field(None, description="Directory of the TOML file the options were loaded from.")

  @classmethod
  def load(cls, search_path: Optional[Path] = None, config_file: Optional[Path] = None) -> "PluginOptions":
    """
    Loads options from ``[tool.style_import]`` of a ``pyproject.toml``.

    Args:
        search_path (Optional[Path]): Directory to start searching parents from. Defaults to cwd.
        config_file (Optional[Path]): Explicit TOML file, bypassing the search.

    Returns:
        PluginOptions: Loaded options, defaults if no configuration is found. `config_dir`
        records where the configuration was found.

    Raises:
        ValueError: If the TOML is malformed or the section fails validation.
    """
    if config_file is not None:
      settings, config_dir = _read_tool_section(config_file), Path(config_file).resolve().parent
    else:
      settings, config_dir = _load_toml_settings(search_path or Path.cwd())

    try:
      return cls.model_validate({**settings, "config_dir": config_dir})
    except ValidationError as e:
      raise ValueError(f"Invalid style-import configuration: {e}")


class BuildConfig(BaseModel):
  """
  Host build settings consumed by the transform.
  """

  model_config = ConfigDict(frozen=True)

  command: BuildCommand = Field(BuildCommand.SERVE, description="'build' for bundling, 'serve' for dev server.")
  is_production: bool = Field(False, description="True for production builds.")
  sourcemap: Union[bool, str] = Field(False, description="True, 'inline' or 'hidden' to emit source maps.")
  root: Path = Field(default_factory=Path.cwd, description="Project root; node_modules is resolved below it.")

  @field_validator("sourcemap")
  @classmethod
  def validate_sourcemap(cls, v: Union[bool, str]) -> Union[bool, str]:
    if isinstance(v, str) and v not in ("inline", "hidden"):
      raise ValueError(f"Unknown sourcemap mode: '{v}'. Expected true, false, 'inline' or 'hidden'.")
    return v

  @property
  def needs_sourcemap(self) -> bool:
    """Source maps are produced for production builds with source maps enabled."""
    return self.is_production and bool(self.sourcemap)


def _read_tool_section(toml_path: Path) -> Dict[str, Any]:
  with open(toml_path, "rb") as f:
    data = tomllib.load(f)
  tool_section = data.get("tool", {})
  for key in TOOL_SECTIONS:
    if key in tool_section:
      return tool_section[key]
  return {}


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches `start_path` and its parents for a ``pyproject.toml`` with a style-import section.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The section and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      settings = _read_tool_section(toml_path)
      if settings:
        return settings, parent

  return {}, None
