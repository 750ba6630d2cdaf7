"""
Build Plugin Facade.

`StyleImportPlugin` adapts `TransformEngine` to the two-phase lifecycle of a
bundler plugin: the host resolves its configuration once (`config_resolved`)
and then calls `transform` for every module.
"""

from typing import Any, Optional

from style_import.config import BuildConfig, PluginOptions
from style_import.core.engine import TransformEngine, TransformResult
from style_import.utils.console import log_debug


class StyleImportPlugin:
  """
  Plugin object registered with a build host.

  Attributes:
      name (str): Plugin identifier reported to the host.
      options (PluginOptions): User options.
  """

  name = "vite:style-import"

  def __init__(self, options: Optional[PluginOptions] = None) -> None:
    self.options = options or PluginOptions()
    self._engine: Optional[TransformEngine] = None

  @property
  def build(self) -> Optional[BuildConfig]:
    return self._engine.build if self._engine else None

  def config_resolved(self, build: BuildConfig) -> None:
    """
    Receives the host's resolved build configuration.

    Args:
        build (BuildConfig): The resolved settings.

    Raises:
        RuntimeError: If configuration was already resolved.
    """
    if self._engine is not None:
      raise RuntimeError(f"{self.name}: build configuration is already resolved")
    log_debug("resolved build config for %s", self.name)
    self._engine = TransformEngine(self.options, build)

  def transform(self, code: str, file_id: str) -> Optional[TransformResult]:
    """
    Transforms one module.

    Args:
        code (str): Module source.
        file_id (str): Module id.

    Returns:
        Optional[TransformResult]: None if the module is unchanged.

    Raises:
        RuntimeError: If called before `config_resolved`.
    """
    if self._engine is None:
      raise RuntimeError(f"{self.name}: transform() called before config_resolved()")
    return self._engine.run(code, file_id)


def create_plugin(options: Optional[PluginOptions] = None, **kwargs: Any) -> StyleImportPlugin:
  """
  Creates a plugin from an options model or keyword options.

  Example::

      plugin = create_plugin(libs=[{"libraryName": "ui-kit", "resolveStyle": lambda n: f"ui-kit/{n}.css"}])

  Args:
      options (PluginOptions, optional): Pre-built options.
      **kwargs: Fields of `PluginOptions`, used when `options` is None.

  Returns:
      StyleImportPlugin: The plugin.
  """
  return StyleImportPlugin(options or PluginOptions.model_validate(kwargs))
