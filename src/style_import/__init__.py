"""
style-import Package.

Injects the stylesheet imports of UI component libraries into JavaScript and
TypeScript modules. For every component imported from a registered library,
an ``import '<style path>';`` statement is added, so only the styles of
components in use are bundled.

Usage
-----

Simple String Transform
^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    import style_import as si

    lib = si.LibrarySpec(library_name="ui-kit", resolve_style=lambda name: f"styles/{name}.css")
    print(si.transform("import { MyButton } from 'ui-kit';", libs=[lib]))
    # import 'styles/my-button.css';
    # import { MyButton } from 'ui-kit';

Plugin Lifecycle
^^^^^^^^^^^^^^^^

.. code-block:: python

    from style_import import BuildConfig, BuildCommand, create_plugin

    plugin = create_plugin(libs=[{"libraryName": "ui-kit", "styleTemplate": "styles/{name}.css"}])
    plugin.config_resolved(BuildConfig(command=BuildCommand.BUILD, is_production=True, sourcemap=True))
    result = plugin.transform(code, "/project/src/App.vue")
    if result is not None:
        print(result.code, result.map)
"""

from typing import Iterable, Optional

from style_import.config import BuildConfig, LibrarySpec, PluginOptions
from style_import.core.engine import TransformEngine, TransformResult
from style_import.enums import BuildCommand, NamingConvention
from style_import.plugin import StyleImportPlugin, create_plugin

__version__ = "0.1.0"


def transform(
  code: str,
  libs: Iterable[LibrarySpec],
  file_id: str = "module.js",
  build: Optional[BuildConfig] = None,
) -> str:
  """
  Injects style imports into a source string.

  A convenience wrapper around `TransformEngine` that matches every file id.

  Args:
      code (str): Module source.
      libs (Iterable[LibrarySpec]): Component libraries to recognize.
      file_id (str): Module id, used for source map naming.
      build (BuildConfig, optional): Build settings. Defaults to a dev server.

  Returns:
      str: The transformed code, or `code` itself if nothing matched.
  """
  options = PluginOptions(include=(), exclude=(), libs=tuple(libs))
  result = TransformEngine(options, build).run(code, file_id)
  return code if result is None else result.code


__all__ = [
  "BuildCommand",
  "BuildConfig",
  "LibrarySpec",
  "NamingConvention",
  "PluginOptions",
  "StyleImportPlugin",
  "TransformEngine",
  "TransformResult",
  "create_plugin",
  "transform",
  "__version__",
]
