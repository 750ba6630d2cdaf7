"""
Orchestration Engine for style import injection.

`TransformEngine` runs the per-file pipeline:

1.  **Filtering**: the module id must pass the include/exclude globs and the
    source must quote a registered library name (`need_transform`).
2.  **Scanning**: module statements are located by `ModuleScanner`. Source
    that cannot be lexed is logged and passed through unchanged.
3.  **Matching**: each static import whose specifier equals a registered
    `library_name` is processed; all others are ignored.
4.  **Resolution**: imported names are extracted (aliases resolved) and mapped
    to ``import '<style>';`` statements, de-duplicated within the file.
5.  **Rewriting**: each style block is prepended to the file; on ``build``,
    libraries with a `lib_directory` also get their import split into deep
    per-component imports.

The engine holds only immutable configuration, so one instance may serve any
number of files.
"""

import posixpath
from typing import List, Optional, Set

from pydantic import BaseModel, ConfigDict, Field
from rich.markup import escape

from style_import.config import BuildConfig, PluginOptions
from style_import.core.editor import SourceEditor
from style_import.core.extractor import Binding, extract_bindings
from style_import.core.prefilter import need_transform
from style_import.core.registry import LibraryRegistry
from style_import.core.resolver import resolve_styles
from style_import.core.rewriter import rewrite_deep_imports, style_block
from style_import.core.scanner import ImportSpecifier, ScanError, scan
from style_import.core.sourcemap import SourceMap
from style_import.enums import BuildCommand
from style_import.utils.console import log_debug, log_warning
from style_import.utils.filter import create_filter


class TransformResult(BaseModel):
  """
  Output of a transform that touched the file.
  """

  model_config = ConfigDict(frozen=True)

  code: str = Field(description="The transformed source code.")
  map: Optional[SourceMap] = Field(None, description="Source map, for production builds with source maps on.")


class TransformEngine:
  """
  Applies style import injection to individual files.
  """

  def __init__(self, options: Optional[PluginOptions] = None, build: Optional[BuildConfig] = None) -> None:
    """
    Args:
        options (PluginOptions, optional): Include/exclude globs and libraries.
        build (BuildConfig, optional): Resolved host build settings. Defaults to a dev server.
    """
    self.options = options or PluginOptions()
    self.build = build or BuildConfig()
    self.registry = LibraryRegistry(self.options.libs)
    self._filter = create_filter(self.options.include, self.options.exclude, root=self.build.root)
    log_debug("plugin options: %s", self.options)
    log_debug("plugin config: %s", self.build)

  def accepts(self, file_id: str) -> bool:
    """Checks the include/exclude globs for a module id."""
    return self._filter(file_id)

  def run(self, code: str, file_id: str) -> Optional[TransformResult]:
    """
    Transforms one file.

    Args:
        code (str): Source text.
        file_id (str): Module id (usually an absolute path).

    Returns:
        Optional[TransformResult]: None if the file is left unchanged.

    Raises:
        Exception: Whatever a library's `resolve_style` raises, unwrapped.
    """
    if not code or not self.accepts(file_id) or not need_transform(code, self.registry):
      return None

    imports = self._scan(code)
    if not imports:
      return None

    editor = SourceEditor(code)
    seen: Set[str] = set()
    matched = False

    for record in imports:
      if not record.is_static:
        continue
      name = code[record.s : record.e]
      lib = self.registry.match(name)
      if lib is None:
        continue
      matched = True

      statement = code[record.ss : record.se]
      bindings = self._bindings(statement)
      styles = resolve_styles(lib, [b.imported for b in bindings], cwd=self.build.root, seen=seen)
      block = style_block(styles)
      log_debug("prepend import str: %s", block)

      if lib.lib_directory and self.build.command == BuildCommand.BUILD:
        replacement = rewrite_deep_imports(statement, lib, bindings)
        if replacement != statement:
          editor.overwrite(record.ss, record.se, replacement)

      if block:
        editor.prepend(block)

    if not matched:
      return None

    source_map = None
    if self.build.needs_sourcemap:
      source_map = editor.generate_map(source=file_id, file=posixpath.basename(file_id.replace("\\", "/")))
    return TransformResult(code=editor.to_string(), map=source_map)

  def _scan(self, code: str) -> List[ImportSpecifier]:
    try:
      imports, _ = scan(code)
    except ScanError as e:
      log_debug("imports-error: %s", e)
      return []
    log_debug("imports: %s", imports)
    return imports

  def _bindings(self, statement: str) -> List[Binding]:
    try:
      bindings = extract_bindings(statement)
    except ScanError as e:
      log_warning(f"Could not read import bindings of `{escape(statement)}`: {escape(str(e))}")
      return []
    log_debug("import bindings: %s", [b.imported for b in bindings])
    return bindings
