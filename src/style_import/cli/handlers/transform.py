"""
Transform Command Handler.

Implements ``style-import transform``:
1. Loads options from ``[tool.style_import]``.
2. Builds a `TransformEngine` for the requested build mode.
3. Transforms a single file or every matching file below a directory.
4. Writes outputs (plus ``.map`` files) and prints a summary.
"""

from pathlib import Path
from typing import Dict, Optional

from rich.markup import escape
from rich.table import Table

from style_import.config import BuildConfig, PluginOptions
from style_import.core.engine import TransformEngine
from style_import.enums import BuildCommand
from style_import.utils.console import console, log_error, log_info, log_success, log_warning

TRANSFORMED = "transformed"
UNCHANGED = "unchanged"
FAILED = "failed"


def handle_transform(
  input_path: Path,
  output_path: Optional[Path],
  mode: BuildCommand,
  production: bool,
  sourcemap: bool,
  config_file: Optional[Path] = None,
  root: Optional[Path] = None,
) -> int:
  """
  Handles the 'transform' command execution.

  Args:
      input_path: Source file or directory.
      output_path: Destination file or directory. Single files print to stdout without it.
      mode: Build command to emulate.
      production: Whether this is a production build.
      sourcemap: Whether to write source maps (production builds only).
      config_file: Explicit TOML configuration file.
      root: Project root. Defaults to the directory holding the configuration, then the current directory.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  if not input_path.exists():
    log_error(f"Input not found: {input_path}")
    return 1

  search_path = input_path if input_path.is_dir() else input_path.parent
  try:
    options = PluginOptions.load(search_path=search_path, config_file=config_file)
  except (OSError, ValueError) as e:
    log_error(escape(str(e)))
    return 1

  if not options.libs:
    log_warning("No libraries configured under [tool.style_import]; nothing will be injected.")

  project_root = (root or options.config_dir or Path.cwd()).resolve()
  build = BuildConfig(command=mode, is_production=production, sourcemap=sourcemap, root=project_root)
  engine = TransformEngine(options, build)
  statuses: Dict[str, str] = {}

  if input_path.is_file():
    statuses[input_path.name] = _transform_file(engine, input_path, output_path)

  else:
    if not output_path:
      log_error("Directory transforms require --out destination directory.")
      return 1

    sources = sorted(p for p in input_path.rglob("*") if p.is_file())
    candidates = [p for p in sources if engine.accepts(str(p.resolve()))]
    if not candidates:
      log_warning(f"No matching files found in {input_path}")
      return 0

    log_info(f"Processing {len(candidates)} files from {input_path}...")
    for src_file in candidates:
      rel_path = src_file.relative_to(input_path)
      statuses[str(rel_path)] = _transform_file(engine, src_file, output_path / rel_path)

  _print_summary(statuses)
  return 1 if FAILED in statuses.values() else 0


def _transform_file(engine: TransformEngine, input_path: Path, output_path: Optional[Path]) -> str:
  """
  Transforms one file and writes the result.

  Args:
      engine: Configured engine.
      input_path: Source file.
      output_path: Destination, or None to print the code.

  Returns:
      str: One of TRANSFORMED, UNCHANGED or FAILED.
  """
  try:
    code = input_path.read_text(encoding="utf-8")
    result = engine.run(code, str(input_path.resolve()))
  except Exception as e:
    log_error(f"Failed to transform [path]{input_path}[/path]: {escape(repr(e))}")
    return FAILED

  new_code = code if result is None else result.code
  if output_path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(new_code, encoding="utf-8")
    if result is not None and result.map is not None:
      map_path = output_path.with_name(output_path.name + ".map")
      map_path.write_text(result.map.to_json(), encoding="utf-8")
  else:
    print(new_code)

  return UNCHANGED if result is None else TRANSFORMED


def _print_summary(statuses: Dict[str, str]) -> None:
  """
  Renders a summary table of transform results.

  Args:
      statuses: Mapping of file names to their status.
  """
  total = len(statuses)
  transformed = sum(1 for s in statuses.values() if s == TRANSFORMED)
  failures = sum(1 for s in statuses.values() if s == FAILED)

  table = Table(title="Style Import Report")
  table.add_column("File", style="cyan")
  table.add_column("Status", justify="center")
  for filename, status in statuses.items():
    label = {TRANSFORMED: "✅ Transformed", UNCHANGED: "➖ Unchanged", FAILED: "❌ Failed"}[status]
    table.add_row(escape(filename), label)
  console.print(table)

  if failures:
    log_error(f"{failures}/{total} files failed.")
  else:
    log_success(f"Done: {transformed}/{total} files received style imports.")
