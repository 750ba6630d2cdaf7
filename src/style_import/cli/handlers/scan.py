"""
Scan Command Handler.

Prints the module statements `ModuleScanner` finds in a file.
"""

from pathlib import Path

from rich.markup import escape
from rich.table import Table

from style_import.core.scanner import IMPORT_META, ScanError, scan
from style_import.utils.console import console, log_error, log_info


def handle_scan(input_path: Path) -> int:
  """
  Handles the 'scan' command.

  Args:
      input_path: Source file to scan.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  if not input_path.is_file():
    log_error(f"Input not found: {input_path}")
    return 1

  code = input_path.read_text(encoding="utf-8")
  try:
    imports, exports = scan(code)
  except ScanError as e:
    log_error(f"Cannot scan [path]{input_path}[/path]: {escape(str(e))}")
    return 1

  table = Table(title=f"Module statements in {input_path.name}")
  table.add_column("Specifier", style="cyan")
  table.add_column("Kind", justify="center")
  table.add_column("Range", justify="right")
  table.add_column("Statement", style="dim")

  for record in imports:
    if record.is_static:
      kind = "static"
    elif record.d == IMPORT_META:
      kind = "import.meta"
    else:
      kind = "dynamic"
    statement = " ".join(code[record.ss : record.se].split())
    table.add_row(escape(record.n or "-"), kind, f"{record.ss}-{record.se}", escape(statement))

  console.print(table)
  log_info(f"Exports: {escape(', '.join(exports)) if exports else '(none)'}")
  return 0
