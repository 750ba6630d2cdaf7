"""
Main Entry Point for the style-import CLI.

Parses arguments and dispatches to the handlers in `style_import.cli.handlers`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from style_import import __version__
from style_import.cli import handlers
from style_import.enums import BuildCommand


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="style-import: inject component library style imports")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: TRANSFORM ---
  cmd_tr = subparsers.add_parser("transform", help="Inject style imports into a file or directory")
  cmd_tr.add_argument("path", type=Path, help="Input source file or directory")
  cmd_tr.add_argument("--out", type=Path, default=None, help="Output destination (file or dir)")
  cmd_tr.add_argument(
    "--mode",
    choices=[c.value for c in BuildCommand],
    default=BuildCommand.BUILD.value,
    help="Host command to emulate (default: build)",
  )
  cmd_tr.add_argument("--production", action="store_true", help="Treat the run as a production build")
  cmd_tr.add_argument("--sourcemap", action="store_true", help="Write <file>.map next to outputs (production only)")
  cmd_tr.add_argument("--config", type=Path, default=None, help="TOML file holding [tool.style_import]")
  cmd_tr.add_argument("--root", type=Path, default=None, help="Project root (default: directory of the configuration file, else cwd)")

  # --- Command: SCAN ---
  cmd_scan = subparsers.add_parser("scan", help="List the module statements found in a file")
  cmd_scan.add_argument("path", type=Path, help="Input source file")

  args = parser.parse_args(argv)

  if args.command == "transform":
    return handlers.handle_transform(
      args.path,
      args.out,
      BuildCommand(args.mode),
      args.production,
      args.sourcemap,
      config_file=args.config,
      root=args.root,
    )

  elif args.command == "scan":
    return handlers.handle_scan(args.path)

  return 0


if __name__ == "__main__":
  sys.exit(main())
