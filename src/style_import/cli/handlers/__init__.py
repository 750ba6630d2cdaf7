"""
CLI command handlers.
"""

from style_import.cli.handlers.scan import handle_scan
from style_import.cli.handlers.transform import handle_transform

__all__ = ["handle_scan", "handle_transform"]
