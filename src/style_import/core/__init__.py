"""
Transform engine: scanning, binding extraction, style resolution and rewriting.
"""

from style_import.core.engine import TransformEngine, TransformResult
from style_import.core.scanner import ImportSpecifier, ScanError, scan

__all__ = ["ImportSpecifier", "ScanError", "TransformEngine", "TransformResult", "scan"]
