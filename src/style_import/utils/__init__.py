"""
Shared utilities: logging, naming conventions, path handling and file filtering.
"""
