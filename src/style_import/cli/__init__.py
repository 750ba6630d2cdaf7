"""
Command Line Interface for style-import.
"""
