"""
Entry point for module execution (``python -m style_import``).
"""

import sys
from style_import.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
