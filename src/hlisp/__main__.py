"""
Entry point for module execution (``python -m hlisp``).

This module delegates execution to the CLI handler in ``hlisp.cli.__main__``.
"""

import sys
from hlisp.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
