"""
Module execution entry point.

Allows running with: python -m keylib_cli
"""

import sys
from keylib_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
