"""
Module execution entry point.

Allows running with: python -m huiji_cli
"""

import sys
from huiji_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
