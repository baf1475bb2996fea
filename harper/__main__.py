"""Entry point for Harper when run as a module.

This allows the package to be run with: python -m harper
"""

import sys

from harper.cli import main

if __name__ == "__main__":
    sys.exit(main())
