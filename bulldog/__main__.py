"""Run Bulldog in the terminal: ``python -m bulldog``."""

import sys

from bulldog.cli import main

if __name__ == "__main__":
    sys.exit(main())
