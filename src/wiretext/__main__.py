"""Module entry point for running with python -m wiretext."""

import sys

from wiretext.cli import main

if __name__ == "__main__":
    sys.exit(main())
