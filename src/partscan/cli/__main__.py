"""
partscan CLI entry point.

Usage:
    python -m partscan.cli INPUT [options]
"""

import sys

from partscan.cli.scan import main

if __name__ == "__main__":
    sys.exit(main())
