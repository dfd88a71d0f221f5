#!/usr/bin/env python3
"""Main entry point for AutoCaptions when run as a module.

This allows the package to be executed as:
    python -m autocaptions [args...]
"""

import sys
from typing import List, Optional

from .cli import main


def main_entry(args: Optional[List[str]] = None) -> int:
    """Run the CLI and return its exit code."""
    if args is None:
        args = sys.argv[1:]

    return main(args)


if __name__ == "__main__":
    sys.exit(main_entry())
