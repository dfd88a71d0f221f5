"""Utility modules for AutoCaptions.

This package contains utility functions:
- encoding: Text encoding detection for subtitle files
- common: Common utility functions shared across modules
"""

from typing import List

from .common import ensure_directory, setup_logging, validate_file_exists
from .encoding import detect_encoding, read_text_file

__all__: List[str] = [
    "detect_encoding",
    "ensure_directory",
    "read_text_file",
    "setup_logging",
    "validate_file_exists",
]
