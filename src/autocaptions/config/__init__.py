"""Configuration modules for AutoCaptions.

This package contains configuration settings and constants:
- settings: Application settings and defaults
- languages: Languages recognized by the speech engine
"""

from typing import List

from .languages import Language
from .settings import (
    DEFAULT_CHUNK_MINUTES,
    DEFAULT_ENCODING,
    DEFAULT_FPS,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    SUPPORTED_ENCODINGS,
    get_default_style_file,
)

__all__: List[str] = [
    "Language",
    "DEFAULT_CHUNK_MINUTES",
    "DEFAULT_ENCODING",
    "DEFAULT_FPS",
    "DEFAULT_HEIGHT",
    "DEFAULT_WIDTH",
    "SUPPORTED_ENCODINGS",
    "get_default_style_file",
]
