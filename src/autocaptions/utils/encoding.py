"""Encoding detection utilities for AutoCaptions.

Speech engines write UTF-8, but subtitle files that have been through an
editor often pick up a byte order mark or a legacy code page. These helpers
find an encoding that decodes the whole file before it is parsed.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from ..config.settings import DEFAULT_ENCODING, SUPPORTED_ENCODINGS

logger = logging.getLogger(__name__)


def detect_encoding(
    file_path: Union[str, Path], encodings_to_try: Optional[List[str]] = None
) -> Optional[str]:
    """Attempt to detect the encoding of a subtitle file by trying multiple encodings.

    Args:
        file_path: Path to the subtitle file
        encodings_to_try: List of encodings to try, defaults to SUPPORTED_ENCODINGS

    Returns:
        First encoding that decodes the file, or None if detection fails
    """
    if encodings_to_try is None:
        encodings_to_try = SUPPORTED_ENCODINGS

    if not os.path.exists(file_path):
        logger.error("File not found: %s", file_path)
        return None

    for encoding_name in encodings_to_try:
        try:
            with open(file_path, "r", encoding=encoding_name) as f:
                f.read()
            logger.debug("Detected encoding: %s", encoding_name)
            return encoding_name
        except UnicodeError:
            continue
        except LookupError:
            logger.debug("Unknown encoding skipped: %s", encoding_name)
            continue

    logger.error("Could not detect encoding for %s", file_path)
    return None


def read_text_file(
    file_path: Union[str, Path], encoding: str = DEFAULT_ENCODING
) -> str:
    """Read a text file, detecting the encoding when the default is requested.

    Args:
        file_path: Path to the file
        encoding: File encoding; DEFAULT_ENCODING means auto-detect

    Returns:
        The decoded file content

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the content cannot be decoded
    """
    detected_encoding = encoding
    if encoding == DEFAULT_ENCODING:
        detected = detect_encoding(file_path)
        if detected:
            detected_encoding = detected

    with open(file_path, "r", encoding=detected_encoding) as f:
        return f.read()


def normalize_newlines(content: str) -> str:
    """Convert Windows and old Mac line endings to ``\\n``."""
    return content.replace("\r\n", "\n").replace("\r", "\n")
