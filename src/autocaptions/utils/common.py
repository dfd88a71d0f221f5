"""Common utility functions shared across AutoCaptions modules."""

import logging
import sys
from pathlib import Path
from typing import List, Optional, Union

from ..config.settings import SUPPORTED_SUBTITLE_FORMATS


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    format_string: Optional[str] = None,
) -> logging.Logger:
    """Set up logging configuration.

    Args:
        level: Logging level
        log_file: Optional log file path
        format_string: Optional custom format string

    Returns:
        Configured logger instance
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if log_file:
        ensure_directory(Path(log_file).parent)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        format=format_string,
        handlers=handlers,
        force=True,  # Override any existing configuration
    )

    return logging.getLogger(__name__)


def ensure_directory(path: Union[str, Path]) -> Path:
    """Ensure a directory exists, creating it if necessary.

    Args:
        path: Directory path

    Returns:
        Path object for the directory
    """
    path_obj = Path(path)
    path_obj.mkdir(parents=True, exist_ok=True)
    return path_obj


def validate_file_exists(path: Union[str, Path]) -> Path:
    """Validate that a file exists and return Path object.

    Args:
        path: File path to validate

    Returns:
        Path object for the file

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If path is empty or invalid
    """
    if not path:
        raise ValueError("File path cannot be empty")

    path_obj = Path(path)
    if not path_obj.exists():
        raise FileNotFoundError(f"File does not exist: {path_obj}")

    if not path_obj.is_file():
        raise ValueError(f"Path is not a file: {path_obj}")

    return path_obj


def is_subtitle_file(path: Union[str, Path]) -> bool:
    """Check if a file is an SRT subtitle file based on extension."""
    return Path(path).suffix.lower().lstrip(".") in SUPPORTED_SUBTITLE_FORMATS


def derive_output_path(path: Union[str, Path], suffix: str) -> Path:
    """Append a fixed suffix to the full input path.

    ``clip.srt`` with ``.fcpxml`` becomes ``clip.srt.fcpxml``.
    """
    return Path(f"{path}{suffix}")


def project_name_from_path(path: Union[str, Path]) -> str:
    """Default project name: the file name without its extension."""
    name = Path(path).stem.strip()
    return name or "Untitled"
