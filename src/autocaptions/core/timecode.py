"""Timecode conversion between SRT timestamps and timeline frames.

Frame numbers are always floored, never rounded: two timestamps less than one
frame apart can land on the same frame. Rates are handled as exact decimal
fractions so that e.g. 29.97 fps does not pick up binary rounding noise.
"""

import logging
import math
import re
from datetime import timedelta
from fractions import Fraction
from typing import Dict, Tuple, Union

from .errors import TimecodeError

logger = logging.getLogger(__name__)

Number = Union[int, float]

_TIMESTAMP_RE = re.compile(r"^(\d+):(\d+):(\d+),(\d{3})$")

# Known (width, height) pairs and their Final Cut Pro format name prefixes
RATE_NAME_PREFIXES: Dict[Tuple[int, int], str] = {
    (1280, 720): "FFVideoFormat720p",
    (1920, 1080): "FFVideoFormat1080p",
    (3840, 2160): "FFVideoFormat3840x2160p",
    (4096, 2160): "FFVideoFormat4096x2160p",
    (1080, 1920): "FFVideoFormat1080x1920p",
}

UNDEFINED_RATE_NAME = "FFVideoFormatRateUndefined"


def _exact(fps: Number) -> Fraction:
    return Fraction(str(fps))


def _ms_to_frame(total_ms: int, fps: Number) -> int:
    # floor(ms / (1000 / fps)) == floor(ms * fps / 1000)
    return math.floor(Fraction(total_ms) * _exact(fps) / 1000)


def _timestamp_to_ms(timestamp: str) -> int:
    """Lenient millisecond extraction; raises ValueError on any problem."""
    value = timestamp.strip()
    if len(value) < 5:
        raise ValueError(f"timestamp too short: {timestamp!r}")

    ms_field = value[-3:]
    components = value[:-4].split(":")
    if len(components) < 3:
        raise ValueError(f"too few time components: {timestamp!r}")

    fields = [ms_field] + components[:3]
    if not all(field.isdecimal() for field in fields):
        raise ValueError(f"non-numeric time component: {timestamp!r}")

    hours, minutes, seconds = (int(part) for part in components[:3])
    return (hours * 3600 + minutes * 60 + seconds) * 1000 + int(ms_field)


def time_to_frame(timestamp: str, fps: Number) -> int:
    """Convert an SRT timestamp to a frame number.

    Args:
        timestamp: Time in ``HH:MM:SS,mmm`` form
        fps: Frame rate, 0 < fps <= 120

    Returns:
        Floored frame number, or 0 if the timestamp is malformed
    """
    try:
        total_ms = _timestamp_to_ms(timestamp)
    except ValueError as e:
        logger.debug("Treating malformed timestamp as frame 0: %s", e)
        return 0
    return _ms_to_frame(total_ms, fps)


def timedelta_to_frame(delta: timedelta, fps: Number) -> int:
    """Convert a parsed time to a floored frame number."""
    return _ms_to_frame(delta // timedelta(milliseconds=1), fps)


def parse_timestamp(value: str) -> timedelta:
    """Strictly parse an SRT timestamp.

    Args:
        value: Time in ``HH:MM:SS,mmm`` form

    Returns:
        The time as a timedelta

    Raises:
        TimecodeError: If the value is not a well-formed timestamp
    """
    match = _TIMESTAMP_RE.match(value.strip())
    if not match:
        raise TimecodeError(f"Invalid SRT timestamp: {value!r}")

    hours, minutes, seconds, milliseconds = (int(group) for group in match.groups())
    return timedelta(
        hours=hours, minutes=minutes, seconds=seconds, milliseconds=milliseconds
    )


def fps_hundredths(fps: Number) -> int:
    """Frame rate times one hundred, truncated (29.97 -> 2997)."""
    return int(_exact(fps) * 100)


def format_frames(frames: int, fps: Number) -> str:
    """Format a frame count as an FCPXML rational time, e.g. ``3000/3000s``."""
    return f"{frames * 100}/{fps_hundredths(fps)}s"


def format_rate_name(width: int, height: int, rate_hundredths: int) -> str:
    """Final Cut Pro format name for a resolution and rate.

    Args:
        width: Frame width in pixels
        height: Frame height in pixels
        rate_hundredths: Frame rate times one hundred

    Returns:
        e.g. ``FFVideoFormat1080p2997``, or the undefined-rate name for
        resolutions Final Cut Pro has no named format for
    """
    prefix = RATE_NAME_PREFIXES.get((width, height))
    if prefix is None:
        return UNDEFINED_RATE_NAME
    return f"{prefix}{rate_hundredths}"
