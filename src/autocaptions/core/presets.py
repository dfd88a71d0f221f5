"""Resolution and frame rate presets, and their validation."""

from enum import Enum
from typing import NamedTuple, Optional

from ..config.settings import MAX_FPS, MAX_RESOLUTION, MIN_RESOLUTION


class VideoResolution(Enum):
    """Common timeline resolutions, as (key, width, height, display name)."""

    HD_720P = ("720p", 1280, 720, "720p HD (1280×720)")
    FULL_HD_1080P = ("1080p", 1920, 1080, "1080p Full HD (1920×1080)")
    UHD_4K = ("4k", 3840, 2160, "4K UHD (3840×2160)")
    DCI_4K = ("4k-dci", 4096, 2160, "4K DCI (4096×2160)")
    VERTICAL_1080P = ("vertical", 1080, 1920, "1080p Vertical (1080×1920)")

    def __init__(self, key: str, width: int, height: int, display_name: str) -> None:
        self.key = key
        self.width = width
        self.height = height
        self.display_name = display_name

    @classmethod
    def from_key(cls, key: str) -> "VideoResolution":
        """Look up a preset by its short key, e.g. ``"1080p"``."""
        for resolution in cls:
            if resolution.key == key.strip().lower():
                return resolution
        raise ValueError(f"Unknown resolution preset: {key}")


class FrameRate(Enum):
    """Common frame rates, as (fps, display name)."""

    FPS_23_976 = (23.976, "23.976 fps (Film)")
    FPS_24 = (24.0, "24 fps (Cinema)")
    FPS_25 = (25.0, "25 fps (PAL)")
    FPS_29_97 = (29.97, "29.97 fps (NTSC)")
    FPS_30 = (30.0, "30 fps")
    FPS_50 = (50.0, "50 fps (PAL HD)")
    FPS_59_94 = (59.94, "59.94 fps (NTSC HD)")
    FPS_60 = (60.0, "60 fps")

    def __init__(self, fps: float, display_name: str) -> None:
        self.fps = fps
        self.display_name = display_name


class ResolutionCheck(NamedTuple):
    """Outcome of a resolution check; a valid result may still carry a warning."""

    valid: bool
    message: Optional[str] = None


def is_valid_frame_rate(fps: float) -> bool:
    """Check that 0 < fps <= 120."""
    return 0 < fps <= MAX_FPS


def validate_resolution(width: int, height: int) -> ResolutionCheck:
    """Check a timeline resolution.

    Args:
        width: Frame width in pixels
        height: Frame height in pixels

    Returns:
        Invalid when either side is outside [640, 8192]; valid with a warning
        when either side is odd
    """
    if not (MIN_RESOLUTION <= width <= MAX_RESOLUTION and MIN_RESOLUTION <= height <= MAX_RESOLUTION):
        return ResolutionCheck(False, f"Resolution must be between {MIN_RESOLUTION} and {MAX_RESOLUTION}")
    if width % 2 != 0 or height % 2 != 0:
        return ResolutionCheck(True, "Odd values may cause encoding issues")
    return ResolutionCheck(True, None)
