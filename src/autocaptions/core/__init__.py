"""Core functionality modules for AutoCaptions.

This package contains the conversion pipeline:
- timecode: SRT timestamp to frame conversion
- subtitle: SRT parsing and writing
- merge: Merging of chunked transcription output
- fcpxml: FCPXML timeline building
- style: Caption title style
- presets: Resolution and frame rate presets
"""

from typing import List

from .errors import (
    CaptionError,
    ConfigurationError,
    EmptySubtitleError,
    FailureReason,
    InvalidFormatError,
    MergeError,
    NoSubtitlesError,
    SubtitleError,
    SubtitleIOError,
)
from .fcpxml import TimelineBuilder, TimelineDocument, srt_to_fcpxml
from .merge import SubtitleMerger, merge_srt_files
from .style import TitleStyle
from .subtitle import SubtitleProcessor, parse_subtitles
from .timecode import format_rate_name, time_to_frame

__all__: List[str] = [
    "CaptionError",
    "ConfigurationError",
    "EmptySubtitleError",
    "FailureReason",
    "InvalidFormatError",
    "MergeError",
    "NoSubtitlesError",
    "SubtitleError",
    "SubtitleIOError",
    "SubtitleMerger",
    "SubtitleProcessor",
    "TimelineBuilder",
    "TimelineDocument",
    "TitleStyle",
    "format_rate_name",
    "merge_srt_files",
    "parse_subtitles",
    "srt_to_fcpxml",
    "time_to_frame",
]
