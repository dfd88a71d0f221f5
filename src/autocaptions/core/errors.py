"""Exception types shared by the conversion pipeline.

Fatal failures each have their own class and carry a ``FailureReason`` tag so
callers can show a targeted message. ``BlockFormatError`` and
``TimecodeError`` describe a single bad subtitle block; the pipeline absorbs
them into warnings and never lets them escape a conversion.
"""

from enum import Enum


class FailureReason(Enum):
    """Tag identifying why a conversion or merge failed."""

    EMPTY_FILE = "empty_file"
    NO_SUBTITLES = "no_subtitles"
    INVALID_FORMAT = "invalid_format"
    IO_ERROR = "io_error"
    INVALID_CONFIGURATION = "invalid_configuration"
    MERGE_FAILED = "merge_failed"


class CaptionError(Exception):
    """Base class for all AutoCaptions errors."""

    reason = FailureReason.INVALID_FORMAT


class SubtitleError(CaptionError):
    """Exception raised for subtitle parsing errors."""


class EmptySubtitleError(SubtitleError):
    """The subtitle content is empty or whitespace only."""

    reason = FailureReason.EMPTY_FILE

    def __init__(self, message: str = "SRT file is empty") -> None:
        super().__init__(message)


class NoSubtitlesError(SubtitleError):
    """No usable subtitle blocks were found."""

    reason = FailureReason.NO_SUBTITLES

    def __init__(self, message: str = "No subtitles found") -> None:
        super().__init__(message)


class InvalidFormatError(SubtitleError):
    """The subtitle structure cannot be used to build a timeline."""

    reason = FailureReason.INVALID_FORMAT

    def __init__(self, message: str = "Invalid subtitle format") -> None:
        super().__init__(message)


class BlockFormatError(SubtitleError):
    """A single subtitle block is malformed."""


class TimecodeError(ValueError):
    """A timestamp is not in HH:MM:SS,mmm form."""


class SubtitleIOError(CaptionError):
    """A subtitle or timeline file could not be read or written."""

    reason = FailureReason.IO_ERROR


class ConfigurationError(CaptionError, ValueError):
    """Frame rate, resolution, style or chunk settings are out of range."""

    reason = FailureReason.INVALID_CONFIGURATION


class MergeError(CaptionError):
    """None of the subtitle fragments could be merged."""

    reason = FailureReason.MERGE_FAILED
