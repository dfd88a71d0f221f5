"""Subtitle parsing module for AutoCaptions.

This module turns SRT text into ``srt.Subtitle`` captions. Parsing is
block-oriented and forgiving: a malformed block is skipped with a warning,
and only an empty document or one without a single usable block is an error.
"""

import logging
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path
from typing import Dict, List, Union

import srt

from ..config.settings import DEFAULT_ENCODING
from ..utils.common import ensure_directory, validate_file_exists
from ..utils.encoding import normalize_newlines, read_text_file
from .errors import (
    BlockFormatError,
    EmptySubtitleError,
    NoSubtitlesError,
    SubtitleIOError,
    TimecodeError,
)
from .timecode import parse_timestamp

logger = logging.getLogger(__name__)

TIME_RANGE_SEPARATOR = " --> "

# A caption is an srt.Subtitle: index, start, end, content
Caption = srt.Subtitle
CaptionList = List[srt.Subtitle]


@dataclass
class ParsedSubtitles:
    """Captions in file order plus a warning for every skipped block."""

    captions: CaptionList
    warnings: List[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.captions)


def split_blocks(content: str) -> List[str]:
    """Split SRT content into non-empty blocks separated by blank lines.

    Args:
        content: Full subtitle file content

    Returns:
        Trimmed-content blocks, empty ones dropped
    """
    trimmed = normalize_newlines(content).strip()
    if not trimmed:
        return []
    return [block for block in trimmed.split("\n\n") if block.strip()]


def block_lines(block: str) -> List[str]:
    """Lines of a trimmed block."""
    return block.strip().split("\n")


def parse_block(block: str, position: int) -> srt.Subtitle:
    """Parse one SRT block.

    Args:
        block: Block text (index line, time range line, text lines)
        position: 1-based position of the block, used when the index line
            is not a number

    Returns:
        Parsed caption

    Raises:
        BlockFormatError: If the block is structurally invalid
    """
    lines = block_lines(block)
    if len(lines) < 3:
        raise BlockFormatError(
            f"block {position} has {len(lines)} line(s), expected index, time range and text"
        )

    endpoints = lines[1].split(TIME_RANGE_SEPARATOR)
    if len(endpoints) != 2:
        raise BlockFormatError(f"block {position} has an invalid time range: {lines[1]!r}")

    try:
        start = parse_timestamp(endpoints[0])
        end = parse_timestamp(endpoints[1])
    except TimecodeError as e:
        raise BlockFormatError(f"block {position}: {e}") from e

    index_line = lines[0].strip()
    index = int(index_line) if index_line.isdecimal() else position

    return srt.Subtitle(
        index=index,
        start=start,
        end=end,
        content="\n".join(lines[2:]),
    )


def parse_subtitles(content: str) -> ParsedSubtitles:
    """Parse SRT content, skipping malformed blocks.

    Args:
        content: Full subtitle file content

    Returns:
        Parsed captions and warnings for skipped blocks

    Raises:
        EmptySubtitleError: If the content is empty or whitespace only
        NoSubtitlesError: If no block could be parsed
    """
    blocks = split_blocks(content)
    if not blocks:
        raise EmptySubtitleError()

    captions: CaptionList = []
    warnings: List[str] = []

    for position, block in enumerate(blocks, start=1):
        try:
            captions.append(parse_block(block, position))
        except BlockFormatError as e:
            message = f"Skipping malformed subtitle: {e}"
            logger.warning(message)
            warnings.append(message)

    if not captions:
        raise NoSubtitlesError()

    logger.debug("Parsed %d captions, skipped %d blocks", len(captions), len(warnings))
    return ParsedSubtitles(captions=captions, warnings=warnings)


class SubtitleProcessor:
    """Read, write and inspect SRT subtitle files."""

    def parse_content(self, content: str) -> ParsedSubtitles:
        """Parse SRT text. See ``parse_subtitles``."""
        return parse_subtitles(content)

    def parse_file(
        self,
        file_path: Union[str, Path],
        encoding: str = DEFAULT_ENCODING,
    ) -> ParsedSubtitles:
        """Parse an SRT file into captions.

        Args:
            file_path: Path to the SRT file
            encoding: File encoding (auto-detected by default)

        Returns:
            Parsed captions and warnings for skipped blocks

        Raises:
            SubtitleIOError: If the file can't be read or decoded
            EmptySubtitleError: If the file is empty
            NoSubtitlesError: If the file has no usable blocks
        """
        try:
            file_path_obj = validate_file_exists(file_path)
            content = read_text_file(file_path_obj, encoding)
        except (OSError, ValueError) as e:
            # UnicodeDecodeError is a ValueError
            raise SubtitleIOError(f"Failed to read subtitle file {file_path}: {e}") from e

        parsed = self.parse_content(content)
        logger.info("Parsed %d subtitles from %s", len(parsed), file_path_obj)
        return parsed

    def compose(self, captions: CaptionList) -> str:
        """Serialize captions to SRT text, keeping their order and indices."""
        return srt.compose(captions, reindex=False)

    def renumber(self, captions: CaptionList, start_index: int = 1) -> CaptionList:
        """Return copies of the captions numbered sequentially."""
        return [
            srt.Subtitle(
                index=number,
                start=caption.start,
                end=caption.end,
                content=caption.content,
                proprietary=caption.proprietary,
            )
            for number, caption in enumerate(captions, start=start_index)
        ]

    def save_file(
        self,
        captions: CaptionList,
        file_path: Union[str, Path],
        encoding: str = "utf-8",
    ) -> Path:
        """Save captions to an SRT file.

        Args:
            captions: Captions to write
            file_path: Output file path
            encoding: File encoding

        Returns:
            Path of the written file

        Raises:
            SubtitleIOError: If the file can't be written
        """
        file_path_obj = Path(file_path)

        try:
            ensure_directory(file_path_obj.parent)
            with open(file_path_obj, "w", encoding=encoding) as f:
                f.write(self.compose(captions))
        except (OSError, UnicodeError, LookupError) as e:
            raise SubtitleIOError(f"Error saving subtitle file {file_path_obj}: {e}") from e

        logger.info("Saved %d subtitles to %s", len(captions), file_path_obj)
        return file_path_obj

    def get_statistics(self, captions: CaptionList) -> Dict[str, Union[int, float]]:
        """Get statistics about a caption list.

        Args:
            captions: Captions to inspect

        Returns:
            Dictionary with statistics
        """
        if not captions:
            return {
                "count": 0,
                "total_duration": 0.0,
                "average_duration": 0.0,
                "total_characters": 0,
                "average_characters": 0.0,
            }

        durations = [(sub.end - sub.start).total_seconds() for sub in captions]
        char_counts = [len(sub.content) for sub in captions]

        total_duration = sum(durations)
        total_characters = sum(char_counts)

        return {
            "count": len(captions),
            "total_duration": round(total_duration, 2),
            "average_duration": round(total_duration / len(captions), 2),
            "total_characters": total_characters,
            "average_characters": round(total_characters / len(captions), 2),
            "longest_duration": round(max(durations), 2),
            "shortest_duration": round(min(durations), 2),
        }

    def validate_captions(self, captions: CaptionList) -> List[str]:
        """Validate a caption list and return the issues found.

        Timing problems are reported, not fixed: the timeline builder passes
        them through as zero or negative clip durations.

        Args:
            captions: Captions to check

        Returns:
            List of validation issues (empty if no issues)
        """
        issues = []

        if not captions:
            issues.append("No subtitles found")
            return issues

        prev_end = timedelta(0)

        for i, sub in enumerate(captions):
            if sub.index != i + 1:
                issues.append(f"Subtitle {i + 1}: Index mismatch (expected {i + 1}, got {sub.index})")

            if sub.start >= sub.end:
                issues.append(f"Subtitle {i + 1}: Invalid timing (start >= end)")

            if sub.start < prev_end:
                issues.append(f"Subtitle {i + 1}: Overlaps with previous subtitle")

            prev_end = sub.end

            if not sub.content.strip():
                issues.append(f"Subtitle {i + 1}: Empty content")

        logger.info("Validated %d subtitles, found %d issues", len(captions), len(issues))
        return issues
