"""Merging of chunked transcription output.

Long recordings are split into fixed-length chunks before transcription, so
every chunk's SRT starts again at 00:00:00. Merging shifts the captions of
chunk ``i`` by ``i * chunk_minutes`` minutes, concatenates them in chunk order
and numbers the result 1..N.
"""

import logging
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path
from typing import List, Optional, Sequence, Union

import srt

from ..config.settings import DEFAULT_CHUNK_MINUTES, DEFAULT_ENCODING, MERGED_SUFFIX
from ..utils.common import derive_output_path
from ..utils.encoding import read_text_file
from .errors import ConfigurationError, MergeError, SubtitleError, SubtitleIOError
from .subtitle import CaptionList, SubtitleProcessor

logger = logging.getLogger(__name__)


def shift_timestamp(delta: timedelta, chunk_index: int, chunk_minutes: int) -> timedelta:
    """Move a time forward by whole chunks.

    Only the hour/minute part changes; seconds and milliseconds are kept and
    minutes past 59 carry into the hours.

    Args:
        delta: Time within the chunk
        chunk_index: 0-based chunk position
        chunk_minutes: Length of each chunk in minutes

    Returns:
        Time within the merged document
    """
    return delta + timedelta(minutes=chunk_index * chunk_minutes)


@dataclass
class MergeResult:
    """Merged SRT text and bookkeeping about the fragments."""

    content: str
    captions: CaptionList
    merged_fragments: int
    skipped_fragments: int
    warnings: List[str] = field(default_factory=list)


class SubtitleMerger:
    """Combine chunked SRT fragments into one subtitle document."""

    def __init__(self, chunk_minutes: int = DEFAULT_CHUNK_MINUTES) -> None:
        """Initialize the merger.

        Args:
            chunk_minutes: Length of each transcribed chunk in minutes

        Raises:
            ConfigurationError: If chunk_minutes is not positive
        """
        if chunk_minutes <= 0:
            raise ConfigurationError(
                f"Chunk duration must be positive, got {chunk_minutes} minutes"
            )
        self.chunk_minutes = chunk_minutes
        self.processor = SubtitleProcessor()

    def shift_fragment(self, captions: CaptionList, chunk_index: int) -> CaptionList:
        """Return shifted copies of one fragment's captions."""
        return [
            srt.Subtitle(
                index=caption.index,
                start=shift_timestamp(caption.start, chunk_index, self.chunk_minutes),
                end=shift_timestamp(caption.end, chunk_index, self.chunk_minutes),
                content=caption.content,
            )
            for caption in captions
        ]

    def merge_contents(self, contents: Sequence[Optional[str]]) -> MergeResult:
        """Merge fragment texts given in chunk order.

        A fragment that is None (unreadable) or fails to parse is skipped with
        a warning, but still occupies its chunk slot for the time offset.

        Args:
            contents: SRT text of each chunk, in chunk order

        Returns:
            The merged document

        Raises:
            MergeError: If no fragment could be merged
        """
        merged: CaptionList = []
        warnings: List[str] = []
        merged_fragments = 0

        for chunk_index, content in enumerate(contents):
            if content is None:
                message = f"Skipping fragment {chunk_index}: could not be read"
                logger.warning(message)
                warnings.append(message)
                continue

            try:
                parsed = self.processor.parse_content(content)
            except SubtitleError as e:
                message = f"Skipping fragment {chunk_index}: {e}"
                logger.warning(message)
                warnings.append(message)
                continue

            warnings.extend(f"Fragment {chunk_index}: {w}" for w in parsed.warnings)
            merged.extend(self.shift_fragment(parsed.captions, chunk_index))
            merged_fragments += 1

        if merged_fragments == 0:
            raise MergeError(f"None of the {len(contents)} subtitle fragments could be merged")

        captions = self.processor.renumber(merged)
        logger.info(
            "Merged %d captions from %d of %d fragments",
            len(captions),
            merged_fragments,
            len(contents),
        )
        return MergeResult(
            content=self.processor.compose(captions),
            captions=captions,
            merged_fragments=merged_fragments,
            skipped_fragments=len(contents) - merged_fragments,
            warnings=warnings,
        )

    def merge_files(
        self,
        file_paths: Sequence[Union[str, Path]],
        output_path: Optional[Union[str, Path]] = None,
        encoding: str = DEFAULT_ENCODING,
    ) -> Path:
        """Merge SRT fragment files and write the result.

        Args:
            file_paths: Fragment files in chunk order
            output_path: Merged file path (default: first path + "_merged.srt")
            encoding: Input encoding (auto-detected by default)

        Returns:
            Path of the merged SRT file

        Raises:
            MergeError: If no fragments were given or none could be merged
            SubtitleIOError: If the merged file can't be written
        """
        if not file_paths:
            raise MergeError("No subtitle fragments given")

        contents: List[Optional[str]] = []
        for path in file_paths:
            try:
                contents.append(read_text_file(path, encoding))
            except (OSError, UnicodeError) as e:
                logger.warning("Could not read fragment %s: %s", path, e)
                contents.append(None)

        result = self.merge_contents(contents)

        target = (
            Path(output_path)
            if output_path is not None
            else derive_output_path(file_paths[0], MERGED_SUFFIX)
        )
        try:
            with open(target, "w", encoding="utf-8") as f:
                f.write(result.content)
        except OSError as e:
            raise SubtitleIOError(f"Error writing merged subtitles {target}: {e}") from e

        logger.info("Wrote merged subtitles to %s", target)
        return target


def merge_srt_files(
    file_paths: Sequence[Union[str, Path]],
    chunk_minutes: int = DEFAULT_CHUNK_MINUTES,
    output_path: Optional[Union[str, Path]] = None,
) -> Path:
    """Merge chunked SRT files into one. See ``SubtitleMerger.merge_files``."""
    return SubtitleMerger(chunk_minutes).merge_files(file_paths, output_path)
