"""SRT to FCPXML timeline conversion.

The timeline is a single sequence holding one gap that spans the whole
subtitle file, with one Basic Title clip per caption laid into the gap. Its
length comes from the end time of the *last* block in the file, checked
before any other block is looked at; a malformed last block therefore fails
the conversion even when every other block is fine.

Clip durations are ``frame(end) - frame(start)`` and are not clamped. A
caption shorter than one frame gets a zero duration and out-of-order
timestamps give a negative one; both are passed through to the document.
"""

import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from ..config.languages import Language
from ..config.settings import (
    AUDIO_LAYOUT,
    AUDIO_RATE,
    COLOR_SPACE,
    DEFAULT_ENCODING,
    DEFAULT_EVENT_NAME,
    DEFAULT_FPS,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    FCPXML_SUFFIX,
    FCPXML_VERSION,
    MAX_WORDS_PER_LINE,
    TITLE_EFFECT_NAME,
    TITLE_EFFECT_UID,
)
from ..utils.common import derive_output_path, project_name_from_path, validate_file_exists
from ..utils.encoding import normalize_newlines, read_text_file
from .errors import (
    BlockFormatError,
    ConfigurationError,
    EmptySubtitleError,
    InvalidFormatError,
    NoSubtitlesError,
    SubtitleIOError,
)
from .presets import is_valid_frame_rate, validate_resolution
from .style import TitleStyle, default_title_style
from .subtitle import TIME_RANGE_SEPARATOR, block_lines, parse_block, split_blocks
from .timecode import (
    format_frames,
    format_rate_name,
    fps_hundredths,
    time_to_frame,
    timedelta_to_frame,
)

logger = logging.getLogger(__name__)

FORMAT_ID = "r1"
EFFECT_ID = "r2"

POSITION_PARAM_KEY = "9999/999166631/999166633/1/100/101"
FLATTEN_PARAM_KEY = "999/999166631/999166633/2/351"
ALIGNMENT_PARAM_KEY = "9999/999166631/999166633/2/354/999169573/401"

XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n<!DOCTYPE fcpxml>\n'

# Characters XML 1.0 does not allow; tab and newline are kept
_INVALID_XML_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def strip_invalid_xml_chars(text: str) -> str:
    """Remove characters that cannot appear in an XML 1.0 document."""
    return _INVALID_XML_CHARS.sub("", text)


def wrap_words(text: str, max_words: int = MAX_WORDS_PER_LINE) -> str:
    """Re-wrap text into lines of at most ``max_words`` words."""
    words = text.split()
    lines = [" ".join(words[i:i + max_words]) for i in range(0, len(words), max_words)]
    return "\n".join(lines)


@dataclass(frozen=True)
class TitleClip:
    """One caption placed on the timeline, in frames."""

    offset_frames: int
    duration_frames: int
    text: str
    style_id: str


@dataclass
class TimelineDocument:
    """A complete caption timeline, ready to serialize."""

    project_name: str
    event_name: str
    fps: float
    width: int
    height: int
    total_frames: int
    style: TitleStyle
    clips: List[TitleClip] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def rate_hundredths(self) -> int:
        return fps_hundredths(self.fps)

    @property
    def format_name(self) -> str:
        return format_rate_name(self.width, self.height, self.rate_hundredths)

    def to_element(self) -> ET.Element:
        """Build the ``<fcpxml>`` element tree."""
        rate = self.rate_hundredths

        root = ET.Element("fcpxml", {"version": FCPXML_VERSION})

        resources = ET.SubElement(root, "resources")
        ET.SubElement(resources, "format", {
            "id": FORMAT_ID,
            "name": self.format_name,
            "frameDuration": f"100/{rate}s",
            "width": str(self.width),
            "height": str(self.height),
            "colorSpace": COLOR_SPACE,
        })
        ET.SubElement(resources, "effect", {
            "id": EFFECT_ID,
            "name": TITLE_EFFECT_NAME,
            "uid": TITLE_EFFECT_UID,
        })

        library = ET.SubElement(root, "library")
        event = ET.SubElement(library, "event", {"name": self.event_name})
        project = ET.SubElement(event, "project", {"name": self.project_name})
        sequence = ET.SubElement(project, "sequence", {
            "format": FORMAT_ID,
            "tcStart": "0s",
            "tcFormat": "NDF",
            "audioLayout": AUDIO_LAYOUT,
            "audioRate": AUDIO_RATE,
            # raw frame count, unlike every other time value in the document
            "duration": f"{self.total_frames}/{rate}s",
        })
        spine = ET.SubElement(sequence, "spine")
        gap = ET.SubElement(spine, "gap", {
            "name": "Gap",
            "offset": "0s",
            "duration": format_frames(self.total_frames, self.fps),
        })

        for clip in self.clips:
            gap.append(self._title_element(clip))

        return root

    def _title_element(self, clip: TitleClip) -> ET.Element:
        style = self.style
        title = ET.Element("title", {
            "ref": EFFECT_ID,
            "lane": "1",
            "offset": format_frames(clip.offset_frames, self.fps),
            "duration": format_frames(clip.duration_frames, self.fps),
            "name": f"{clip.text} - {TITLE_EFFECT_NAME}",
        })
        ET.SubElement(title, "param", {
            "name": "Position",
            "key": POSITION_PARAM_KEY,
            "value": style.position_string(self.height),
        })
        ET.SubElement(title, "param", {
            "name": "Flatten",
            "key": FLATTEN_PARAM_KEY,
            "value": "1",
        })
        ET.SubElement(title, "param", {
            "name": "Alignment",
            "key": ALIGNMENT_PARAM_KEY,
            "value": style.alignment.param_value,
        })

        text = ET.SubElement(title, "text")
        text_style = ET.SubElement(text, "text-style", {"ref": clip.style_id})
        text_style.text = clip.text

        style_def = ET.SubElement(title, "text-style-def", {"id": clip.style_id})
        attributes = {
            "font": style.font_name,
            "fontSize": format(style.font_size, "g"),
            "fontFace": style.font_weight.value,
            "fontColor": style.text_color.to_fcpxml(),
        }
        if style.font_weight.is_bold:
            attributes["bold"] = "1"
        if style.stroke_enabled:
            attributes["strokeColor"] = style.stroke_color.to_fcpxml()
            attributes["strokeWidth"] = format(style.stroke_width, "g")
        attributes["shadowColor"] = style.shadow_color.to_fcpxml()
        attributes["shadowOffset"] = style.shadow_offset_string
        attributes["alignment"] = style.alignment.style_value
        ET.SubElement(style_def, "text-style", attributes)

        return title

    def to_bytes(self) -> bytes:
        """Serialize to pretty-printed UTF-8 FCPXML."""
        root = self.to_element()
        ET.indent(root, space="    ")
        body = ET.tostring(root, encoding="unicode")
        return (XML_HEADER + body + "\n").encode("utf-8")

    def write(self, path: Union[str, Path]) -> Path:
        """Write the document to a file.

        Raises:
            SubtitleIOError: If the file can't be written
        """
        path_obj = Path(path)
        data = self.to_bytes()
        try:
            path_obj.write_bytes(data)
        except OSError as e:
            raise SubtitleIOError(f"Error writing FCPXML file {path_obj}: {e}") from e
        logger.info("Wrote %d titles to %s", len(self.clips), path_obj)
        return path_obj


class TimelineBuilder:
    """Build FCPXML caption timelines from SRT content."""

    def __init__(
        self,
        fps: float = DEFAULT_FPS,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        style: Optional[TitleStyle] = None,
        language: Language = Language.ENGLISH,
        event_name: str = DEFAULT_EVENT_NAME,
    ):
        """Initialize the builder.

        Args:
            fps: Timeline frame rate, 0 < fps <= 120
            width: Timeline width, 640..8192
            height: Timeline height, 640..8192
            style: Title style for every caption (default: the language's)
            language: Caption language; space-delimited languages get long
                captions wrapped at 16 words per line
            event_name: Name of the event holding the project

        Raises:
            ConfigurationError: If the frame rate or resolution is out of range
        """
        if not is_valid_frame_rate(fps):
            raise ConfigurationError(f"Frame rate must be greater than 0 and at most 120, got {fps}")

        check = validate_resolution(width, height)
        if not check.valid:
            raise ConfigurationError(f"{check.message}, got {width}x{height}")
        if check.message:
            logger.warning("%s: %dx%d", check.message, width, height)

        self.fps = fps
        self.width = width
        self.height = height
        self.language = language
        self.style = style if style is not None else default_title_style(language)
        self.event_name = event_name

    def display_text(self, text: str) -> str:
        """Caption text as shown on screen."""
        text = strip_invalid_xml_chars(text)
        if self.language.is_space_delimited and len(text.split()) > MAX_WORDS_PER_LINE:
            return wrap_words(text)
        return text

    def _total_frames(self, blocks: List[str]) -> int:
        last_lines = block_lines(blocks[-1])
        if len(last_lines) < 2:
            raise InvalidFormatError("Invalid subtitle format: insufficient lines in last subtitle")

        time_range = last_lines[1].split(TIME_RANGE_SEPARATOR)
        if len(time_range) < 2:
            raise InvalidFormatError("Invalid subtitle format: missing time range in last subtitle")

        return time_to_frame(time_range[1], self.fps)

    def build(self, content: str, project_name: str) -> TimelineDocument:
        """Build a timeline document from SRT content.

        Args:
            content: Full SRT file content
            project_name: Name of the Final Cut Pro project

        Returns:
            The timeline document

        Raises:
            EmptySubtitleError: If the content is empty
            NoSubtitlesError: If there are no subtitle blocks, or none parse
            InvalidFormatError: If the last block is malformed
        """
        if not normalize_newlines(content).strip():
            raise EmptySubtitleError()

        project_name = strip_invalid_xml_chars(project_name)

        blocks = split_blocks(content)
        if not blocks:
            raise NoSubtitlesError()

        total_frames = self._total_frames(blocks)

        clips: List[TitleClip] = []
        warnings: List[str] = []

        for position, block in enumerate(blocks):
            try:
                caption = parse_block(block, position + 1)
            except BlockFormatError as e:
                message = f"Skipping malformed subtitle at index {position}: {e}"
                logger.warning(message)
                warnings.append(message)
                continue

            offset_frames = timedelta_to_frame(caption.start, self.fps)
            duration_frames = timedelta_to_frame(caption.end, self.fps) - offset_frames
            if duration_frames <= 0:
                logger.debug(
                    "Caption %d has non-positive duration of %d frames",
                    caption.index,
                    duration_frames,
                )

            clips.append(TitleClip(
                offset_frames=offset_frames,
                duration_frames=duration_frames,
                text=self.display_text(caption.content),
                style_id=f"ts{position}",
            ))

        if not clips:
            raise NoSubtitlesError()

        logger.info(
            "Built timeline '%s': %d titles, %d frames at %s fps",
            project_name,
            len(clips),
            total_frames,
            self.fps,
        )
        return TimelineDocument(
            project_name=project_name,
            event_name=self.event_name,
            fps=self.fps,
            width=self.width,
            height=self.height,
            total_frames=total_frames,
            style=self.style,
            clips=clips,
            warnings=warnings,
        )

    def convert_file(
        self,
        srt_path: Union[str, Path],
        project_name: Optional[str] = None,
        output_path: Optional[Union[str, Path]] = None,
        encoding: str = DEFAULT_ENCODING,
    ) -> Path:
        """Convert an SRT file to an FCPXML file.

        Args:
            srt_path: Input SRT file
            project_name: Project name (default: the input file name)
            output_path: Output path (default: input path + ".fcpxml")
            encoding: Input encoding (auto-detected by default)

        Returns:
            Path of the written FCPXML file

        Raises:
            SubtitleIOError: If the input can't be read or the output written
            EmptySubtitleError, NoSubtitlesError, InvalidFormatError: See ``build``
        """
        try:
            srt_path_obj = validate_file_exists(srt_path)
            content = read_text_file(srt_path_obj, encoding)
        except (OSError, ValueError) as e:
            raise SubtitleIOError(f"Failed to read subtitle file {srt_path}: {e}") from e

        if project_name is None:
            project_name = project_name_from_path(srt_path_obj)

        document = self.build(content, project_name)

        target = output_path if output_path is not None else derive_output_path(srt_path, FCPXML_SUFFIX)
        return document.write(target)


def srt_to_fcpxml(
    srt_path: Union[str, Path],
    fps: float = DEFAULT_FPS,
    project_name: Optional[str] = None,
    language: Language = Language.ENGLISH,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    style: Optional[TitleStyle] = None,
    output_path: Optional[Union[str, Path]] = None,
) -> Path:
    """Convert an SRT file to FCPXML. See ``TimelineBuilder.convert_file``."""
    builder = TimelineBuilder(fps=fps, width=width, height=height, style=style, language=language)
    return builder.convert_file(srt_path, project_name, output_path)
