"""AutoCaptions: SRT captions to Final Cut Pro timelines.

This package turns speech-engine subtitle output into FCPXML caption
timelines:
- Frame-accurate timecode conversion for any frame rate
- Forgiving SRT parsing that skips malformed blocks
- Merging of chunked transcription output into one SRT file
- FCPXML timeline building with a configurable title style

Main components:
- core.timecode: SRT timestamp to frame conversion
- core.subtitle: SRT parsing and writing
- core.merge: Chunked SRT merging
- core.fcpxml: FCPXML timeline building
- core.style: Caption title style
"""

from typing import List

__version__ = "1.0.0"

from .core.fcpxml import TimelineBuilder, srt_to_fcpxml
from .core.merge import SubtitleMerger
from .core.style import TitleStyle
from .core.subtitle import SubtitleProcessor

__all__: List[str] = [
    "__version__",
    "SubtitleMerger",
    "SubtitleProcessor",
    "TimelineBuilder",
    "TitleStyle",
    "srt_to_fcpxml",
]
