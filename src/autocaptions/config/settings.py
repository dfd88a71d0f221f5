"""Configuration settings for AutoCaptions."""

from pathlib import Path
from typing import List

# Default conversion values
DEFAULT_ENCODING = "UTF-8"
DEFAULT_FPS = 30.0
DEFAULT_WIDTH = 1920
DEFAULT_HEIGHT = 1080
DEFAULT_LANGUAGE = "English"
DEFAULT_CHUNK_MINUTES = 10  # duration of each audio chunk sent to the speech engine
MAX_WORDS_PER_LINE = 16

# Validation ranges
MIN_RESOLUTION = 640
MAX_RESOLUTION = 8192
MAX_FPS = 120.0

# Output naming
FCPXML_SUFFIX = ".fcpxml"
MERGED_SUFFIX = "_merged.srt"

# FCPXML document constants
FCPXML_VERSION = "1.9"
DEFAULT_EVENT_NAME = "Whisper Auto Captions"
COLOR_SPACE = "1-1-1 (Rec. 709)"
TITLE_EFFECT_NAME = "Basic Title"
TITLE_EFFECT_UID = (
    ".../Titles.localized/Bumper:Opener.localized/Basic Title.localized/Basic Title.moti"
)
AUDIO_LAYOUT = "stereo"
AUDIO_RATE = "48k"

# Encodings tried, in order, when reading subtitle files
SUPPORTED_ENCODINGS = [
    "utf-8-sig", "utf-8", "cp1252", "iso-8859-1",
]

SUPPORTED_SUBTITLE_FORMATS = ["srt"]

# Languages that use spaces between words
SPACE_LANGUAGES: List[str] = [
    "en", "fr", "de", "es", "it", "pt", "ru", "ar", "he", "tr", "el", "vi",
    "nl", "da", "sv", "no", "nn", "fi", "pl", "cs", "sk", "hu", "ro", "uk",
]

STYLE_FILE_NAME = "title_style.json"


# Application directories
def get_app_data_dir() -> Path:
    """Get the application data directory."""
    return Path.home() / ".autocaptions"


def get_logs_dir() -> Path:
    """Get the logs directory."""
    return get_app_data_dir() / "logs"


def get_default_style_file() -> Path:
    """Get the path of the user's saved title style."""
    return get_app_data_dir() / STYLE_FILE_NAME


def ensure_directories() -> None:
    """Ensure application directories exist."""
    for dir_func in [get_app_data_dir, get_logs_dir]:
        directory = dir_func()
        directory.mkdir(parents=True, exist_ok=True)
