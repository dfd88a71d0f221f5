"""Caption title style for the timeline document.

A ``TitleStyle`` is applied identically to every title in one conversion. It
is a frozen value: callers build or load one, and the builder only reads it.
Styles round-trip through JSON so a preferred look can be kept on disk.
"""

import json
import logging
from dataclasses import asdict, dataclass, field, fields
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Tuple, Union

from ..config.languages import Language
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

EDGE_MARGIN = 75  # pixels between a top/bottom title and the frame edge
SIDE_OFFSET = 300


@dataclass(frozen=True)
class Color:
    """RGBA color with components in [0, 1]."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(f"Color component {name} must be a number, got {value!r}")
            if not 0.0 <= value <= 1.0:
                raise ConfigurationError(f"Color component {name} out of range: {value}")

    def to_fcpxml(self) -> str:
        """FCPXML color string, e.g. ``"1 1 1 1"``."""
        return " ".join(
            format(component, "g")
            for component in (self.red, self.green, self.blue, self.alpha)
        )

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse ``#RRGGBB`` or ``#RRGGBBAA``."""
        digits = value.strip().lstrip("#")
        if len(digits) not in (6, 8):
            raise ConfigurationError(f"Invalid hex color: {value}")
        try:
            channels = [int(digits[i:i + 2], 16) / 255 for i in range(0, len(digits), 2)]
        except ValueError as e:
            raise ConfigurationError(f"Invalid hex color: {value}") from e
        return cls(*(round(channel, 4) for channel in channels))


WHITE = Color(1.0, 1.0, 1.0, 1.0)
BLACK = Color(0.0, 0.0, 0.0, 1.0)
BLACK_SHADOW = Color(0.0, 0.0, 0.0, 0.75)


class PositionPreset(Enum):
    """Named title positions, resolved against the frame height."""

    BOTTOM_CENTER = "Bottom Center"
    TOP_CENTER = "Top Center"
    CENTER = "Center"
    BOTTOM_LEFT = "Bottom Left"
    BOTTOM_RIGHT = "Bottom Right"
    CUSTOM = "Custom"

    def position(self, height: int) -> Tuple[int, int]:
        """Title offset from the frame center; negative y is down.

        Custom has no position of its own and falls back to bottom center.
        """
        half = height // 2
        bottom_y = -half + EDGE_MARGIN
        top_y = half - EDGE_MARGIN

        positions = {
            PositionPreset.BOTTOM_CENTER: (0, bottom_y),
            PositionPreset.TOP_CENTER: (0, top_y),
            PositionPreset.CENTER: (0, 0),
            PositionPreset.BOTTOM_LEFT: (-SIDE_OFFSET, bottom_y),
            PositionPreset.BOTTOM_RIGHT: (SIDE_OFFSET, bottom_y),
            PositionPreset.CUSTOM: (0, bottom_y),
        }
        return positions[self]


class FontWeight(Enum):
    """Font face names understood by the Basic Title effect."""

    REGULAR = "Regular"
    MEDIUM = "Medium"
    SEMIBOLD = "Semibold"
    BOLD = "Bold"

    @property
    def is_bold(self) -> bool:
        return self in (FontWeight.SEMIBOLD, FontWeight.BOLD)


class TextAlignment(Enum):
    """Horizontal text alignment."""

    LEFT = "Left"
    CENTER = "Center"
    RIGHT = "Right"

    @property
    def param_value(self) -> str:
        """Value of the title's Alignment param, e.g. ``"1 (Center)"``."""
        order = {TextAlignment.LEFT: 0, TextAlignment.CENTER: 1, TextAlignment.RIGHT: 2}
        return f"{order[self]} ({self.value})"

    @property
    def style_value(self) -> str:
        """Value of the text-style alignment attribute."""
        return self.value.lower()


_ENUM_FIELDS = {
    "position_preset": PositionPreset,
    "font_weight": FontWeight,
    "alignment": TextAlignment,
}
_COLOR_FIELDS = ("text_color", "stroke_color", "shadow_color")
_NUMBER_FIELDS = (
    "position_x", "position_y", "font_size", "stroke_width", "shadow_offset_x", "shadow_offset_y",
)


@dataclass(frozen=True)
class TitleStyle:
    """Visual presentation shared by all captions of a timeline."""

    position_preset: PositionPreset = PositionPreset.BOTTOM_CENTER
    position_x: float = 0
    position_y: float = -465

    font_name: str = "Helvetica"
    font_size: float = 45
    font_weight: FontWeight = FontWeight.REGULAR

    text_color: Color = field(default=WHITE)

    stroke_enabled: bool = False
    stroke_color: Color = field(default=BLACK)
    stroke_width: float = 2

    shadow_color: Color = field(default=BLACK_SHADOW)
    shadow_offset_x: float = 4
    shadow_offset_y: float = 315

    alignment: TextAlignment = TextAlignment.CENTER

    def __post_init__(self) -> None:
        for name in _NUMBER_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(f"Title style {name} must be a number, got {value!r}")
        if not isinstance(self.stroke_enabled, bool):
            raise ConfigurationError(f"Title style stroke_enabled must be true or false, got {self.stroke_enabled!r}")
        if not isinstance(self.font_name, str):
            raise ConfigurationError(f"Title style font_name must be a string, got {self.font_name!r}")
        if not self.font_name.strip():
            raise ConfigurationError("Font name cannot be empty")
        if self.font_size <= 0:
            raise ConfigurationError(f"Font size must be positive, got {self.font_size}")
        if self.stroke_width < 0:
            raise ConfigurationError(f"Stroke width cannot be negative, got {self.stroke_width}")

    def resolve_position(self, height: int) -> Tuple[float, float]:
        """Title position for a frame height; explicit X/Y for Custom."""
        if self.position_preset is PositionPreset.CUSTOM:
            return self.position_x, self.position_y
        return self.position_preset.position(height)

    def position_string(self, height: int) -> str:
        x, y = self.resolve_position(height)
        return f"{int(x)} {int(y)}"

    @property
    def shadow_offset_string(self) -> str:
        return f"{int(self.shadow_offset_x)} {int(self.shadow_offset_y)}"

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready representation."""
        data = asdict(self)
        for name in _ENUM_FIELDS:
            data[name] = getattr(self, name).value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TitleStyle":
        """Build a style from a (possibly partial) dictionary.

        Colors may be given as ``{"red": .., "green": .., "blue": .., "alpha": ..}``
        or as hex strings. Missing keys keep their defaults.

        Raises:
            ConfigurationError: On unknown keys or invalid values
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(f"Unknown title style keys: {', '.join(sorted(unknown))}")

        values: Dict[str, Any] = {}
        try:
            for name, value in data.items():
                if name in _ENUM_FIELDS:
                    values[name] = _ENUM_FIELDS[name](value)
                elif name in _COLOR_FIELDS:
                    values[name] = (
                        Color.from_hex(value) if isinstance(value, str) else Color(**value)
                    )
                else:
                    values[name] = value
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid title style value: {e}") from e

        return cls(**values)


DEFAULT_TITLE_STYLE = TitleStyle()


def cjk_title_style() -> TitleStyle:
    """Default style for Chinese captions."""
    return TitleStyle(font_name="PingFang SC", font_size=50, font_weight=FontWeight.SEMIBOLD)


def default_title_style(language: Language) -> TitleStyle:
    """Style used when the caller does not supply one."""
    if language.uses_cjk_title:
        return cjk_title_style()
    return DEFAULT_TITLE_STYLE


def load_title_style(path: Union[str, Path]) -> TitleStyle:
    """Load a title style from a JSON file.

    Raises:
        ConfigurationError: If the file can't be read or holds an invalid style
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigurationError(f"Could not load title style from {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Title style file {path} must contain a JSON object")

    style = TitleStyle.from_dict(data)
    logger.debug("Loaded title style from %s", path)
    return style


def save_title_style(style: TitleStyle, path: Union[str, Path]) -> Path:
    """Write a title style as JSON."""
    path_obj = Path(path)
    path_obj.parent.mkdir(parents=True, exist_ok=True)
    with open(path_obj, "w", encoding="utf-8") as f:
        json.dump(style.to_dict(), f, indent=2)
    logger.info("Saved title style to %s", path_obj)
    return path_obj
