"""Command-line interface for AutoCaptions.

This module provides a CLI that converts SRT files to Final Cut Pro timelines
and merges chunked transcription output.
"""

import argparse
import json
import logging
import sys
import traceback
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from . import __version__
from .config.languages import Language
from .config.settings import (
    DEFAULT_CHUNK_MINUTES,
    DEFAULT_ENCODING,
    DEFAULT_FPS,
    DEFAULT_LANGUAGE,
    ensure_directories,
    get_default_style_file,
)
from .core.errors import CaptionError, ConfigurationError
from .core.fcpxml import TimelineBuilder
from .core.merge import SubtitleMerger
from .core.presets import FrameRate, VideoResolution
from .core.style import (
    Color,
    FontWeight,
    PositionPreset,
    TextAlignment,
    TitleStyle,
    default_title_style,
    load_title_style,
    save_title_style,
)
from .utils.common import is_subtitle_file, setup_logging

if TYPE_CHECKING:
    from argparse import _SubParsersAction

logger = logging.getLogger(__name__)


def _choice_key(member: Any) -> str:
    return member.name.lower().replace("_", "-")


POSITION_CHOICES = {_choice_key(p): p for p in PositionPreset}
WEIGHT_CHOICES = {_choice_key(w): w for w in FontWeight}
ALIGNMENT_CHOICES = {_choice_key(a): a for a in TextAlignment}


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        description="AutoCaptions - SRT captions to Final Cut Pro timelines",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Convert subtitles to an FCPXML timeline at 29.97 fps
  autocaptions convert interview.srt --fps 29.97

  # Vertical video with a custom title style
  autocaptions convert clip.srt --resolution vertical --style style.json

  # Merge chunked transcription output (10 minute chunks)
  autocaptions merge part0.srt part1.srt part2.srt --chunk-minutes 10
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"AutoCaptions {__version__}",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "--log-file",
        help="Log file path (in addition to console output)",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
        metavar="COMMAND",
    )

    _add_convert_parser(subparsers)
    _add_merge_parser(subparsers)
    _add_presets_parser(subparsers)
    _add_style_parser(subparsers)

    return parser


def _add_convert_parser(subparsers: "_SubParsersAction[argparse.ArgumentParser]") -> None:
    """Add convert command parser."""
    convert_parser = subparsers.add_parser(
        "convert",
        help="Convert an SRT file to an FCPXML timeline",
        description="Convert an SRT subtitle file to a Final Cut Pro FCPXML caption timeline",
    )

    # Input/Output
    convert_parser.add_argument(
        "input",
        help="Input SRT file",
    )
    convert_parser.add_argument(
        "--output",
        "-o",
        help="Output FCPXML file (default: input path with .fcpxml appended)",
    )
    convert_parser.add_argument(
        "--project-name",
        "-p",
        help="Final Cut Pro project name (default: input file name)",
    )

    # Timeline options
    convert_parser.add_argument(
        "--fps",
        type=float,
        default=DEFAULT_FPS,
        help=f"Timeline frame rate (default: {DEFAULT_FPS:g})",
    )
    convert_parser.add_argument(
        "--resolution",
        "-r",
        choices=[r.key for r in VideoResolution],
        default=VideoResolution.FULL_HD_1080P.key,
        help="Resolution preset (default: 1080p)",
    )
    convert_parser.add_argument(
        "--width",
        type=int,
        help="Custom timeline width (use with --height)",
    )
    convert_parser.add_argument(
        "--height",
        type=int,
        help="Custom timeline height (use with --width)",
    )
    convert_parser.add_argument(
        "--language",
        "-l",
        default=DEFAULT_LANGUAGE,
        help=f"Caption language name or code (default: {DEFAULT_LANGUAGE})",
    )
    convert_parser.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help=f"Input file encoding (default: {DEFAULT_ENCODING}, auto-detect)",
    )

    # Style options
    convert_parser.add_argument(
        "--style",
        help="Title style JSON file (default: saved style, if any)",
    )
    convert_parser.add_argument(
        "--position",
        choices=list(POSITION_CHOICES),
        help="Title position preset",
    )
    convert_parser.add_argument(
        "--position-x",
        type=float,
        help="Custom title X offset (implies --position custom)",
    )
    convert_parser.add_argument(
        "--position-y",
        type=float,
        help="Custom title Y offset (implies --position custom)",
    )
    convert_parser.add_argument("--font", help="Font family")
    convert_parser.add_argument("--font-size", type=float, help="Font size")
    convert_parser.add_argument(
        "--font-weight",
        choices=list(WEIGHT_CHOICES),
        help="Font weight",
    )
    convert_parser.add_argument("--text-color", help="Text color as #RRGGBB[AA]")
    convert_parser.add_argument(
        "--stroke-color",
        help="Stroke color as #RRGGBB[AA] (enables stroke)",
    )
    convert_parser.add_argument("--stroke-width", type=float, help="Stroke width")
    convert_parser.add_argument(
        "--alignment",
        choices=list(ALIGNMENT_CHOICES),
        help="Text alignment",
    )


def _add_merge_parser(subparsers: "_SubParsersAction[argparse.ArgumentParser]") -> None:
    """Add merge command parser."""
    merge_parser = subparsers.add_parser(
        "merge",
        help="Merge chunked SRT files into one",
        description="Merge SRT files transcribed from consecutive fixed-length audio chunks",
    )

    merge_parser.add_argument(
        "inputs",
        nargs="+",
        help="SRT fragments in chunk order",
    )
    merge_parser.add_argument(
        "--output",
        "-o",
        help="Merged SRT file (default: first input with _merged.srt appended)",
    )
    merge_parser.add_argument(
        "--chunk-minutes",
        type=int,
        default=DEFAULT_CHUNK_MINUTES,
        help=f"Length of each chunk in minutes (default: {DEFAULT_CHUNK_MINUTES})",
    )
    merge_parser.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help=f"Input file encoding (default: {DEFAULT_ENCODING}, auto-detect)",
    )


def _add_presets_parser(subparsers: "_SubParsersAction[argparse.ArgumentParser]") -> None:
    """Add presets command parser."""
    subparsers.add_parser(
        "presets",
        help="List resolution, frame rate and language presets",
        description="List the resolution, frame rate and language presets",
    )


def _add_style_parser(subparsers: "_SubParsersAction[argparse.ArgumentParser]") -> None:
    """Add style command parser."""
    style_parser = subparsers.add_parser(
        "style",
        help="Print or save a default title style",
        description="Print a language's default title style as JSON, or save it for later conversions",
    )

    style_parser.add_argument(
        "--language",
        "-l",
        default=DEFAULT_LANGUAGE,
        help=f"Language whose default style to use (default: {DEFAULT_LANGUAGE})",
    )
    style_parser.add_argument(
        "--output",
        "-o",
        help="Write the style to this JSON file instead of printing it",
    )
    style_parser.add_argument(
        "--save",
        action="store_true",
        help="Save as the style used by convert when --style is not given",
    )


def resolve_resolution(args: argparse.Namespace) -> Tuple[int, int]:
    """Width and height from --width/--height or the resolution preset.

    Raises:
        ConfigurationError: If only one of --width/--height is given
    """
    if args.width is None and args.height is None:
        preset = VideoResolution.from_key(args.resolution)
        return preset.width, preset.height
    if args.width is None or args.height is None:
        raise ConfigurationError("--width and --height must be given together")
    return args.width, args.height


def resolve_style(args: argparse.Namespace, language: Language) -> TitleStyle:
    """Title style from the style file (or saved/default style) plus overrides.

    Raises:
        ConfigurationError: If the style file or an override is invalid
    """
    saved_style = get_default_style_file()
    if args.style:
        style = load_title_style(args.style)
    elif saved_style.is_file():
        logger.info("Using saved title style from %s", saved_style)
        style = load_title_style(saved_style)
    else:
        style = default_title_style(language)

    overrides: Dict[str, Any] = {}
    if args.position:
        overrides["position_preset"] = POSITION_CHOICES[args.position]
    if args.position_x is not None or args.position_y is not None:
        overrides["position_preset"] = PositionPreset.CUSTOM
        if args.position_x is not None:
            overrides["position_x"] = args.position_x
        if args.position_y is not None:
            overrides["position_y"] = args.position_y
    if args.font:
        overrides["font_name"] = args.font
    if args.font_size is not None:
        overrides["font_size"] = args.font_size
    if args.font_weight:
        overrides["font_weight"] = WEIGHT_CHOICES[args.font_weight]
    if args.text_color:
        overrides["text_color"] = Color.from_hex(args.text_color)
    if args.stroke_color:
        overrides["stroke_enabled"] = True
        overrides["stroke_color"] = Color.from_hex(args.stroke_color)
    if args.stroke_width is not None:
        overrides["stroke_width"] = args.stroke_width
    if args.alignment:
        overrides["alignment"] = ALIGNMENT_CHOICES[args.alignment]

    return replace(style, **overrides) if overrides else style


def handle_convert_command(args: argparse.Namespace) -> int:
    """Handle the convert command."""
    try:
        input_path = Path(args.input)
        if not is_subtitle_file(input_path):
            logger.warning("Input does not have an .srt extension: %s", input_path)

        language = Language.from_name(args.language)
        width, height = resolve_resolution(args)

        builder = TimelineBuilder(
            fps=args.fps,
            width=width,
            height=height,
            style=resolve_style(args, language),
            language=language,
        )
        output_path = builder.convert_file(
            input_path,
            project_name=args.project_name,
            output_path=args.output,
            encoding=args.encoding,
        )

        print(f"Conversion completed: {output_path}")
        return 0

    except CaptionError as e:
        logger.error("Conversion failed (%s): %s", e.reason.value, e)
        return 1
    except ValueError as e:
        logger.error("Invalid option: %s", e)
        return 1
    except KeyboardInterrupt:
        logger.info("Conversion interrupted by user")
        return 130


def handle_merge_command(args: argparse.Namespace) -> int:
    """Handle the merge command."""
    try:
        merger = SubtitleMerger(args.chunk_minutes)
        output_path = merger.merge_files(args.inputs, args.output, args.encoding)

        print(f"Merge completed: {output_path}")
        return 0

    except CaptionError as e:
        logger.error("Merge failed (%s): %s", e.reason.value, e)
        return 1
    except KeyboardInterrupt:
        logger.info("Merge interrupted by user")
        return 130


def handle_presets_command(args: argparse.Namespace) -> int:  # pylint: disable=unused-argument
    """Handle the presets command."""
    print("Resolutions:")
    for resolution in VideoResolution:
        print(f"  {resolution.key:<10} {resolution.display_name}")

    print("\nFrame rates:")
    for rate in FrameRate:
        print(f"  {rate.fps:<10g} {rate.display_name}")

    print("\nLanguages:")
    for language in Language:
        print(f"  {language.code:<10} {language.display_name}")

    return 0


def handle_style_command(args: argparse.Namespace) -> int:
    """Handle the style command."""
    try:
        style = default_title_style(Language.from_name(args.language))

        if args.save:
            ensure_directories()
            path = save_title_style(style, get_default_style_file())
            print(f"Saved title style: {path}")
        elif args.output:
            path = save_title_style(style, args.output)
            print(f"Wrote title style: {path}")
        else:
            print(json.dumps(style.to_dict(), indent=2))
        return 0

    except ValueError as e:
        logger.error("Invalid option: %s", e)
        return 1
    except OSError as e:
        logger.error("File system error: %s", e)
        return 1


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    if args is None:
        args = sys.argv[1:]

    parsed_args = None
    try:
        parser = create_parser()
        parsed_args = parser.parse_args(args)

        log_level = logging.DEBUG if parsed_args.verbose else logging.INFO
        setup_logging(log_level, parsed_args.log_file)

        if parsed_args.command == "convert":
            return handle_convert_command(parsed_args)
        if parsed_args.command == "merge":
            return handle_merge_command(parsed_args)
        if parsed_args.command == "presets":
            return handle_presets_command(parsed_args)
        if parsed_args.command == "style":
            return handle_style_command(parsed_args)

        parser.print_help()
        return 0

    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return 130
    except OSError as e:
        logger.error("System error: %s", e)
        return 1
    except Exception as e:  # pylint: disable=broad-except
        logger.error("Unexpected error: %s", e)
        if parsed_args and getattr(parsed_args, "verbose", False):
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
