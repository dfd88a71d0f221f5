"""Tests for the CLI module."""

import argparse
import json
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from autocaptions.cli import (
    create_parser,
    handle_convert_command,
    handle_merge_command,
    handle_presets_command,
    handle_style_command,
    main,
    resolve_resolution,
    resolve_style,
)
from autocaptions.config.languages import Language
from autocaptions.core.errors import ConfigurationError
from autocaptions.core.style import Color, FontWeight, PositionPreset, TitleStyle, save_title_style


def _convert_args(*extra: str) -> argparse.Namespace:
    return create_parser().parse_args(["convert", "input.srt", *extra])


class TestParserCreation:
    """Test parser creation functions."""

    def test_create_parser(self) -> None:
        """Test main parser creation."""
        parser = create_parser()
        assert isinstance(parser, argparse.ArgumentParser)
        assert parser.description is not None and "AutoCaptions" in parser.description

        with pytest.raises(SystemExit):
            parser.parse_args(["--version"])

    def test_parser_help(self) -> None:
        """Test parser help lists every command."""
        help_text = create_parser().format_help()
        for command in ("convert", "merge", "presets", "style"):
            assert command in help_text

    def test_convert_subparser_defaults(self) -> None:
        """Test convert subparser defaults."""
        args = _convert_args()

        assert args.command == "convert"
        assert args.input == "input.srt"
        assert args.fps == 30.0
        assert args.resolution == "1080p"
        assert args.language == "English"
        assert args.output is None
        assert args.style is None

    def test_convert_subparser_options(self) -> None:
        """Test convert subparser options."""
        args = _convert_args("--fps", "29.97", "-r", "vertical", "-l", "zh", "-o", "out.fcpxml", "-p", "Demo")

        assert args.fps == 29.97
        assert args.resolution == "vertical"
        assert args.language == "zh"
        assert args.output == "out.fcpxml"
        assert args.project_name == "Demo"

    def test_convert_rejects_unknown_resolution(self) -> None:
        """Test that unknown resolution presets are rejected."""
        with pytest.raises(SystemExit):
            _convert_args("--resolution", "8k")

    def test_merge_subparser(self) -> None:
        """Test merge subparser."""
        args = create_parser().parse_args(["merge", "a.srt", "b.srt", "--chunk-minutes", "5"])

        assert args.command == "merge"
        assert args.inputs == ["a.srt", "b.srt"]
        assert args.chunk_minutes == 5

    def test_merge_requires_inputs(self) -> None:
        """Test that merge needs at least one input."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(["merge"])

    def test_style_subparser(self) -> None:
        """Test style subparser."""
        args = create_parser().parse_args(["style", "--language", "Chinese Simplified", "--save"])

        assert args.command == "style"
        assert args.language == "Chinese Simplified"
        assert args.save is True


class TestResolveOptions:
    """Test option resolution helpers."""

    def test_resolution_from_preset(self) -> None:
        """Test width and height from a preset."""
        assert resolve_resolution(_convert_args("-r", "4k")) == (3840, 2160)

    def test_resolution_custom(self) -> None:
        """Test explicit width and height."""
        assert resolve_resolution(_convert_args("--width", "1000", "--height", "800")) == (1000, 800)

    def test_resolution_half_custom(self) -> None:
        """Test that width without height is rejected."""
        with pytest.raises(ConfigurationError):
            resolve_resolution(_convert_args("--width", "1000"))

    def test_style_language_default(self, isolated_app_dir: Path) -> None:  # pylint: disable=unused-argument
        """Test that the language default is used without a style file."""
        style = resolve_style(_convert_args(), Language.CHINESE_SIMPLIFIED)
        assert style.font_name == "PingFang SC"

    def test_style_file(self, temp_dir: Path, isolated_app_dir: Path) -> None:  # pylint: disable=unused-argument
        """Test loading a style file."""
        path = save_title_style(TitleStyle(font_name="Avenir"), temp_dir / "style.json")
        style = resolve_style(_convert_args("--style", str(path)), Language.ENGLISH)
        assert style.font_name == "Avenir"

    def test_saved_style(self, isolated_app_dir: Path) -> None:
        """Test that a saved style is used when no style file is given."""
        save_title_style(TitleStyle(font_size=72), isolated_app_dir / "title_style.json")
        style = resolve_style(_convert_args(), Language.ENGLISH)
        assert style.font_size == 72

    def test_style_overrides(self, isolated_app_dir: Path) -> None:  # pylint: disable=unused-argument
        """Test command-line style overrides."""
        args = _convert_args(
            "--font", "Futura",
            "--font-size", "38",
            "--font-weight", "bold",
            "--text-color", "#FFFF00",
            "--stroke-color", "#000000",
            "--stroke-width", "3",
            "--position", "top-center",
        )
        style = resolve_style(args, Language.ENGLISH)

        assert style.font_name == "Futura"
        assert style.font_size == 38
        assert style.font_weight is FontWeight.BOLD
        assert style.text_color == Color(1.0, 1.0, 0.0)
        assert style.stroke_enabled is True
        assert style.stroke_width == 3
        assert style.position_preset is PositionPreset.TOP_CENTER

    def test_custom_position_override(self, isolated_app_dir: Path) -> None:  # pylint: disable=unused-argument
        """Test that explicit coordinates switch to a custom position."""
        style = resolve_style(_convert_args("--position-y", "-300"), Language.ENGLISH)
        assert style.position_preset is PositionPreset.CUSTOM
        assert style.position_y == -300


class TestConvertCommand:
    """Test convert command handler."""

    def test_convert_success(
        self, sample_srt_file: Path, isolated_app_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:  # pylint: disable=unused-argument
        """Test a successful conversion."""
        args = create_parser().parse_args(["convert", str(sample_srt_file), "--fps", "25"])

        assert handle_convert_command(args) == 0
        assert Path(f"{sample_srt_file}.fcpxml").exists()
        assert "Conversion completed" in capsys.readouterr().out

    def test_convert_empty_file(self, temp_dir: Path, isolated_app_dir: Path) -> None:  # pylint: disable=unused-argument
        """Test that an empty input fails."""
        srt_file = temp_dir / "empty.srt"
        srt_file.write_text("", encoding="utf-8")
        args = create_parser().parse_args(["convert", str(srt_file)])

        assert handle_convert_command(args) == 1
        assert not Path(f"{srt_file}.fcpxml").exists()

    def test_convert_missing_file(self, temp_dir: Path, isolated_app_dir: Path) -> None:  # pylint: disable=unused-argument
        """Test that a missing input fails."""
        args = create_parser().parse_args(["convert", str(temp_dir / "missing.srt")])
        assert handle_convert_command(args) == 1

    def test_convert_invalid_fps(self, sample_srt_file: Path, isolated_app_dir: Path) -> None:  # pylint: disable=unused-argument
        """Test that an out-of-range frame rate fails."""
        args = create_parser().parse_args(["convert", str(sample_srt_file), "--fps", "0"])
        assert handle_convert_command(args) == 1

    def test_convert_invalid_resolution(self, sample_srt_file: Path, isolated_app_dir: Path) -> None:  # pylint: disable=unused-argument
        """Test that an out-of-range resolution fails."""
        args = create_parser().parse_args(["convert", str(sample_srt_file), "--width", "320", "--height", "240"])
        assert handle_convert_command(args) == 1

    def test_convert_odd_resolution(
        self, sample_srt_file: Path, isolated_app_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:  # pylint: disable=unused-argument
        """Test that an odd resolution converts without printing a warning to stdout."""
        args = create_parser().parse_args(["convert", str(sample_srt_file), "--width", "1921", "--height", "1081"])

        assert handle_convert_command(args) == 0
        out = capsys.readouterr().out
        assert "Warning:" not in out
        assert "Conversion completed" in out

    def test_convert_unknown_language(self, sample_srt_file: Path, isolated_app_dir: Path) -> None:  # pylint: disable=unused-argument
        """Test that an unknown language fails."""
        args = create_parser().parse_args(["convert", str(sample_srt_file), "--language", "Klingon"])
        assert handle_convert_command(args) == 1

    @patch("autocaptions.cli.TimelineBuilder")
    def test_convert_interrupted(
        self, mock_builder_class: Mock, sample_srt_file: Path, isolated_app_dir: Path
    ) -> None:  # pylint: disable=unused-argument
        """Test that an interrupted conversion returns 130."""
        mock_builder_class.return_value.convert_file.side_effect = KeyboardInterrupt
        args = create_parser().parse_args(["convert", str(sample_srt_file)])
        assert handle_convert_command(args) == 130


class TestMergeCommand:
    """Test merge command handler."""

    def test_merge_success(self, temp_dir: Path, sample_srt_content: str) -> None:
        """Test a successful merge."""
        part0 = temp_dir / "part0.srt"
        part1 = temp_dir / "part1.srt"
        part0.write_text(sample_srt_content, encoding="utf-8")
        part1.write_text(sample_srt_content, encoding="utf-8")
        output = temp_dir / "merged.srt"

        args = create_parser().parse_args(["merge", str(part0), str(part1), "-o", str(output)])

        assert handle_merge_command(args) == 0
        content = output.read_text(encoding="utf-8")
        assert "6\n00:10:07,000 --> 00:10:10,000" in content

    def test_merge_failure(self, temp_dir: Path) -> None:
        """Test that merging only unusable fragments fails."""
        args = create_parser().parse_args(["merge", str(temp_dir / "missing.srt")])
        assert handle_merge_command(args) == 1

    def test_merge_invalid_chunk_minutes(self, sample_srt_file: Path) -> None:
        """Test that a non-positive chunk length fails."""
        args = create_parser().parse_args(["merge", str(sample_srt_file), "--chunk-minutes", "0"])
        assert handle_merge_command(args) == 1


class TestInfoCommands:
    """Test presets and style command handlers."""

    def test_presets(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test listing presets."""
        assert handle_presets_command(argparse.Namespace()) == 0
        out = capsys.readouterr().out
        assert "1080p" in out
        assert "29.97" in out
        assert "English" in out

    def test_style_print(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test printing a default style."""
        args = create_parser().parse_args(["style", "-l", "zh"])
        assert handle_style_command(args) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["font_name"] == "PingFang SC"

    def test_style_output(self, temp_dir: Path) -> None:
        """Test writing a default style to a file."""
        target = temp_dir / "style.json"
        args = create_parser().parse_args(["style", "-o", str(target)])
        assert handle_style_command(args) == 0
        assert json.loads(target.read_text(encoding="utf-8"))["font_name"] == "Helvetica"

    def test_style_save(self, isolated_app_dir: Path) -> None:
        """Test saving a default style for later conversions."""
        args = create_parser().parse_args(["style", "--save"])
        assert handle_style_command(args) == 0
        assert (isolated_app_dir / "title_style.json").exists()

    def test_style_unknown_language(self) -> None:
        """Test that an unknown language fails."""
        args = create_parser().parse_args(["style", "-l", "Klingon"])
        assert handle_style_command(args) == 1


class TestMainFunction:
    """Test main function."""

    @patch("autocaptions.cli.create_parser")
    @patch("autocaptions.cli.setup_logging")
    def test_main_no_command(
        self, mock_setup_logging: Mock, mock_create_parser: Mock
    ) -> None:  # pylint: disable=unused-argument
        """Test main function with no command."""
        mock_parser = Mock()
        mock_parser.parse_args.return_value = argparse.Namespace(
            command=None, verbose=False, log_file=None
        )
        mock_create_parser.return_value = mock_parser

        assert main([]) == 0
        mock_parser.print_help.assert_called_once()

    @patch("autocaptions.cli.handle_convert_command")
    @patch("autocaptions.cli.setup_logging")
    def test_main_convert_command(
        self, mock_setup_logging: Mock, mock_handle_convert: Mock
    ) -> None:
        """Test main dispatches convert and honors --verbose."""
        mock_handle_convert.return_value = 0

        assert main(["--verbose", "convert", "input.srt"]) == 0
        mock_handle_convert.assert_called_once()
        assert mock_setup_logging.call_args[0][0] == 10  # logging.DEBUG

    @patch("autocaptions.cli.handle_merge_command")
    @patch("autocaptions.cli.setup_logging")
    def test_main_merge_command(
        self, mock_setup_logging: Mock, mock_handle_merge: Mock
    ) -> None:  # pylint: disable=unused-argument
        """Test main dispatches merge."""
        mock_handle_merge.return_value = 1

        assert main(["merge", "a.srt"]) == 1
        mock_handle_merge.assert_called_once()

    @patch("autocaptions.cli.handle_presets_command")
    @patch("autocaptions.cli.setup_logging")
    def test_main_keyboard_interrupt(
        self, mock_setup_logging: Mock, mock_handle_presets: Mock
    ) -> None:  # pylint: disable=unused-argument
        """Test main function with keyboard interrupt."""
        mock_handle_presets.side_effect = KeyboardInterrupt()
        assert main(["presets"]) == 130

    @patch("autocaptions.cli.handle_presets_command")
    @patch("autocaptions.cli.setup_logging")
    def test_main_unexpected_error(
        self, mock_setup_logging: Mock, mock_handle_presets: Mock
    ) -> None:  # pylint: disable=unused-argument
        """Test main function with an unexpected exception."""
        mock_handle_presets.side_effect = RuntimeError("boom")
        assert main(["presets"]) == 1
