"""Tests for the package __init__.py modules."""

from unittest.mock import patch


class TestMainInit:
    """Test the main __init__.py module."""

    def test_version_info(self) -> None:
        """Test that version information is available."""
        import autocaptions

        assert autocaptions.__version__ == "1.0.0"

    def test_public_api(self) -> None:
        """Test the top-level exports."""
        import autocaptions

        for name in ("SubtitleMerger", "SubtitleProcessor", "TimelineBuilder", "TitleStyle", "srt_to_fcpxml"):
            assert hasattr(autocaptions, name)
            assert name in autocaptions.__all__


class TestCoreInit:
    """Test the core __init__.py module."""

    def test_core_init_all_attribute(self) -> None:
        """Test that __all__ names are importable."""
        from autocaptions import core

        for name in core.__all__:
            assert getattr(core, name) is not None

    def test_error_hierarchy(self) -> None:
        """Test that every fatal error derives from CaptionError."""
        from autocaptions.core import (
            CaptionError,
            ConfigurationError,
            EmptySubtitleError,
            InvalidFormatError,
            MergeError,
            NoSubtitlesError,
            SubtitleIOError,
        )

        for error_class in (
            ConfigurationError,
            EmptySubtitleError,
            InvalidFormatError,
            MergeError,
            NoSubtitlesError,
            SubtitleIOError,
        ):
            assert issubclass(error_class, CaptionError)


class TestUtilsInit:
    """Test the utils __init__.py module."""

    def test_utils_init_all_attribute(self) -> None:
        """Test that __all__ names are importable."""
        from autocaptions import utils

        for name in utils.__all__:
            assert callable(getattr(utils, name))


class TestConfigInit:
    """Test the config __init__.py module."""

    def test_config_init_imports(self) -> None:
        """Test config module imports."""
        from autocaptions.config import DEFAULT_ENCODING, Language, get_default_style_file

        assert DEFAULT_ENCODING == "UTF-8"
        assert Language.ENGLISH.code == "en"
        assert get_default_style_file().name == "title_style.json"


class TestMainModule:
    """Test the __main__ entry point."""

    @patch("autocaptions.__main__.main")
    def test_main_entry(self, mock_main) -> None:  # type: ignore[no-untyped-def]
        """Test that main_entry forwards arguments to the CLI."""
        from autocaptions.__main__ import main_entry

        mock_main.return_value = 0
        assert main_entry(["presets"]) == 0
        mock_main.assert_called_once_with(["presets"])
