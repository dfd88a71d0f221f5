"""Test configuration and fixtures for AutoCaptions tests."""

import tempfile
from datetime import timedelta
from pathlib import Path
from typing import Generator
from unittest.mock import patch

import pytest
import srt


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def sample_srt_content() -> str:
    """Sample SRT content for testing."""
    return """1
00:00:01,000 --> 00:00:03,000
Hello world

2
00:00:04,000 --> 00:00:06,000
This is a test subtitle

3
00:00:07,000 --> 00:00:10,000
With multiple lines
and formatting
"""


@pytest.fixture
def sample_srt_file(temp_dir: Path, sample_srt_content: str) -> Path:  # pylint: disable=redefined-outer-name
    """Create a sample SRT file for testing."""
    srt_file = temp_dir / "test.srt"
    srt_file.write_text(sample_srt_content, encoding="utf-8")
    return srt_file


@pytest.fixture
def sample_subtitles() -> list[srt.Subtitle]:
    """Create sample caption objects for testing."""
    return [
        srt.Subtitle(
            index=1,
            start=timedelta(seconds=1),
            end=timedelta(seconds=3),
            content="Hello world"
        ),
        srt.Subtitle(
            index=2,
            start=timedelta(seconds=4),
            end=timedelta(seconds=6),
            content="This is a test subtitle"
        ),
        srt.Subtitle(
            index=3,
            start=timedelta(seconds=7),
            end=timedelta(seconds=10),
            content="With multiple lines\nand formatting"
        ),
    ]


@pytest.fixture
def isolated_app_dir(temp_dir: Path) -> Generator[Path, None, None]:  # pylint: disable=redefined-outer-name
    """Point the application data directory at a temporary location."""
    app_dir = temp_dir / "app_data"
    with patch("autocaptions.config.settings.get_app_data_dir", return_value=app_dir):
        yield app_dir


# Utility functions for tests
def create_srt_block(index: int, start: str, end: str, text: str) -> str:
    """Create one SRT block."""
    return f"{index}\n{start} --> {end}\n{text}"


def create_srt_content(count: int = 3) -> str:
    """Create well-formed SRT content with one caption every two seconds."""
    blocks = [
        create_srt_block(i, f"00:00:{i * 2:02d},000", f"00:00:{i * 2 + 1:02d},000", f"Caption {i}")
        for i in range(1, count + 1)
    ]
    return "\n\n".join(blocks) + "\n"


def create_malformed_srt() -> str:
    """Create SRT content whose first block has a broken time range."""
    return """1
INVALID_TIMESTAMP
Hello world

2
00:00:04,000 --> 00:00:06,000
This one is fine
"""
