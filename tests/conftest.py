from pathlib import Path
from typing import Callable

import pytest

from idioma import Style
from idioma.utils import strip_ansi


@pytest.fixture
def demo_style() -> Style:
    """A custom label `Style` for testing."""
    return Style("cyan")


@pytest.fixture
def stdout_lines(capsys) -> Callable[[], list[str]]:
    """Return a function reading captured `stdout` as unstyled lines."""

    def read_lines() -> list[str]:
        return strip_ansi(capsys.readouterr().out).splitlines()

    return read_lines


@pytest.fixture
def text_file(tmp_path: Path) -> Path:
    """A small text file to read in `result` demos."""
    path: Path = tmp_path / "shadows.txt"
    path.write_text("Standing in the shadows of love.")
    return path
