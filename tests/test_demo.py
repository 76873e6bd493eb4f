from pathlib import Path

import pytest
from _pytest.capture import CaptureResult

from idioma import Text
from idioma.__main__ import run
from idioma.demo import basic, example, read_file, result


def test_basic(capsys) -> None:
    """Test the basic demo prints every label and exits with `1`."""
    with pytest.raises(SystemExit) as exit_info:
        basic()
    assert exit_info.value.code == 1
    captured: CaptureResult = capsys.readouterr()
    assert captured.out.splitlines() == [
        "success: Yay, you actually managed to run this!",
        "info: This is just a demo of what idioma can do.",
        "custom: This is a custom label. You can make one too!",
        "warning: This program will shut down with error very soon!",
        "debug: But you shouldn't worry, it's normal.",
        "error: Time to say bye-bye...",
    ]
    assert captured.err == ""


def test_main_runs_basic(stdout_lines) -> None:
    with pytest.raises(SystemExit) as exit_info:
        run()
    assert exit_info.traceback[1].path.name == "__main__.py"
    assert exit_info.value.code == 1
    assert stdout_lines()[-1] == "error: Time to say bye-bye..."


def test_example(stdout_lines) -> None:
    """Test only the final `exit_with` message is printed."""
    with pytest.raises(SystemExit) as exit_info:
        example()
    assert exit_info.value.code == 1
    assert stdout_lines() == ["lol: Did you expect something serious here? LMAO XD"]


def test_read_file(text_file: Path, tmp_path: Path) -> None:
    assert read_file(text_file).unwrap() == "Standing in the shadows of love."
    missing = read_file(tmp_path / "non-existent.txt")
    assert missing.is_err()
    assert isinstance(missing.error, Text)
    assert missing.error.plain.startswith("error: [Errno 2]")


def test_result(text_file: Path, tmp_path: Path, stdout_lines) -> None:
    """Test files are printed until the first missing one exits with `1`."""
    missing: Path = tmp_path / "non-existent.txt"
    with pytest.raises(SystemExit) as exit_info:
        result([text_file, missing, text_file])
    assert exit_info.value.code == 1
    lines: list[str] = stdout_lines()
    assert lines[0] == "Standing in the shadows of love."
    assert lines[1].startswith("error: [Errno 2] No such file or directory")
    assert len(lines) == 2
