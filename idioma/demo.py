"""
Demonstrations of what `idioma` can do.

Each demo ends the process on purpose, usually with exit code `1`:
don't panic.
"""
from os import PathLike
from pathlib import Path
from typing import Iterable, NoReturn

from .log import custom, debug, error, exit_with, info, success, warning
from .result import capture, exit_if_error, into_result
from .text import Error
from .types import Result, Style

CUSTOM_STYLE: Style = Style("blue")
LOL_STYLE: Style = Style("cyan")


def basic() -> NoReturn:
    """Print every built-in label, a custom one, then exit on an `error`."""
    success("Yay, you actually managed to run this!").print()
    info("This is just a demo of what idioma can do.").print()
    custom(CUSTOM_STYLE, "custom")(
        "This is a custom label. You can make one too!"
    ).print()
    warning("This program will shut down with error very soon!").print()
    debug("But you shouldn't worry, it's normal.").print()
    error("Time to say bye-bye...").exit(1)


def example() -> NoReturn:
    """Build messages without printing them, then `exit_with` a custom label."""
    success("Yay, you actually managed to run this!")
    info("This is just a demo of what idioma can do.")
    custom(CUSTOM_STYLE, "custom")("This is a custom label. You can make one too!")
    warning("This program will shut down with error very soon!")
    exit_with(
        custom(LOL_STYLE, "lol"),
        "Did you expect something serious here? LMAO XD",
    )


def read_file(path: PathLike | str) -> Result[str, Error]:
    """Read `path` as text, with any `OSError` adapted to an `Error`."""
    return into_result(capture(Path(path).read_text))


def result(paths: Iterable[PathLike | str]) -> None:
    """Print the contents of each of `paths`, exiting on the first failure.

    `unwrap()` is safe here: `exit_if_error` only returns an `Ok`.
    """
    for path in paths:
        data: str = exit_if_error(read_file(path)).unwrap()
        print(data)
