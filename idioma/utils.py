import logging
import os
import sys
from typing import IO, Final

from colorama import just_fix_windows_console
from colorama.ansitowin32 import AnsiToWin32
from rich.console import Console
from rich.logging import RichHandler

from .settings import (
    CLICOLOR_ENV,
    CLICOLOR_FORCE_ENV,
    NO_COLOR_ENV,
    settings,
)

FORMAT: Final[str] = "%(message)s"

console: Console = Console(stderr=True)

handler: RichHandler = RichHandler(rich_tracebacks=True, console=console)
handler.setFormatter(logging.Formatter(FORMAT, datefmt="[%X]"))

logger = logging.getLogger("idioma")
logger.addHandler(handler)
logger.setLevel(settings.LOG_LEVEL)

just_fix_windows_console()


def set_log_level(level: int | str) -> None:
    """Set `settings.LOG_LEVEL` and apply it to the `idioma` logger.

    Example:
        ```pycon
        >>> set_log_level("DEBUG")
        >>> logger.level
        10
        >>> set_log_level("WARNING")
        >>> logger.level
        30

        ```
    """
    settings.LOG_LEVEL = level
    logger.setLevel(level)


def set_colorize(value: bool | None) -> None:
    """Force colour on or off for every later render, or `None` to detect.

    Example:
        ```pycon
        >>> set_colorize(True)
        >>> should_colorize()
        True
        >>> set_colorize(None)

        ```
    """
    settings.COLORIZE = value


def _env_flag(name: str) -> str | None:
    value: str | None = os.environ.get(name)
    return value if value else None


def should_colorize(stream: IO | None = None) -> bool:
    """Whether styling codes should be kept when writing to `stream`.

    The first rule that applies wins:

    1. `settings.COLORIZE` if it is not `None` (see `set_colorize`)
    2. `CLICOLOR_FORCE` set to anything but `"0"` colours
    3. `NO_COLOR` set disables colour
    4. `CLICOLOR="0"` disables colour
    5. otherwise colour only if `stream` is a terminal

    Args:
        stream: Where the text will be written, default `sys.stdout`.

    Returns:
        `True` if ANSI codes should be written, else `False`.

    Example:
        ```pycon
        >>> import io
        >>> should_colorize(io.StringIO())
        False
        >>> monkeypatch = pytest.MonkeyPatch()
        >>> monkeypatch.setenv("CLICOLOR_FORCE", "1")
        >>> should_colorize(io.StringIO())
        True
        >>> monkeypatch.undo()

        ```
    """
    if settings.COLORIZE is not None:
        return bool(settings.COLORIZE)
    force: str | None = _env_flag(CLICOLOR_FORCE_ENV)
    if force is not None and force != "0":
        return True
    if _env_flag(NO_COLOR_ENV) is not None:
        logger.debug(f"`{NO_COLOR_ENV}` set, not colouring output")
        return False
    if _env_flag(CLICOLOR_ENV) == "0":
        logger.debug(f"`{CLICOLOR_ENV}=0`, not colouring output")
        return False
    stream = sys.stdout if stream is None else stream
    isatty = getattr(stream, "isatty", None)
    try:
        return bool(isatty and isatty())
    except ValueError:
        # Closed streams raise on `isatty()`
        return False


def strip_ansi(text: str) -> str:
    """Return `text` with every ANSI escape sequence removed.

    Example:
        ```pycon
        >>> strip_ansi('\\x1b[1m\\x1b[31merror\\x1b[0m\\x1b[1m:\\x1b[0m disk full')
        'error: disk full'

        ```
    """
    return AnsiToWin32.ANSI_CSI_RE.sub("", AnsiToWin32.ANSI_OSC_RE.sub("", text))
