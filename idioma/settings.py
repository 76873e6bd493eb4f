"""
The `settings` module provides configuration for `idioma`.

Most of these are managed within the `settings` variable within this module.

Attributes:
    SEPARATOR:
        Character placed, in bold, between a label and its message
    ERROR_LABEL:
        Name of the label used when adapting errors
    NO_COLOR_ENV:
        Environment variable disabling colour when set
    CLICOLOR_ENV:
        Environment variable disabling colour when `"0"`
    CLICOLOR_FORCE_ENV:
        Environment variable forcing colour when set and not `"0"`
    LABEL_STYLES:
        `Style` of each built-in label
    settings:
        a `dotdict` configuration for running `idioma`
"""
from logging import WARNING
from typing import Final

from .types import Style, dotdict

SEPARATOR: Final[str] = ":"

SUCCESS_LABEL: Final[str] = "success"
INFO_LABEL: Final[str] = "info"
WARNING_LABEL: Final[str] = "warning"
DEBUG_LABEL: Final[str] = "debug"
ERROR_LABEL: Final[str] = "error"

NO_COLOR_ENV: Final[str] = "NO_COLOR"
CLICOLOR_ENV: Final[str] = "CLICOLOR"
CLICOLOR_FORCE_ENV: Final[str] = "CLICOLOR_FORCE"

DEFAULT_ERROR_EXIT_CODE: Final[int] = 1

# `info` was yellow in some early releases, it is purple (magenta) here.
LABEL_STYLES: Final[dict[str, Style]] = {
    SUCCESS_LABEL: Style("green"),
    INFO_LABEL: Style("magenta"),
    WARNING_LABEL: Style("yellow"),
    DEBUG_LABEL: Style("blue"),
    ERROR_LABEL: Style("red"),
}

settings: dotdict = dotdict(
    **{
        "COLORIZE": None,
        "ERROR_EXIT_CODE": DEFAULT_ERROR_EXIT_CODE,
        "LOG_LEVEL": WARNING,
        "LABEL_STYLES": LABEL_STYLES,
    }
)
