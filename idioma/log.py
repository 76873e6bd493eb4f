from functools import partial
from typing import Callable, NoReturn

from .settings import (
    DEBUG_LABEL,
    ERROR_LABEL,
    INFO_LABEL,
    SUCCESS_LABEL,
    WARNING_LABEL,
    settings,
)
from .text import Error, Text, make_labeled
from .types import Displayable, Style

Labeler = Callable[[Displayable], Text]


def _builtin(name: str, message: Displayable) -> Text:
    return make_labeled(settings.LABEL_STYLES[name], name, message)


def success(message: Displayable) -> Text:
    """Return ``message`` labelled `success` in bold `colorama` `Fore.GREEN`."""
    return _builtin(SUCCESS_LABEL, message)


def info(message: Displayable) -> Text:
    """Return ``message`` labelled `info` in bold `colorama` `Fore.MAGENTA`."""
    return _builtin(INFO_LABEL, message)


def warning(message: Displayable) -> Text:
    """Return ``message`` labelled `warning` in bold `colorama` `Fore.YELLOW`."""
    return _builtin(WARNING_LABEL, message)


def debug(message: Displayable) -> Text:
    """Return ``message`` labelled `debug` in bold `colorama` `Fore.BLUE`."""
    return _builtin(DEBUG_LABEL, message)


def error(message: Displayable) -> Error:
    """Return ``message`` labelled `error` in bold `colorama` `Fore.RED`.

    Example:
        ```pycon
        >>> error("disk full").plain
        'error: disk full'
        >>> taste: int = 7
        >>> if taste != 42:
        ...     error("Your taste is appalling.").print()
        error: Your taste is appalling.

        ```
    """
    return _builtin(ERROR_LABEL, message)


def custom(style: Style, name: str) -> Labeler:
    """Return a function labelling any message with `name` in `style`.

    Declare a label once and reuse it rather than repeating `style` and
    `name` at every call.

    Example:
        ```pycon
        >>> lol = custom(Style("cyan"), "lol")
        >>> lol("Did you expect something serious here?").print()
        lol: Did you expect something serious here?
        >>> lol(3.14).plain
        'lol: 3.14'

        ```
    """
    return partial(make_labeled, style, name)


def exit_with(
    labeler: Labeler,
    message: Displayable,
    code: int | None = None,
) -> NoReturn:
    """Label ``message`` with `labeler`, print it and exit with `code`.

    If `code` is `None`, `settings.ERROR_EXIT_CODE` is used.
    """
    code = settings.ERROR_EXIT_CODE if code is None else code
    labeler(message).exit(code)
