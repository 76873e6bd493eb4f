import sys
from dataclasses import dataclass
from typing import IO, NoReturn, TypeAlias

from colorama import Style as AnsiStyle

from .settings import SEPARATOR
from .types import Displayable, Style
from .utils import logger, should_colorize, strip_ansi

BOLD_SEPARATOR: str = f"{AnsiStyle.BRIGHT}{SEPARATOR}{AnsiStyle.RESET_ALL}"


def _check_exit_code(code: int) -> None:
    if isinstance(code, bool) or not isinstance(code, int) or code < 0:
        raise ValueError(f"Exit code must be an `int` >= 0, not {code!r}")


@dataclass(frozen=True)
class Text:
    """A labelled message ready to be rendered, printed or exited with.

    `Text` is immutable: `text` holds the styled characters as built by
    `Text.make` and never changes. Use `render()` (or `str()`) to get
    what would be printed for the current terminal.

    Attributes:
        text: The label, bold separator and message, including ANSI codes.

    Example:
        ```pycon
        >>> warning = Text.make(Style("yellow"), "warning", "Low on water")
        >>> warning.plain
        'warning: Low on water'
        >>> warning.print()
        warning: Low on water

        ```
    """

    text: str

    @classmethod
    def make(cls, style: Style, name: str, message: Displayable) -> "Text":
        """Build a `Text` of `name` styled by `style`, a bold `:` and `message`."""
        return cls(f"{style.apply(name)}{BOLD_SEPARATOR} {message!s}")

    @property
    def plain(self) -> str:
        """`self.text` without any styling codes."""
        return strip_ansi(self.text)

    def render(self, colorize: bool | None = None, file: IO | None = None) -> str:
        """Return the characters `print()` would write to `file`.

        Args:
            colorize: Keep ANSI codes if `True`, strip them if `False`. If
                `None`, decide with `should_colorize(file)`.
            file: Stream used to detect colour support, default `sys.stdout`.
        """
        if colorize is None:
            colorize = should_colorize(file)
        return self.text if colorize else self.plain

    def print(self, file: IO | None = None) -> None:
        """Write `self.render()` and a newline to `file`, default `sys.stdout`."""
        file = sys.stdout if file is None else file
        print(self.render(file=file), file=file)

    def exit(self, code: int) -> NoReturn:
        """Print `self` then terminate the process with `code`.

        This never returns: `sys.exit()` raises `SystemExit`, so nothing
        after the call runs in the calling frame.

        Example:
            ```pycon
            >>> with pytest.raises(SystemExit) as exit_info:
            ...     Text.make(Style("red"), "error", "Bye").exit(3)
            error: Bye
            >>> exit_info.value.code
            3

            ```
        """
        _check_exit_code(code)
        self.print()
        logger.debug(f"Exiting with code {code}")
        sys.exit(code)

    def __str__(self) -> str:
        return self.render()


Error: TypeAlias = Text


def make_labeled(style: Style, name: str, message: Displayable) -> Text:
    """Return a `Text` of `name` in `style` followed by `message`.

    Example:
        ```pycon
        >>> make_labeled(Style("cyan"), "lol", 42).render(colorize=False)
        'lol: 42'
        >>> make_labeled(Style("cyan"), "lol", 42).render(colorize=True)
        '\\x1b[1m\\x1b[36mlol\\x1b[0m\\x1b[1m:\\x1b[0m 42'

        ```
    """
    return Text.make(style, name, message)


def render(text: Text, colorize: bool | None = None) -> str:
    """Return what `text.print()` would write, without the newline."""
    return text.render(colorize=colorize)
