from dataclasses import dataclass
from typing import (
    Any,
    Final,
    Generic,
    NoReturn,
    Protocol,
    TypeAlias,
    TypeVar,
    runtime_checkable,
)

from colorama import Fore
from colorama import Style as AnsiStyle

T = TypeVar("T")
E = TypeVar("E")

NO_COLOR_NAME: Final[str] = ""


class dotdict(dict):
    """dot.notation access to dictionary attributes"""

    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


@runtime_checkable
class Displayable(Protocol):
    """Anything that can be converted to text with `str()`."""

    def __str__(self) -> str:
        ...


@dataclass(frozen=True)
class Style:
    """A `colorama` colour and bold attribute for a label.

    Attributes:
        color:
            Case-insensitive `colorama.Fore` attribute name, for example
            `red`, `magenta` or `lightblue_ex`. `''` means no colour.
        bold:
            Whether to wrap the label in `colorama.Style.BRIGHT`.

    Example:
        ```pycon
        >>> Style("green").apply("success")
        '\\x1b[1m\\x1b[32msuccess\\x1b[0m'
        >>> Style("", bold=False).apply("plain")
        'plain'
        >>> Style("mauve")
        Traceback (most recent call last):
            ...
        ValueError: Unknown colour 'mauve'...

        ```
    """

    color: str = NO_COLOR_NAME
    bold: bool = True

    def __post_init__(self) -> None:
        if self.color and not hasattr(Fore, self.color.upper()):
            raise ValueError(
                f"Unknown colour '{self.color}', expected a `colorama.Fore` "
                f"name such as 'red' or 'lightblue_ex'"
            )

    @property
    def codes(self) -> str:
        """ANSI escape codes opening this `Style`."""
        codes: str = AnsiStyle.BRIGHT if self.bold else ""
        if self.color:
            codes += getattr(Fore, self.color.upper())
        return codes

    def apply(self, text: str) -> str:
        """Return `text` wrapped in `self.codes` and a reset."""
        if not self.codes:
            return text
        return f"{self.codes}{text}{AnsiStyle.RESET_ALL}"


class UnwrapError(ValueError):
    """Raised by `Err.unwrap()`, carrying the wrapped error value."""

    def __init__(self, error: Any) -> None:
        self.error = error
        super().__init__(str(error))


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successful `Result` holding `value`."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """A failed `Result` holding a displayable `error`."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise UnwrapError(self.error)


Result: TypeAlias = Ok[T] | Err[E]
