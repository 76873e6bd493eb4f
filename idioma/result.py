from typing import Any, Callable, TypeVar

from .settings import ERROR_LABEL, settings
from .text import Error, Text, make_labeled
from .types import Err, Ok, Result, Style
from .utils import logger

T = TypeVar("T")


def capture(func: Callable[..., T], *args: Any, **kwargs: Any) -> Result[T, Exception]:
    """Call `func` and return its result as `Ok`, or `Err` if it raises.

    Only `Exception` subclasses are captured, so `SystemExit` and
    `KeyboardInterrupt` still propagate.

    Example:
        ```pycon
        >>> capture(int, "42")
        Ok(value=42)
        >>> capture(int, "forty-two")
        Err(error=ValueError("invalid literal for int() with base 10: 'forty-two'"))

        ```
    """
    try:
        return Ok(func(*args, **kwargs))
    except Exception as err:
        logger.debug(f"Captured {type(err).__name__} from {func!r}: {err}")
        return Err(err)


def into_result(
    result: Result[T, Any],
    style: Style | None = None,
    name: str = ERROR_LABEL,
) -> Result[T, Error]:
    """Turn any `Result` with a displayable error into a `Result[T, Error]`.

    `Ok` values are returned untouched. An `Err` is relabelled with
    `make_labeled(style, name, str(error))`, so errors from any library can
    be passed on as one labelled `Text` type. An `Err` already holding a
    `Text` is returned as is.

    Args:
        result: `Ok` or `Err` to adapt.
        style: Label `Style`, defaults to the `error` label's style.
        name: Label name, default `error`.

    Example:
        ```pycon
        >>> into_result(Ok("fine"))
        Ok(value='fine')
        >>> into_result(capture(open, "non-existent.txt")).error.plain
        "error: [Errno 2] No such file or directory: 'non-existent.txt'"
        >>> into_result(Err("late"), Style("yellow"), "warning").error.plain
        'warning: late'

        ```
    """
    if isinstance(result, Ok):
        return result
    if isinstance(result.error, Text):
        return result
    style = settings.LABEL_STYLES[ERROR_LABEL] if style is None else style
    return Err(make_labeled(style, name, result.error))


def exit_if_error(result: Result[T, Any]) -> Ok[T]:
    """Return `result` if it is `Ok`, else print its error and exit with `1`.

    Anything returned is therefore always `Ok`, so `unwrap()` on it is safe.
    An error that is not already a `Text` is labelled with `error` first.

    Example:
        ```pycon
        >>> exit_if_error(Ok("hello world")).unwrap()
        'hello world'
        >>> with pytest.raises(SystemExit):
        ...     exit_if_error(Err("Time to say bye-bye..."))
        error: Time to say bye-bye...

        ```
    """
    if isinstance(result, Ok):
        return result
    labelled: Result[T, Error] = into_result(result)
    labelled.error.exit(settings.ERROR_EXIT_CODE)
