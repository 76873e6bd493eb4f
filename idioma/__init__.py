"""
Idiomatic, labelled messages for command line tools.

Every command line tool prints handy messages from time to time and needs a
function or two to do so. `idioma` provides them once, in one style:

```pycon
>>> from idioma import error
>>> with pytest.raises(SystemExit):
...     error("You were not supposed to mess with me!").exit(1)
error: You were not supposed to mess with me!

```
"""
from .log import custom, debug, error, exit_with, info, success, warning
from .result import capture, exit_if_error, into_result
from .settings import settings
from .text import Error, Text, make_labeled, render
from .types import Displayable, Err, Ok, Result, Style, UnwrapError
from .utils import set_colorize, set_log_level, should_colorize, strip_ansi

__all__ = [
    "Displayable",
    "Err",
    "Error",
    "Ok",
    "Result",
    "Style",
    "Text",
    "UnwrapError",
    "capture",
    "custom",
    "debug",
    "error",
    "exit_if_error",
    "exit_with",
    "info",
    "into_result",
    "make_labeled",
    "render",
    "set_colorize",
    "set_log_level",
    "settings",
    "should_colorize",
    "strip_ansi",
    "success",
    "warning",
]
