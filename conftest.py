from typing import Final, Generator

import pytest

from idioma.settings import (
    CLICOLOR_ENV,
    CLICOLOR_FORCE_ENV,
    NO_COLOR_ENV,
    settings,
)

COLOR_ENV_VARIABLES: Final[tuple[str, ...]] = (
    NO_COLOR_ENV,
    CLICOLOR_ENV,
    CLICOLOR_FORCE_ENV,
)


@pytest.fixture(autouse=True)
def uncoloured_env(monkeypatch) -> Generator[None, None, None]:
    """Remove colour environment variables and any `set_colorize` override."""
    for variable in COLOR_ENV_VARIABLES:
        monkeypatch.delenv(variable, raising=False)
    initial_colorize: bool | None = settings.COLORIZE
    settings.COLORIZE = None
    yield
    settings.COLORIZE = initial_colorize


@pytest.fixture(autouse=True)
def doctest_auto_fixtures(doctest_namespace: dict) -> None:
    """Elements to add to default `doctest` namespace."""
    doctest_namespace["pytest"] = pytest
