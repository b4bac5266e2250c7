# topmark:header:start
#
#   project      : SnapMark
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the SnapMark test suite.

Sets up global fixtures and the logging configuration for test runs, and
provides small helpers shared by the test modules.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs using `snapmark.config.MutableParserConfig` (mutable), then
      `freeze()` into a `snapmark.config.ParserConfig`.
    - Do **not** mutate a frozen `ParserConfig`. If you need to tweak one,
      call `ParserConfig.thaw()`, edit the returned builder, then `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from snapmark.config import MutableParserConfig, logging
from snapmark.core.nodes import Container, NodeType, Text

if TYPE_CHECKING:
    from snapmark.config import ParserConfig
    from snapmark.core.nodes import Node

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.hypothesis_slow`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_hypothesis_slow: DecoratorType[Any] = as_typed_mark(pytest.mark.hypothesis_slow)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_snapmark_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure SnapMark's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("SNAPMARK_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test in an empty project directory, so no config file is discovered.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def make_config(**overrides: Any) -> ParserConfig:
    """Return a frozen `ParserConfig` built from defaults and overrides.

    Args:
        **overrides (Any): Field overrides applied to the mutable builder before freezing.

    Returns:
        ParserConfig: An immutable configuration snapshot for use in tests.
    """
    m: MutableParserConfig = MutableParserConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()


# --- Node construction shorthands ---------------------------------------------


def t(text: str) -> Text:
    """Return a `Text` leaf."""
    return Text(text)


def c(kind: NodeType, *children: Node) -> Container:
    """Return a container of ``kind`` with ``children``."""
    return Container(kind, tuple(children))


def para(*children: Node | str) -> Container:
    """Return a paragraph; plain strings become `Text` leaves."""
    return Container(
        NodeType.PARAGRAPH,
        tuple(Text(ch) if isinstance(ch, str) else ch for ch in children),
    )
