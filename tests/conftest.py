# topmark:header:start
#
#   project      : Chronos
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the Chronos test suite.

Every test runs with the process time zone pinned to UTC so that local-mode
expectations are deterministic. Tests that exercise other zones use the
`local_tz` fixture, which accepts POSIX ``TZ`` strings such as
``"EST5EDT,M3.2.0,M11.1.0"`` (US Eastern with DST) or ``"KST-9"``.

Notes:
    Config tests should respect the immutable/mutable configuration split:
    build with `chronos.config.MutableConfig`, then `freeze()` into a
    `chronos.config.Config`. Do not mutate a frozen `Config`; call
    `Config.thaw()` instead.
"""

from __future__ import annotations

import os
import time
from collections.abc import Callable, Iterator
from typing import Any, TypeVar, cast

import pytest

from chronos.config import logging
from chronos.constants import CHRONOS_LOG_LEVEL_ENV

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]

US_EASTERN = "EST5EDT,M3.2.0,M11.1.0"
KOREA = "KST-9"


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def _set_tz(value: str | None) -> None:
    if value is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = value
    time.tzset()


@pytest.fixture(autouse=True)
def silence_chronos_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(CHRONOS_LOG_LEVEL_ENV, raising=False)


@pytest.fixture(autouse=True)
def utc_host_zone() -> Iterator[None]:
    """Pin the host time zone to UTC for the duration of a test."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset() is not available on this platform")
    saved: str | None = os.environ.get("TZ")
    _set_tz("UTC0")
    try:
        yield
    finally:
        _set_tz(saved)


@pytest.fixture
def local_tz() -> Callable[[str], None]:
    """Return a setter switching the host time zone for the current test.

    The autouse `utc_host_zone` fixture restores the previous zone afterwards.

    Returns:
        Callable[[str], None]: Function taking a POSIX ``TZ`` string.
    """
    return _set_tz


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Enable TRACE logging so diagnostics are captured on failures.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
