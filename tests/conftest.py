"""Shared pytest fixtures and configuration for the pattern-demo test suite.

Guidelines
----------
* No terminal interaction — questionary is always mocked.
* Every test starts with a fresh process-wide singleton.
* The package logger is reset after each test, since the CLI
  reconfigures it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from pattern_demo.core import singleton


@pytest.fixture(autouse=True)
def _fresh_singleton() -> Iterator[None]:
    singleton._shared.reset()
    yield
    singleton._shared.reset()


@pytest.fixture(autouse=True)
def _reset_package_logger(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv("PATTERN_DEMO_LOG_LEVEL", raising=False)
    yield
    package_logger = logging.getLogger("pattern_demo")
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
