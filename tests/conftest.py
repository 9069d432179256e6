"""Pytest fixtures for testing."""

from pathlib import Path
from typing import Any, Callable

import pytest

from wirebox.core.container import Container


class CountingProducer:
    """Producer that records every call it receives."""

    def __init__(self, result: Callable[..., Any] | None = None) -> None:
        self.calls: list[tuple[Any, ...]] = []
        self._result = result or (lambda *args: object())

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self._result(*args)


@pytest.fixture
def container() -> Container:
    """Empty container."""
    return Container()


@pytest.fixture
def producer() -> CountingProducer:
    """Producer returning a fresh object per call."""
    return CountingProducer()


@pytest.fixture
def config_path(tmp_path) -> Path:
    """Location for a temporary config file."""
    return tmp_path / "config.json"


@pytest.fixture
def make_producer() -> Callable[..., CountingProducer]:
    """Build counting producers with a custom result function."""
    return CountingProducer
