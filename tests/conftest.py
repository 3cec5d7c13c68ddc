from __future__ import annotations

import os
from io import StringIO
from typing import Iterator

import pytest
from rich.console import Console

from lib_log_category import runtime
from lib_log_category.adapters.memory import MemorySink
from lib_log_category.config import ENV_PREFIX, _reset_dotenv_state_for_testing


@pytest.fixture(autouse=True)
def reset_runtime_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test without configuration, default logger or custom sink."""

    for name in list(os.environ):
        if name.upper().startswith(ENV_PREFIX):
            monkeypatch.delenv(name, raising=False)
    runtime.reset_runtime()
    _reset_dotenv_state_for_testing()
    try:
        yield
    finally:
        runtime.reset_runtime()
        _reset_dotenv_state_for_testing()


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=200, color_system=None)


@pytest.fixture
def memory_sink() -> MemorySink:
    return MemorySink()
