from __future__ import annotations

from typing import Iterator

import pytest

from castable.Config import reset_settings


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """Restore environment-driven settings around every test."""
    reset_settings()
    yield
    reset_settings()
