"""Pytest configuration for refpath tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from refpath import POSIX, WINDOWS, PathPolicy, _config, init

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True, scope='session')
def posix_by_default() -> Generator[None]:
    """Pin the default policy to POSIX so literal paths mean the same on every host."""
    init(platform='posix')
    yield
    _config._reset()


@pytest.fixture
def fresh_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Start from an uninitialized configuration; POSIX is restored afterwards."""
    monkeypatch.delenv('REFPATH_PLATFORM', raising=False)
    _config._reset()
    yield
    init(platform='posix')


@pytest.fixture(params=[POSIX, WINDOWS], ids=['posix', 'windows'], scope='session')
def policy(request: pytest.FixtureRequest) -> PathPolicy:
    """Run a test once under each platform policy."""
    return request.param
