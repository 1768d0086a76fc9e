"""Integration test fixtures.

Provides a fully wired AppState built by ``open_state`` with a real
AsyncClient; upstream HTTP is mocked with respx in each test. The registry
selection is driven through the environment, as a host application would.
"""

from __future__ import annotations

import pytest
import structlog

from pkglens.config import Settings
from pkglens.state import AppState, open_state


@pytest.fixture(autouse=True)
def _reset_structlog():
    """open_state configures structlog globally; restore defaults afterwards."""
    yield
    structlog.reset_defaults()


@pytest.fixture()
def select_registry(monkeypatch: pytest.MonkeyPatch):
    """Set the active registry the same way a deployment would."""

    def select(name: str | None) -> None:
        if name is None:
            monkeypatch.delenv("PKGLENS__REGISTRY__ACTIVE", raising=False)
        else:
            monkeypatch.setenv("PKGLENS__REGISTRY__ACTIVE", name)

    return select


@pytest.fixture()
async def app_state() -> AppState:
    async with open_state(Settings()) as state:
        yield state
