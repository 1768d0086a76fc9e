"""Unit-specific fixtures (HTTP is always mocked with respx)."""

from __future__ import annotations

import httpx
import pytest

from pkglens.config import UpstreamSettings
from pkglens.fetcher import Fetcher


@pytest.fixture()
def upstream() -> UpstreamSettings:
    return UpstreamSettings()


@pytest.fixture()
async def fetcher():
    """Fetcher over a real AsyncClient; routes are mocked per test."""
    async with httpx.AsyncClient() as client:
        yield Fetcher(client)
