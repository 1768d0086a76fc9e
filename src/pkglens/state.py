"""Process-wide wiring of settings, the HTTP client and the zig index cache."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog

from pkglens.config import Settings
from pkglens.fetcher import Fetcher, build_http_client
from pkglens.log import configure_logging
from pkglens.selector import RegistrySelector, RegistrySignal, bound_signal
from pkglens.service import PackageSearchService, build_adapters
from pkglens.zig_index import ZigIndexCache, http_index_loader

if TYPE_CHECKING:
    import httpx

log = structlog.get_logger()


@dataclass
class AppState:
    settings: Settings
    http_client: httpx.AsyncClient
    fetcher: Fetcher
    zig_index: ZigIndexCache
    service: PackageSearchService


def build_state(
    settings: Settings,
    http_client: httpx.AsyncClient,
    signal: RegistrySignal | None = None,
) -> AppState:
    fetcher = Fetcher(http_client)
    zig_index = ZigIndexCache(http_index_loader(fetcher, settings.upstream.zig_index_url))
    adapters = build_adapters(fetcher, settings.upstream, zig_index)
    return AppState(
        settings=settings,
        http_client=http_client,
        fetcher=fetcher,
        zig_index=zig_index,
        service=PackageSearchService(
            adapters, RegistrySelector(signal or bound_signal(settings))
        ),
    )


@asynccontextmanager
async def open_state(
    settings: Settings | None = None,
    signal: RegistrySignal | None = None,
) -> AsyncIterator[AppState]:
    """Yield a wired ``AppState``; the HTTP client is closed on exit.

    Logging is configured from ``settings.logging``. Without an explicit
    ``signal``, ``settings.registry.active`` selects the registry when set,
    otherwise the environment and YAML file are read on every call.
    """
    settings = settings or Settings()
    configure_logging(settings.logging)
    async with build_http_client(settings.http) as client:
        log.debug("state_opened")
        yield build_state(settings, client, signal)
