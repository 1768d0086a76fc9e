"""Registry table and the search facade callers talk to."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

import structlog

from pkglens.adapters import CratesAdapter, NpmAdapter, ZigAdapter
from pkglens.selector import RegistrySelector

if TYPE_CHECKING:
    from pkglens.adapters import RegistryAdapter
    from pkglens.config import UpstreamSettings
    from pkglens.fetcher import Fetcher
    from pkglens.models.registry import RegistryName, SearchResult
    from pkglens.zig_index import ZigIndexCache

log = structlog.get_logger()


def build_adapters(
    fetcher: Fetcher,
    settings: UpstreamSettings,
    zig_index: ZigIndexCache,
) -> dict[RegistryName, RegistryAdapter]:
    return {
        "npm": NpmAdapter(fetcher, settings),
        "crates": CratesAdapter(fetcher, settings),
        "zig": ZigAdapter(fetcher, zig_index, settings),
    }


class PackageSearchService:
    """Dispatches each call to the adapter of the currently active registry."""

    def __init__(
        self,
        adapters: Mapping[RegistryName, RegistryAdapter],
        selector: RegistrySelector | None = None,
    ) -> None:
        self._adapters = dict(adapters)
        self._selector = selector or RegistrySelector()

    def active_adapter(self) -> RegistryAdapter:
        registry = self._selector.get_active_registry()
        return self._adapters[registry]

    async def search_packages(self, query: str) -> list[SearchResult]:
        adapter = self.active_adapter()
        log.info("search_packages", registry=adapter.name, query=query)
        return await adapter.search(query)

    async def fetch_versions(self, package_name: str) -> list[str]:
        adapter = self.active_adapter()
        log.info("fetch_versions", registry=adapter.name, package=package_name)
        return await adapter.list_versions(package_name)
