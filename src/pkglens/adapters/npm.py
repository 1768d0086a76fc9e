from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from pkglens import reconcile
from pkglens.fetcher import path_segment
from pkglens.models.registry import SEARCH_RESULT_CAP, RegistryName

if TYPE_CHECKING:
    from pkglens.config import UpstreamSettings
    from pkglens.fetcher import Fetcher
    from pkglens.models.registry import SearchResult

log = structlog.get_logger()


class NpmAdapter:
    """registry.npmjs.org search and packument lookups."""

    name: RegistryName = "npm"

    def __init__(self, fetcher: Fetcher, settings: UpstreamSettings) -> None:
        self._fetcher = fetcher
        self._base_url = settings.npm_url.rstrip("/")
        self._limit = min(settings.search_limit, SEARCH_RESULT_CAP)

    async def search(self, query: str) -> list[SearchResult]:
        payload = await self._fetcher.get_json(
            f"{self._base_url}/-/v1/search",
            params={"text": query, "size": self._limit},
        )
        results = reconcile.npm_search_results(payload)
        log.debug("registry_search", registry=self.name, query=query, results=len(results))
        return results

    async def list_versions(self, package_name: str) -> list[str]:
        payload = await self._fetcher.get_json(f"{self._base_url}/{path_segment(package_name)}")
        return reconcile.npm_versions(payload)
