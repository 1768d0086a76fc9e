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


class CratesAdapter:
    """crates.io crate search and version listing."""

    name: RegistryName = "crates"

    def __init__(self, fetcher: Fetcher, settings: UpstreamSettings) -> None:
        self._fetcher = fetcher
        self._base_url = settings.crates_url.rstrip("/")
        self._limit = min(settings.search_limit, SEARCH_RESULT_CAP)

    async def search(self, query: str) -> list[SearchResult]:
        payload = await self._fetcher.get_json(
            f"{self._base_url}/crates",
            params={"q": query, "per_page": self._limit},
        )
        results = reconcile.crates_search_results(payload)
        log.debug("registry_search", registry=self.name, query=query, results=len(results))
        return results

    async def list_versions(self, package_name: str) -> list[str]:
        payload = await self._fetcher.get_json(
            f"{self._base_url}/crates/{path_segment(package_name)}"
        )
        return reconcile.crates_versions(payload)
