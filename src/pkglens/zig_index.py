"""In-process memoizing loader for the zig.pm package index.

zig.pm has no search endpoint, so the zig adapter searches a full copy of the
index held in memory. The index is fetched at most once per process:

- a successful fetch is cached for the lifetime of the ``ZigIndexCache``;
- concurrent callers that arrive while a fetch is in flight await that same
  fetch instead of starting another one;
- a failed fetch clears the in-flight marker without populating the cache,
  so the error reaches every waiting caller and the next call retries.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

import structlog

from pkglens import reconcile

if TYPE_CHECKING:
    from pkglens.fetcher import Fetcher
    from pkglens.models.zig import ZigPackage

log = structlog.get_logger()

IndexLoader = Callable[[], Awaitable["list[ZigPackage]"]]


def http_index_loader(fetcher: Fetcher, url: str) -> IndexLoader:
    """Loader that downloads and validates the index from ``url``."""

    async def load() -> list[ZigPackage]:
        payload = await fetcher.get_json(url)
        return reconcile.zig_index(payload)

    return load


def _retrieve_exception(task: asyncio.Future[list[ZigPackage]]) -> None:
    # Marks the error as seen even when every waiting caller was cancelled
    if not task.cancelled():
        task.exception()


class ZigIndexCache:
    def __init__(self, loader: IndexLoader) -> None:
        self._loader = loader
        self._cached: list[ZigPackage] | None = None
        self._pending: asyncio.Future[list[ZigPackage]] | None = None

    @property
    def cached(self) -> list[ZigPackage] | None:
        return self._cached

    @property
    def pending(self) -> bool:
        return self._pending is not None

    async def get_index(self) -> list[ZigPackage]:
        if self._cached is not None:
            return self._cached
        if self._pending is None:
            log.info("zig_index_fetch_started")
            self._pending = asyncio.ensure_future(self._load())
            self._pending.add_done_callback(_retrieve_exception)
        # Shielded so one caller being cancelled does not cancel the shared fetch
        return await asyncio.shield(self._pending)

    async def _load(self) -> list[ZigPackage]:
        try:
            packages = await self._loader()
        except Exception:
            log.warning("zig_index_fetch_failed", exc_info=True)
            raise
        else:
            self._cached = packages
            log.info("zig_index_cached", packages=len(packages))
            return packages
        finally:
            self._pending = None
