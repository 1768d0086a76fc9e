"""Shared HTTP access for every upstream registry.

All network I/O goes through ``Fetcher.get_json``: one GET, no retries.
Transport failures and non-2xx statuses become ``FetchError``; bodies that
are not JSON become ``ParseError``.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx
import structlog

from pkglens.config import HttpSettings
from pkglens.errors import FetchError, ParseError

log = structlog.get_logger()


def build_http_client(settings: HttpSettings | None = None) -> httpx.AsyncClient:
    """Create the shared client used by all adapters for the process lifetime."""
    settings = settings or HttpSettings()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.timeout_seconds),
        follow_redirects=True,
        headers={
            "User-Agent": settings.user_agent,
            "Accept": "application/json",
        },
    )


def path_segment(value: str) -> str:
    """Percent-encode a value for use as a single URL path segment.

    ``@scope/pkg`` becomes ``%40scope%2Fpkg``.
    """
    return quote(value, safe="")


class Fetcher:
    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        try:
            response = await self._client.get(url, params=params)
        except httpx.HTTPError as exc:
            log.warning("upstream_fetch_error", url=url, exc_info=True)
            raise FetchError(f"Request to {url} failed: {exc}", url=url) from exc

        if not response.is_success:
            log.warning("upstream_bad_status", url=url, status_code=response.status_code)
            raise FetchError(
                f"Upstream returned HTTP {response.status_code} for {url}",
                url=url,
                status_code=response.status_code,
                recoverable=response.status_code >= 500 or response.status_code == 429,
            )

        try:
            return response.json()
        except ValueError as exc:
            log.warning("upstream_invalid_json", url=url)
            raise ParseError(f"Response from {url} is not valid JSON") from exc
