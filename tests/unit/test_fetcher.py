"""Unit tests for pkglens.fetcher."""

from __future__ import annotations

import httpx
import pytest
import respx

from pkglens.config import HttpSettings
from pkglens.errors import ErrorCode, FetchError, ParseError
from pkglens.fetcher import Fetcher, build_http_client, path_segment

# ---------------------------------------------------------------------------
# build_http_client / path_segment
# ---------------------------------------------------------------------------


class TestBuildHttpClient:
    async def test_client_configuration(self) -> None:
        settings = HttpSettings(user_agent="test-agent", timeout_seconds=3)
        async with build_http_client(settings) as client:
            assert isinstance(client, httpx.AsyncClient)
            assert client.headers["User-Agent"] == "test-agent"
            assert client.headers["Accept"] == "application/json"
            assert client.timeout.read == 3
            assert client.follow_redirects is True


class TestPathSegment:
    def test_plain_name_unchanged(self) -> None:
        assert path_segment("left-pad") == "left-pad"

    def test_scoped_name_is_one_segment(self) -> None:
        assert path_segment("@types/node") == "%40types%2Fnode"

    def test_spaces_encoded(self) -> None:
        assert path_segment("a b") == "a%20b"


# ---------------------------------------------------------------------------
# Fetcher
# ---------------------------------------------------------------------------


class TestFetcher:
    async def test_successful_fetch(self, fetcher: Fetcher) -> None:
        with respx.mock:
            respx.get("https://example.com/data").mock(
                return_value=httpx.Response(200, json={"ok": True})
            )
            assert await fetcher.get_json("https://example.com/data") == {"ok": True}

    async def test_query_params_are_encoded(self, fetcher: Fetcher) -> None:
        with respx.mock:
            route = respx.get("https://example.com/search").mock(
                return_value=httpx.Response(200, json=[])
            )
            await fetcher.get_json("https://example.com/search", params={"q": "a&b c"})
            assert route.calls.last.request.url.params["q"] == "a&b c"
            assert b"q=a%26b" in route.calls.last.request.url.raw_path

    async def test_404_raises_fetch_error(self, fetcher: Fetcher) -> None:
        with respx.mock:
            respx.get("https://example.com/missing").mock(return_value=httpx.Response(404))
            with pytest.raises(FetchError) as exc_info:
                await fetcher.get_json("https://example.com/missing")
            assert exc_info.value.code == ErrorCode.FETCH_FAILED
            assert exc_info.value.status_code == 404
            assert exc_info.value.url == "https://example.com/missing"
            assert exc_info.value.recoverable is False

    async def test_500_is_recoverable(self, fetcher: Fetcher) -> None:
        with respx.mock:
            respx.get("https://example.com/error").mock(return_value=httpx.Response(503))
            with pytest.raises(FetchError) as exc_info:
                await fetcher.get_json("https://example.com/error")
            assert exc_info.value.status_code == 503
            assert exc_info.value.recoverable is True

    async def test_network_error_raises_fetch_error(self, fetcher: Fetcher) -> None:
        with respx.mock:
            respx.get("https://example.com/down").mock(
                side_effect=httpx.ConnectError("Connection refused")
            )
            with pytest.raises(FetchError) as exc_info:
                await fetcher.get_json("https://example.com/down")
            assert exc_info.value.status_code is None
            assert exc_info.value.recoverable is True
            assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    async def test_invalid_json_raises_parse_error(self, fetcher: Fetcher) -> None:
        with respx.mock:
            respx.get("https://example.com/html").mock(
                return_value=httpx.Response(200, text="<html>not json</html>")
            )
            with pytest.raises(ParseError) as exc_info:
                await fetcher.get_json("https://example.com/html")
            assert exc_info.value.code == ErrorCode.PARSE_FAILED
            assert exc_info.value.recoverable is False
