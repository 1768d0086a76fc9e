"""Shared fixtures: sample upstream payloads for every registry."""

from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture()
def zig_index_payload() -> list[dict[str, Any]]:
    """A small zig.pm index, in upstream order."""
    return [
        {
            "author": "karlseguin",
            "name": "http.zig",
            "description": "An HTTP/1.1 server for Zig",
            "tags": ["http", "server"],
            "git": "https://github.com/karlseguin/http.zig",
        },
        {
            "author": "ziglibs",
            "name": "zig-clap",
            "description": "Command line argument parsing",
            "tags": ["cli"],
            "links": {"github": "https://github.com/Hejsil/zig-clap.git"},
        },
        {
            "author": "nobody",
            "name": "gitlab-http",
            "description": "http client hosted elsewhere",
            "git": "https://gitlab.com/nobody/gitlab-http",
        },
        {
            "author": "zigzap",
            "name": "zap",
            "description": None,
            "tags": None,
            "links": {"github": "github.com/zigzap/zap/"},
        },
        {
            "author": "mitchellh",
            "name": "libxev",
            "description": "Cross-platform event loop",
            "tags": ["async", "io"],
            "git": "git@github.com:mitchellh/libxev.git",
        },
    ]


@pytest.fixture()
def npm_search_payload() -> dict[str, Any]:
    return {
        "objects": [
            {
                "package": {
                    "name": "left-pad",
                    "description": "String left pad",
                    "version": "1.3.0",
                    "links": {"npm": "https://www.npmjs.com/package/left-pad"},
                },
                "score": {"final": 0.9},
            },
            {"package": {"name": "pad-left", "version": "2.1.0"}},
        ],
        "total": 2,
    }


@pytest.fixture()
def crates_search_payload() -> dict[str, Any]:
    return {
        "crates": [
            {"name": "serde", "description": "A serialization framework", "max_version": "1.0.210"},
            {"name": "serde_json", "description": None, "max_version": "1.0.128"},
        ],
        "meta": {"total": 2},
    }
