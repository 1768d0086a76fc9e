"""Uniform package search and version listing across npm, crates.io and zig.pm."""

from __future__ import annotations

from pkglens.errors import ErrorCode, FetchError, InvalidInputError, ParseError, PkgLensError
from pkglens.models.registry import SearchResult
from pkglens.selector import get_active_registry
from pkglens.service import PackageSearchService
from pkglens.slug import GitHubRepoSlug, parse_repo_slug, to_repo_slug
from pkglens.state import AppState, open_state

__version__ = "0.1.0"

__all__ = [
    "AppState",
    "ErrorCode",
    "FetchError",
    "GitHubRepoSlug",
    "InvalidInputError",
    "PackageSearchService",
    "ParseError",
    "PkgLensError",
    "SearchResult",
    "get_active_registry",
    "open_state",
    "parse_repo_slug",
    "to_repo_slug",
]
