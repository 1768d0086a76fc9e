from __future__ import annotations

from pkglens.models.registry import (
    LATEST_SENTINEL,
    REGISTRY_NAMES,
    SEARCH_RESULT_CAP,
    RegistryName,
    SearchResult,
)
from pkglens.models.upstream import (
    CrateDocument,
    CratesSearchResponse,
    CrateSummary,
    CrateVersion,
    GitHubRepository,
    GitHubTag,
    NpmPackageDocument,
    NpmPackageSummary,
    NpmSearchObject,
    NpmSearchResponse,
)
from pkglens.models.zig import ZigLinks, ZigPackage

__all__ = [
    # registry
    "RegistryName",
    "REGISTRY_NAMES",
    "SearchResult",
    "LATEST_SENTINEL",
    "SEARCH_RESULT_CAP",
    # zig
    "ZigPackage",
    "ZigLinks",
    # upstream
    "NpmPackageSummary",
    "NpmSearchObject",
    "NpmSearchResponse",
    "NpmPackageDocument",
    "CrateSummary",
    "CratesSearchResponse",
    "CrateVersion",
    "CrateDocument",
    "GitHubTag",
    "GitHubRepository",
]
