"""Native response shapes of the upstream registry APIs.

Only the fields the adapters read are declared; everything else in the
upstream payloads is ignored.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

# ---------------------------------------------------------------------------
# npm  (registry.npmjs.org)
# ---------------------------------------------------------------------------


class NpmPackageSummary(BaseModel):
    name: str
    description: str | None = None
    version: str


class NpmSearchObject(BaseModel):
    package: NpmPackageSummary


class NpmSearchResponse(BaseModel):
    """``GET /-/v1/search?text=...&size=...``"""

    objects: list[NpmSearchObject]


class NpmPackageDocument(BaseModel):
    """``GET /<name>`` — the full packument."""

    # Insertion order is upstream publish order (oldest first)
    versions: dict[str, Any]


# ---------------------------------------------------------------------------
# crates.io
# ---------------------------------------------------------------------------


class CrateSummary(BaseModel):
    name: str
    description: str | None = None
    max_version: str


class CratesSearchResponse(BaseModel):
    """``GET /crates?q=...&per_page=...``"""

    crates: list[CrateSummary]


class CrateVersion(BaseModel):
    num: str


class CrateDocument(BaseModel):
    """``GET /crates/<name>``"""

    versions: list[CrateVersion]


# ---------------------------------------------------------------------------
# GitHub REST API
# ---------------------------------------------------------------------------


class GitHubTag(BaseModel):
    name: str = ""


class GitHubRepository(BaseModel):
    default_branch: str | None = None
