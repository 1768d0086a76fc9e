"""Mapping of native upstream payloads onto ``SearchResult`` and version lists.

Every adapter passes its raw JSON through here. Payloads are validated
against the upstream models first (``ParseError`` on mismatch), then the
normalised output is validated again before it is handed to callers.
"""

from __future__ import annotations

from typing import Any, TypeVar

import structlog
from pydantic import BaseModel, TypeAdapter, ValidationError

from pkglens.errors import ParseError
from pkglens.models.registry import LATEST_SENTINEL, SEARCH_RESULT_CAP, SearchResult
from pkglens.models.upstream import (
    CrateDocument,
    CratesSearchResponse,
    GitHubRepository,
    GitHubTag,
    NpmPackageDocument,
    NpmSearchResponse,
)
from pkglens.models.zig import ZigPackage

log = structlog.get_logger()

ModelT = TypeVar("ModelT", bound=BaseModel)

ZIG_REGISTRY_LABEL = "zig.pm"
ZIG_DESCRIPTION_SEPARATOR = " • "

_results_adapter = TypeAdapter(list[SearchResult])
_versions_adapter = TypeAdapter(list[str])
_github_tags_adapter = TypeAdapter(list[GitHubTag])


def parse_payload(model: type[ModelT], payload: Any, *, source: str) -> ModelT:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise ParseError(
            f"Unexpected {source} response: {exc.error_count()} invalid field(s)"
        ) from exc


# ---------------------------------------------------------------------------
# Boundary validation
# ---------------------------------------------------------------------------


def validate_results(results: list[Any]) -> list[SearchResult]:
    """Validate normalised results and enforce the per-search cap."""
    try:
        validated = _results_adapter.validate_python(results)
    except ValidationError as exc:
        raise ParseError(f"Search results failed validation: {exc.error_count()} error(s)") from exc
    return validated[:SEARCH_RESULT_CAP]


def validate_versions(versions: list[Any]) -> list[str]:
    try:
        validated = _versions_adapter.validate_python(versions)
    except ValidationError as exc:
        raise ParseError(f"Version list failed validation: {exc.error_count()} error(s)") from exc
    if any(not version for version in validated):
        raise ParseError("Version list contains an empty version")
    return validated


# ---------------------------------------------------------------------------
# npm
# ---------------------------------------------------------------------------


def npm_search_results(payload: Any) -> list[SearchResult]:
    data = parse_payload(NpmSearchResponse, payload, source="npm search")
    return validate_results(
        [
            {
                "name": obj.package.name,
                "description": obj.package.description,
                "version": obj.package.version,
            }
            for obj in data.objects
        ]
    )


def npm_versions(payload: Any) -> list[str]:
    """Version keys newest-first: upstream publish order, reversed."""
    data = parse_payload(NpmPackageDocument, payload, source="npm package")
    return validate_versions(list(reversed(data.versions.keys())))


# ---------------------------------------------------------------------------
# crates.io
# ---------------------------------------------------------------------------


def crates_search_results(payload: Any) -> list[SearchResult]:
    data = parse_payload(CratesSearchResponse, payload, source="crates.io search")
    return validate_results(
        [
            {"name": crate.name, "description": crate.description, "version": crate.max_version}
            for crate in data.crates
        ]
    )


def crates_versions(payload: Any) -> list[str]:
    # crates.io documents newest-first; kept as-is, never re-sorted.
    data = parse_payload(CrateDocument, payload, source="crates.io crate")
    return validate_versions([version.num for version in data.versions])


# ---------------------------------------------------------------------------
# zig.pm / GitHub
# ---------------------------------------------------------------------------


def zig_index(payload: Any) -> list[ZigPackage]:
    """Validate the index entry by entry; malformed entries are skipped."""
    if not isinstance(payload, list):
        raise ParseError(
            f"Unexpected zig.pm index response: expected a list, got {type(payload).__name__}"
        )

    packages = []
    for position, entry in enumerate(payload):
        try:
            packages.append(ZigPackage.model_validate(entry))
        except ValidationError as exc:
            log.info(
                "zig_index_entry_skipped",
                position=position,
                errors=exc.error_count(),
            )
    return packages


def zig_description(pkg: ZigPackage) -> str | None:
    """``zig.pm: <author>/<name> • <description>``, dropping whichever part is missing."""
    descriptor = f"{ZIG_REGISTRY_LABEL}: {pkg.author}/{pkg.name}" if pkg.author and pkg.name else ""
    parts = [part for part in (descriptor, pkg.description) if part]
    return ZIG_DESCRIPTION_SEPARATOR.join(parts) or None


def zig_search_result(pkg: ZigPackage) -> dict[str, Any]:
    return {
        "name": pkg.name,
        "description": zig_description(pkg),
        "version": LATEST_SENTINEL,
    }


def github_tag_names(payload: Any) -> list[str]:
    try:
        tags = _github_tags_adapter.validate_python(payload)
    except ValidationError as exc:
        raise ParseError(f"Unexpected GitHub tags response: {exc.error_count()} error(s)") from exc
    return [tag.name for tag in tags if tag.name]


def github_default_branch(payload: Any) -> str | None:
    return parse_payload(GitHubRepository, payload, source="GitHub repository").default_branch
