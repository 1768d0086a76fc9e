"""zig.pm packages, versioned by their GitHub tags.

zig.pm exposes neither a search endpoint nor version history, so search
runs over the in-memory index (``ZigIndexCache``) and versions come from
the GitHub repository the package points at.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from pkglens import reconcile
from pkglens.errors import FetchError, InvalidInputError, ParseError
from pkglens.fetcher import path_segment
from pkglens.models.registry import SEARCH_RESULT_CAP, RegistryName
from pkglens.slug import parse_repo_slug, to_repo_slug

if TYPE_CHECKING:
    from pkglens.config import UpstreamSettings
    from pkglens.fetcher import Fetcher
    from pkglens.models.registry import SearchResult
    from pkglens.models.zig import ZigPackage
    from pkglens.zig_index import ZigIndexCache

log = structlog.get_logger()

FALLBACK_BRANCH = "main"


def package_repo_slug(pkg: ZigPackage) -> str | None:
    """``owner/repo`` of the package's GitHub repository, from ``git`` or ``links.github``."""
    git_url = pkg.git or (pkg.links.github if pkg.links else None) or ""
    return to_repo_slug(git_url)


def package_haystack(pkg: ZigPackage, repo_slug: str) -> str:
    tags = " ".join(pkg.tags or [])
    fields = [pkg.name, pkg.author, pkg.description, repo_slug, tags]
    return " ".join(field for field in fields if field).lower()


class ZigAdapter:
    name: RegistryName = "zig"

    def __init__(
        self,
        fetcher: Fetcher,
        index: ZigIndexCache,
        settings: UpstreamSettings,
    ) -> None:
        self._fetcher = fetcher
        self._index = index
        self._github_url = settings.github_api_url.rstrip("/")
        self._tags_limit = settings.github_tags_limit
        self._limit = min(settings.search_limit, SEARCH_RESULT_CAP)

    async def search(self, query: str) -> list[SearchResult]:
        """Case-insensitive substring match over the index, in index order.

        Packages without a resolvable GitHub repository are skipped since
        their versions could not be listed. An empty query matches everything.
        """
        packages = await self._index.get_index()
        needle = query.strip().lower()

        matches = []
        for pkg in packages:
            repo_slug = package_repo_slug(pkg)
            if not repo_slug or not pkg.name:
                continue
            if needle and needle not in package_haystack(pkg, repo_slug):
                continue
            matches.append(reconcile.zig_search_result(pkg))
            if len(matches) >= self._limit:
                break

        log.debug("registry_search", registry=self.name, query=query, results=len(matches))
        return reconcile.validate_results(matches)

    async def list_versions(self, package_name: str) -> list[str]:
        """Tag names of the ``owner/repo`` GitHub repository, newest first.

        A repository without tags reports its default branch instead, or
        ``main`` when the repository metadata cannot be fetched either.
        """
        repo = parse_repo_slug(package_name)
        if repo is None:
            raise InvalidInputError(
                f"Invalid Zig package name {package_name!r}: expected a GitHub 'owner/repo' slug"
            )

        repo_url = f"{self._github_url}/repos/{path_segment(repo.owner)}/{path_segment(repo.repo)}"
        payload = await self._fetcher.get_json(
            f"{repo_url}/tags", params={"per_page": self._tags_limit}
        )
        tag_names = reconcile.github_tag_names(payload)
        if tag_names:
            return reconcile.validate_versions(tag_names)

        try:
            branch = reconcile.github_default_branch(await self._fetcher.get_json(repo_url))
        except (FetchError, ParseError):
            log.info("zig_default_branch_fallback", repo=str(repo), branch=FALLBACK_BRANCH)
            return [FALLBACK_BRANCH]
        return [branch or FALLBACK_BRANCH]
