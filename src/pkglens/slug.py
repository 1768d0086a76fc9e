"""GitHub ``owner/repo`` slug parsing.

Pure string handling, no network access. Accepted inputs::

    owner/repo
    owner/repo.git/
    github.com/owner/repo
    https://github.com/owner/repo.git
    git+https://github.com/owner/repo
    git@github.com:owner/repo.git
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import urlsplit

_GITHUB_HOSTS = frozenset({"github.com", "www.github.com"})

_OWNER_RE = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?$")
_REPO_RE = re.compile(r"^[A-Za-z0-9._-]+$")
_SSH_RE = re.compile(r"^(?:ssh://)?git@github\.com[:/](?P<path>.+)$", re.IGNORECASE)


@dataclass(frozen=True)
class GitHubRepoSlug:
    owner: str
    repo: str

    def __str__(self) -> str:
        return f"{self.owner}/{self.repo}"


def _segments(path: str) -> list[str]:
    return [segment for segment in path.split("/") if segment]


def _github_url_segments(value: str) -> list[str] | None:
    """Path segments of a GitHub-hosted URL, or None for any other host."""
    ssh = _SSH_RE.match(value)
    if ssh:
        return _segments(ssh.group("path"))

    if value.startswith("git+"):
        value = value[len("git+") :]
    if "://" not in value:
        value = f"https://{value}"

    try:
        parts = urlsplit(value)
        host = parts.hostname
    except ValueError:
        return None
    if host is None or host.lower() not in _GITHUB_HOSTS:
        return None
    return _segments(parts.path)


def _build(owner: str, repo: str) -> GitHubRepoSlug | None:
    if repo.lower().endswith(".git"):
        repo = repo[: -len(".git")]
    if not _OWNER_RE.match(owner):
        return None
    if not _REPO_RE.match(repo) or repo in (".", ".."):
        return None
    return GitHubRepoSlug(owner=owner, repo=repo)


def _looks_like_url(value: str) -> bool:
    if "://" in value or _SSH_RE.match(value):
        return True
    first = value.split("/", 1)[0].lower()
    return first in _GITHUB_HOSTS


def parse_repo_slug(value: str | None) -> GitHubRepoSlug | None:
    """Parse a bare ``owner/repo`` or a GitHub URL into its two parts.

    Returns None unless the input resolves to exactly two non-empty path
    segments, either bare or under a GitHub host.
    """
    if not value:
        return None
    value = value.strip()
    if not value:
        return None

    if _looks_like_url(value):
        segments = _github_url_segments(value)
    else:
        segments = _segments(value)

    if segments is None or len(segments) != 2:
        return None
    return _build(segments[0], segments[1])


def to_repo_slug(url: str | None) -> str | None:
    """Extract ``owner/repo`` from a GitHub-hosted URL.

    Deeper paths (``/tree/main``, ``/issues``) are ignored. Returns None when
    the URL is empty or not hosted on GitHub.
    """
    if not url:
        return None
    url = url.strip()
    if not url or not _looks_like_url(url):
        return None

    segments = _github_url_segments(url)
    if segments is None or len(segments) < 2:
        return None
    slug = _build(segments[0], segments[1])
    return str(slug) if slug else None
