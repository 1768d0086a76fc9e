from __future__ import annotations

from pydantic import BaseModel


class ZigLinks(BaseModel):
    github: str | None = None


class ZigPackage(BaseModel):
    """Single entry of the zig.pm package index.

    Only the zig adapter and its index cache handle these; they are reconciled
    into ``SearchResult`` before leaving the adapter.
    """

    author: str | None = None
    name: str | None = None
    description: str | None = None
    tags: list[str] | None = None
    git: str | None = None
    links: ZigLinks | None = None
