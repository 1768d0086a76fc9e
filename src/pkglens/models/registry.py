from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

RegistryName = Literal["npm", "crates", "zig"]

REGISTRY_NAMES: tuple[RegistryName, ...] = ("npm", "crates", "zig")

# Version reported for backends without a discrete "latest" release
LATEST_SENTINEL = "latest"

# Upper bound on results returned by a single search call
SEARCH_RESULT_CAP = 10


class SearchResult(BaseModel):
    """Single package returned by a registry search, regardless of backend."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    description: str | None = None
    version: str = Field(min_length=1)
