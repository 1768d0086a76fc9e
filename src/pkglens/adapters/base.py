"""Port: the uniform contract every registry backend implements."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pkglens.models.registry import RegistryName, SearchResult


@runtime_checkable
class RegistryAdapter(Protocol):
    """Search and version listing for one upstream registry."""

    name: RegistryName

    async def search(self, query: str) -> list[SearchResult]:
        """Return at most 10 matches for ``query`` in backend-native order."""
        ...

    async def list_versions(self, package_name: str) -> list[str]:
        """Return the package's versions, newest first by convention."""
        ...
