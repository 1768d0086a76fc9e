from __future__ import annotations

from pkglens.adapters.base import RegistryAdapter
from pkglens.adapters.crates import CratesAdapter
from pkglens.adapters.npm import NpmAdapter
from pkglens.adapters.zig import ZigAdapter

__all__ = [
    "RegistryAdapter",
    "NpmAdapter",
    "CratesAdapter",
    "ZigAdapter",
]
