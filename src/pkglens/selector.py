"""Active registry resolution.

The active registry is one process-wide selection read from an external
signal on every call. The signal is a zero-argument callable so the core
does not depend on where the selection lives (environment, config file,
a UI toggle in the host application).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, cast

import structlog
from pydantic import ValidationError
from pydantic_settings import SettingsError

from pkglens.config import SelectionSettings
from pkglens.models.registry import REGISTRY_NAMES, RegistryName

if TYPE_CHECKING:
    from pkglens.config import Settings

log = structlog.get_logger()

RegistrySignal = Callable[[], str | None]

DEFAULT_REGISTRY: RegistryName = "npm"


def settings_signal() -> str | None:
    """Read ``registry.active`` from the environment and YAML file.

    Unreadable configuration counts as no selection.
    """
    try:
        return SelectionSettings().registry.active
    except (SettingsError, ValidationError):
        log.warning("registry_signal_unreadable", exc_info=True)
        return None


def bound_signal(settings: Settings) -> RegistrySignal:
    """Signal that prefers ``settings.registry.active`` when it is set.

    Without an explicit value the external configuration is read per call.
    """

    def signal() -> str | None:
        if settings.registry.active is not None:
            return settings.registry.active
        return settings_signal()

    return signal


def resolve_registry(value: str | None) -> RegistryName:
    """Map a raw selection value onto a known registry, defaulting to npm."""
    if value is None:
        return DEFAULT_REGISTRY
    normalized = value.strip().lower()
    if normalized in REGISTRY_NAMES:
        return cast(RegistryName, normalized)
    return DEFAULT_REGISTRY


class RegistrySelector:
    def __init__(self, signal: RegistrySignal = settings_signal) -> None:
        self._signal = signal

    def get_active_registry(self) -> RegistryName:
        return resolve_registry(self._signal())


def get_active_registry(signal: RegistrySignal = settings_signal) -> RegistryName:
    return RegistrySelector(signal).get_active_registry()
