"""Unit tests for pkglens.selector."""

from __future__ import annotations

import pytest

from pkglens.config import RegistrySettings, Settings
from pkglens.selector import (
    RegistrySelector,
    bound_signal,
    get_active_registry,
    resolve_registry,
)


class TestResolveRegistry:
    @pytest.mark.parametrize("value", ["npm", "crates", "zig"])
    def test_known_values(self, value: str) -> None:
        assert resolve_registry(value) == value

    def test_normalises_case_and_whitespace(self) -> None:
        assert resolve_registry("  Crates ") == "crates"

    @pytest.mark.parametrize("value", [None, "", "pypi", "zig.pm"])
    def test_unrecognised_defaults_to_npm(self, value: str | None) -> None:
        assert resolve_registry(value) == "npm"


class TestRegistrySelector:
    def test_signal_read_on_every_call(self) -> None:
        values = iter(["zig", "crates", None])
        selector = RegistrySelector(lambda: next(values))

        assert selector.get_active_registry() == "zig"
        assert selector.get_active_registry() == "crates"
        assert selector.get_active_registry() == "npm"

    def test_get_active_registry_with_explicit_signal(self) -> None:
        assert get_active_registry(lambda: "crates") == "crates"


class TestSettingsSignal:
    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PKGLENS__REGISTRY__ACTIVE", "zig")
        assert get_active_registry() == "zig"

    def test_environment_change_is_picked_up(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PKGLENS__REGISTRY__ACTIVE", "crates")
        assert get_active_registry() == "crates"
        monkeypatch.setenv("PKGLENS__REGISTRY__ACTIVE", "zig")
        assert get_active_registry() == "zig"

    def test_missing_signal_defaults_to_npm(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("PKGLENS__REGISTRY__ACTIVE", raising=False)
        assert get_active_registry() == "npm"

    def test_unrecognised_signal_defaults_to_npm(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PKGLENS__REGISTRY__ACTIVE", "rubygems")
        assert get_active_registry() == "npm"

    def test_malformed_signal_defaults_to_npm(self, monkeypatch: pytest.MonkeyPatch) -> None:
        # Section name without the nested key cannot be parsed as a mapping
        monkeypatch.setenv("PKGLENS__REGISTRY", "zig")
        assert get_active_registry() == "npm"

    def test_unrelated_bad_setting_does_not_break_selection(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PKGLENS__LOGGING__LEVEL", "verbose")
        monkeypatch.setenv("PKGLENS__REGISTRY__ACTIVE", "zig")
        assert get_active_registry() == "zig"


class TestBoundSignal:
    def test_explicit_settings_value_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PKGLENS__REGISTRY__ACTIVE", "crates")
        settings = Settings(registry=RegistrySettings(active="zig"))
        assert get_active_registry(bound_signal(settings)) == "zig"

    def test_unset_value_reads_environment_per_call(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("PKGLENS__REGISTRY__ACTIVE", raising=False)
        signal = bound_signal(Settings())

        assert get_active_registry(signal) == "npm"
        monkeypatch.setenv("PKGLENS__REGISTRY__ACTIVE", "crates")
        assert get_active_registry(signal) == "crates"
