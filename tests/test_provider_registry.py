"""Tests for :mod:`docinspect.providers.registry`."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from docinspect.config import LOCAL_AUTHORITY, LOCAL_PACKAGE_NAME, PROVIDERS_FILE_ENV
from docinspect.errors import ProviderConfigInvalidError
from docinspect.providers.registry import ProviderInfo, ProviderRegistry


def _write(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_default_registry_knows_local_provider() -> None:
    registry = ProviderRegistry()

    assert registry.get_package_name(LOCAL_AUTHORITY) == LOCAL_PACKAGE_NAME
    assert LOCAL_AUTHORITY in registry
    assert len(registry) == 1
    assert registry.get_package_name("com.example.missing") is None


def test_from_file_loads_providers(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "providers.json",
        {
            "providers": [
                {
                    "authority": "com.example.docs",
                    "package": "com.example.owner",
                    "title": "Example Docs",
                    "settings_command": ["example-settings", "{uri}"],
                },
                {"authority": "com.example.plain", "package": "com.example.plain.owner"},
            ]
        },
    )

    registry = ProviderRegistry.from_file(path)

    assert registry.get_package_name("com.example.docs") == "com.example.owner"
    assert registry.get("com.example.docs").title == "Example Docs"
    assert registry.settings_command("com.example.owner") == ("example-settings", "{uri}")
    assert registry.settings_command("com.example.plain.owner") is None
    assert registry.supports_settings("com.example.docs")
    assert not registry.supports_settings("com.example.plain")
    assert {provider.authority for provider in registry} == {
        LOCAL_AUTHORITY,
        "com.example.docs",
        "com.example.plain",
    }


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"providers": [{"authority": "com.example.docs"}]},
        {"providers": [{"authority": "", "package": "com.example.owner"}]},
        {"providers": [], "unexpected": True},
    ],
)
def test_from_file_rejects_invalid_documents(tmp_path: Path, payload) -> None:
    path = _write(tmp_path / "providers.json", payload)

    with pytest.raises(ProviderConfigInvalidError):
        ProviderRegistry.from_file(path)


def test_from_file_rejects_missing_and_malformed_files(tmp_path: Path) -> None:
    with pytest.raises(ProviderConfigInvalidError):
        ProviderRegistry.from_file(tmp_path / "absent.json")

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(ProviderConfigInvalidError):
        ProviderRegistry.from_file(broken)


def test_from_environment(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv(PROVIDERS_FILE_ENV, raising=False)
    assert len(ProviderRegistry.from_environment()) == 1

    path = _write(
        tmp_path / "providers.json",
        {"providers": [{"authority": "com.example.docs", "package": "com.example.owner"}]},
    )
    monkeypatch.setenv(PROVIDERS_FILE_ENV, str(path))
    assert ProviderRegistry.from_environment().get_package_name("com.example.docs") == (
        "com.example.owner"
    )


def test_register_replaces_existing_authority() -> None:
    registry = ProviderRegistry([ProviderInfo("com.example.docs", "com.example.old")])
    registry.register(ProviderInfo("com.example.docs", "com.example.new"))

    assert registry.get_package_name("com.example.docs") == "com.example.new"
