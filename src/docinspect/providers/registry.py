"""Registry mapping document authorities to the applications that own them."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional, Protocol

from ..config import LOCAL_AUTHORITY, LOCAL_PACKAGE_NAME, LOCAL_PROVIDER_TITLE, PROVIDERS_FILE_ENV
from ..schemas import validate_providers
from ..utils.jsonio import read_json
from ..utils.logging import get_logger

LOGGER = get_logger(__name__)


class ProvidersAccess(Protocol):
    """Resolve the package that owns an authority."""

    def get_package_name(self, authority: str) -> Optional[str]: ...


@dataclass(frozen=True, slots=True)
class ProviderInfo:
    authority: str
    package_name: str
    title: str = ""
    settings_command: Optional[tuple[str, ...]] = None


LOCAL_PROVIDER = ProviderInfo(LOCAL_AUTHORITY, LOCAL_PACKAGE_NAME, LOCAL_PROVIDER_TITLE)


class ProviderRegistry:
    """In-memory provider table keyed by authority.

    The built-in ``local`` provider is always present so filesystem documents
    resolve to an owner even when no registry file is configured.
    """

    def __init__(self, providers: Iterable[ProviderInfo] = ()) -> None:
        self._by_authority: Dict[str, ProviderInfo] = {LOCAL_AUTHORITY: LOCAL_PROVIDER}
        for provider in providers:
            self.register(provider)

    @classmethod
    def from_file(cls, path: Path) -> "ProviderRegistry":
        """Build a registry from the JSON document stored at *path*."""

        document = read_json(path)
        validate_providers(document)
        providers = []
        for entry in document.get("providers", []):
            command = entry.get("settings_command")
            providers.append(
                ProviderInfo(
                    authority=entry["authority"],
                    package_name=entry["package"],
                    title=entry.get("title", ""),
                    settings_command=tuple(command) if command else None,
                )
            )
        LOGGER.debug("Loaded %d providers from %s", len(providers), path)
        return cls(providers)

    @classmethod
    def from_environment(cls) -> "ProviderRegistry":
        """Load the registry named by ``DOCINSPECT_PROVIDERS`` or return the default."""

        configured = os.environ.get(PROVIDERS_FILE_ENV)
        if not configured:
            return cls()
        return cls.from_file(Path(configured).expanduser())

    def register(self, provider: ProviderInfo) -> None:
        """Add *provider*, replacing any provider for the same authority."""

        self._by_authority[provider.authority] = provider

    def get(self, authority: str) -> Optional[ProviderInfo]:
        return self._by_authority.get(authority)

    def get_package_name(self, authority: str) -> Optional[str]:
        provider = self._by_authority.get(authority)
        return provider.package_name if provider else None

    def settings_command(self, package_name: str) -> Optional[tuple[str, ...]]:
        """Return the settings command template declared by *package_name*."""

        for provider in self._by_authority.values():
            if provider.package_name == package_name and provider.settings_command:
                return provider.settings_command
        return None

    def supports_settings(self, authority: str) -> bool:
        provider = self._by_authority.get(authority)
        return bool(provider and provider.settings_command)

    def __iter__(self) -> Iterator[ProviderInfo]:
        return iter(list(self._by_authority.values()))

    def __len__(self) -> int:
        return len(self._by_authority)

    def __contains__(self, authority: object) -> bool:
        return authority in self._by_authority
