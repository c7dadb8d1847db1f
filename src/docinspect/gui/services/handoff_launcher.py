"""Dispatch "open document settings" requests to the owning application."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol, Sequence

from PySide6.QtCore import QProcess, QUrl
from PySide6.QtGui import QDesktopServices

from ...config import FILE_SCHEME
from ...models.types import HandoffRequest, ResourceReference
from ...providers.registry import ProviderRegistry

_LOGGER = logging.getLogger(__name__)

ProcessStarter = Callable[[str, Sequence[str]], bool]
UrlOpener = Callable[[ResourceReference], bool]


class HandoffLauncher(Protocol):
    """Fire-and-forget dispatch of a settings request to *package_name*."""

    def launch(self, package_name: Optional[str], reference: ResourceReference) -> None: ...


def _start_detached(program: str, arguments: Sequence[str]) -> bool:
    started = QProcess.startDetached(program, list(arguments))
    # PySide returns ``(ok, pid)`` for some overloads and a bare bool for others.
    if isinstance(started, tuple):
        return bool(started[0])
    return bool(started)


def _open_url(reference: ResourceReference) -> bool:
    path = reference.local_path()
    url = QUrl.fromLocalFile(str(path)) if path is not None else QUrl(str(reference))
    return QDesktopServices.openUrl(url)


class DesktopHandoffLauncher:
    """Start the settings command a provider declared in the registry.

    Handoff failures are reported through the log only; callers never see an
    exception for a missing handler or a command that fails to start.
    """

    def __init__(
        self,
        registry: ProviderRegistry,
        *,
        starter: ProcessStarter = _start_detached,
        url_opener: UrlOpener = _open_url,
    ) -> None:
        self._registry = registry
        self._starter = starter
        self._url_opener = url_opener
        self._last_request: Optional[HandoffRequest] = None

    @property
    def last_request(self) -> Optional[HandoffRequest]:
        """Return the most recently dispatched request."""

        return self._last_request

    def launch(self, package_name: Optional[str], reference: ResourceReference) -> None:
        if not package_name:
            _LOGGER.warning("No provider package owns %s; nothing to launch", reference.authority)
            return
        self.dispatch(HandoffRequest.for_settings(package_name, reference))

    def dispatch(self, request: HandoffRequest) -> None:
        self._last_request = request
        template = self._registry.settings_command(request.package)
        if template is None:
            if request.data.scheme == FILE_SCHEME:
                if not self._url_opener(request.data):
                    _LOGGER.warning("No application could open %s", request.data)
                return
            _LOGGER.warning(
                "No handler for %s in package %s", request.action, request.package
            )
            return

        try:
            command = [
                part.format(
                    uri=str(request.data),
                    authority=request.data.authority,
                    package=request.package,
                )
                for part in template
            ]
        except (KeyError, IndexError, ValueError):
            _LOGGER.warning("Malformed settings command for package %s", request.package)
            return
        program, arguments = command[0], command[1:]
        if self._starter(program, arguments):
            _LOGGER.info("Opened settings for %s via %s", request.data, request.package)
        else:
            _LOGGER.warning("Failed to start %s for package %s", program, request.package)


__all__ = ["DesktopHandoffLauncher", "HandoffLauncher", "ProcessStarter", "UrlOpener"]
