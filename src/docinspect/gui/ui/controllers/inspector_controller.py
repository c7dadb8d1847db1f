"""Controller that coordinates retrieving document information and sending it to the views."""

from __future__ import annotations

import logging
import threading
from functools import partial
from typing import TYPE_CHECKING, Callable, Optional, Protocol

from ....errors import InvalidArgumentError
from ....models.types import (
    DocumentInfo,
    InspectorState,
    LoadOutcome,
    LoadToken,
    ResourceReference,
)
from ....providers.registry import ProviderRegistry, ProvidersAccess
from ...services.handoff_launcher import HandoffLauncher

if TYPE_CHECKING:  # pragma: no cover - only for type checking
    from ..widgets.inspector_panel import InspectorPanel

_LOGGER = logging.getLogger(__name__)


class Loader(Protocol):
    """Asynchronous source of document metadata."""

    def load(
        self,
        reference: ResourceReference,
        callback: Callable[[Optional[DocumentInfo]], None],
    ) -> None:
        """Start loading *reference*; *callback* receives the result, which may be ``None``."""

    def reset(self) -> None:
        """Cancel outstanding loads and release their bookkeeping."""


class ViewSink(Protocol):
    """Passive consumer of loaded document information."""

    def accept(self, info: DocumentInfo) -> None: ...


class InspectorController:
    """Own the load lifecycle for one inspection session.

    At most one load is outstanding. Every load is tagged with a
    :class:`LoadToken`; completions carrying a token other than the current one
    are dropped, so a superseded or reset load can never reach the views.
    Sinks are notified in construction order, header before details.
    """

    def __init__(
        self,
        context: HandoffLauncher,
        loader: Loader,
        providers: ProvidersAccess,
        header: ViewSink,
        details: ViewSink,
        *extra_sinks: ViewSink,
    ) -> None:
        _require(context, "context")
        _require(loader, "loader")
        _require(providers, "providers")
        _require(header, "header")
        _require(details, "details")
        for index, sink in enumerate(extra_sinks):
            _require(sink, f"extra_sinks[{index}]")

        self._context = context
        self._loader = loader
        self._providers = providers
        self._sinks: tuple[ViewSink, ...] = (header, details, *extra_sinks)
        self._lock = threading.RLock()
        self._generation = 0
        self._token: Optional[LoadToken] = None

    @classmethod
    def from_panel(
        cls,
        context: HandoffLauncher,
        loader: Loader,
        panel: "InspectorPanel",
        providers: Optional[ProvidersAccess] = None,
    ) -> "InspectorController":
        """Build a controller that feeds the header and details views of *panel*."""

        _require(panel, "panel")
        return cls(
            context,
            loader,
            providers if providers is not None else ProviderRegistry.from_environment(),
            panel.header_view,
            panel.details_view,
            panel,
        )

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    @property
    def context(self) -> HandoffLauncher:
        return self._context

    @property
    def loader(self) -> Loader:
        return self._loader

    @property
    def providers(self) -> ProvidersAccess:
        return self._providers

    @property
    def sinks(self) -> tuple[ViewSink, ...]:
        return self._sinks

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def current_token(self) -> Optional[LoadToken]:
        return self._token

    @property
    def state(self) -> InspectorState:
        return InspectorState.IDLE if self._token is None else InspectorState.LOADING

    # ------------------------------------------------------------------
    # Load lifecycle
    # ------------------------------------------------------------------
    def reset(self) -> None:
        """Cancel the outstanding load, if any, and return to the idle state."""

        with self._lock:
            self._loader.reset()
            if self._token is not None:
                _LOGGER.debug("Reset discarded load of %s", self._token.reference)
                self._generation += 1
                self._token = None

    def load_info(self, reference: ResourceReference) -> None:
        """Start loading *reference*, superseding any load still in flight."""

        with self._lock:
            if self._token is not None:
                self.reset()
            self._generation += 1
            token = LoadToken(self._generation, reference)
            self._token = token
            _LOGGER.debug("Loading %s (generation %d)", reference, token.generation)
            self._loader.load(reference, partial(self._handle_result, token))

    def _handle_result(self, token: LoadToken, info: Optional[DocumentInfo]) -> LoadOutcome:
        with self._lock:
            if token != self._token:
                _LOGGER.debug("Dropped stale result for %s", token.reference)
                return LoadOutcome.SUPERSEDED
            self._token = None
            if info is None:
                _LOGGER.debug("No document information for %s", token.reference)
                return LoadOutcome.ABSENT
            self._update_view(info)
            return LoadOutcome.DELIVERED

    def _update_view(self, info: DocumentInfo) -> None:
        for sink in self._sinks:
            sink.accept(info)

    # ------------------------------------------------------------------
    # Provider handoff
    # ------------------------------------------------------------------
    def show_in_provider(self, reference: ResourceReference) -> None:
        """Ask the provider that owns *reference* to show its settings for it.

        The caller is expected to check :attr:`DocumentInfo.supports_settings`
        first; the request is dispatched regardless.
        """

        package_name = self._providers.get_package_name(reference.authority)
        self._context.launch(package_name, reference)


def _require(value: object, name: str) -> None:
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None")


__all__ = ["InspectorController", "Loader", "ViewSink"]
