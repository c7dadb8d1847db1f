"""Asynchronous document metadata loading."""

from __future__ import annotations

import itertools
import logging
import threading
from typing import Callable, Dict, Optional

from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal, Slot

from ....io.sources import DocumentSource
from ....models.types import DocumentInfo, ResourceReference

_LOGGER = logging.getLogger(__name__)

LoadCallback = Callable[[Optional[DocumentInfo]], None]


class DocumentInfoJob(QRunnable):
    """Background task that queries a :class:`DocumentSource` once."""

    def __init__(
        self,
        loader: "DocumentLoader",
        loader_id: int,
        reference: ResourceReference,
        source: DocumentSource,
    ) -> None:
        super().__init__()
        self._loader = loader
        self._loader_id = loader_id
        self._reference = reference
        self._source = source
        self._cancelled = threading.Event()

    def cancel(self) -> None:
        """Skip the query if it has not started yet."""

        self._cancelled.set()

    def run(self) -> None:  # type: ignore[override]
        if self._cancelled.is_set():
            return
        try:
            info = self._source.query(self._reference)
        except Exception:
            _LOGGER.warning("Failed to load metadata for %s", self._reference, exc_info=True)
            info = None
        if self._cancelled.is_set():
            return
        try:
            self._loader._delivered.emit(self._loader_id, info)
        except RuntimeError:  # pragma: no cover - race with QObject deletion
            pass


class DocumentLoader(QObject):
    """Run metadata queries on a thread pool and report back on the owner thread.

    Completion callbacks are invoked through a queued signal, so they always
    run on the thread the loader lives on. Each callback fires at most once;
    :meth:`reset` forgets every outstanding callback.
    """

    _delivered = Signal(int, object)

    def __init__(
        self,
        source: DocumentSource,
        *,
        pool: Optional[QThreadPool] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._source = source
        self._pool = pool if pool is not None else QThreadPool.globalInstance()
        self._ids = itertools.count(1)
        self._callbacks: Dict[int, LoadCallback] = {}
        self._jobs: Dict[int, DocumentInfoJob] = {}
        self._delivered.connect(self._handle_delivered)

    def load(self, reference: ResourceReference, callback: LoadCallback) -> None:
        """Start loading metadata for *reference* and call *callback* with the result."""

        loader_id = next(self._ids)
        job = DocumentInfoJob(self, loader_id, reference, self._source)
        self._callbacks[loader_id] = callback
        self._jobs[loader_id] = job
        _LOGGER.debug("Starting metadata load %d for %s", loader_id, reference)
        self._pool.start(job)

    def reset(self) -> None:
        """Cancel outstanding loads and drop their callbacks."""

        for job in self._jobs.values():
            job.cancel()
        if self._jobs:
            _LOGGER.debug("Discarded %d pending metadata loads", len(self._jobs))
        self._jobs.clear()
        self._callbacks.clear()

    def pending_count(self) -> int:
        return len(self._callbacks)

    @Slot(int, object)
    def _handle_delivered(self, loader_id: int, info: object) -> None:
        self._jobs.pop(loader_id, None)
        callback = self._callbacks.pop(loader_id, None)
        if callback is None:
            return
        callback(info if isinstance(info, DocumentInfo) else None)


__all__ = ["DocumentInfoJob", "DocumentLoader", "LoadCallback"]
