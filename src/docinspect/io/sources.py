"""Document sources that turn a reference into a :class:`DocumentInfo`.

Sources run on worker threads. They must not touch Qt widgets and should
return ``None`` when the document cannot be found rather than raising.
"""

from __future__ import annotations

import mimetypes
import os
from dataclasses import replace
from datetime import datetime, timezone
from typing import Mapping, Optional, Protocol

from ..config import LOCAL_AUTHORITY
from ..models.types import DIRECTORY_MIME_TYPE, DocumentFlags, DocumentInfo, ResourceReference
from ..providers.registry import ProviderRegistry
from ..utils.hashutils import path_xxh3


class DocumentSource(Protocol):
    """Blocking metadata query for a single document."""

    def query(self, reference: ResourceReference) -> Optional[DocumentInfo]: ...


class FileSystemSource:
    """Describe documents stored on the local filesystem."""

    def query(self, reference: ResourceReference) -> Optional[DocumentInfo]:
        path = reference.local_path()
        if path is None:
            return None
        try:
            stat = path.stat()
        except (FileNotFoundError, NotADirectoryError):
            return None

        is_dir = path.is_dir()
        flags = DocumentFlags.NONE
        parent_writable = os.access(path.parent, os.W_OK)
        if os.access(path, os.W_OK):
            flags |= DocumentFlags.DIR_SUPPORTS_CREATE if is_dir else DocumentFlags.SUPPORTS_WRITE
        if parent_writable:
            flags |= DocumentFlags.SUPPORTS_DELETE | DocumentFlags.SUPPORTS_RENAME

        if is_dir:
            mime_type: Optional[str] = DIRECTORY_MIME_TYPE
            size: Optional[int] = None
        else:
            mime_type, _ = mimetypes.guess_type(path.name)
            size = stat.st_size
            if mime_type and mime_type.startswith("image/"):
                flags |= DocumentFlags.SUPPORTS_THUMBNAIL

        return DocumentInfo(
            reference=reference,
            authority=reference.authority or LOCAL_AUTHORITY,
            document_id=path_xxh3(path),
            display_name=path.name or str(path),
            mime_type=mime_type,
            size=size,
            last_modified=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
            flags=flags,
        )


class ProviderSource:
    """Route queries to the source registered for the reference's authority.

    Documents whose provider declares a settings command are reported with
    :attr:`DocumentFlags.SUPPORTS_SETTINGS` so the UI can offer the handoff.
    """

    def __init__(
        self,
        registry: ProviderRegistry,
        sources: Mapping[str, DocumentSource] | None = None,
    ) -> None:
        self._registry = registry
        self._sources: dict[str, DocumentSource] = {LOCAL_AUTHORITY: FileSystemSource()}
        if sources:
            self._sources.update(sources)

    def query(self, reference: ResourceReference) -> Optional[DocumentInfo]:
        source = self._sources.get(reference.authority)
        if source is None:
            return None
        info = source.query(reference)
        if info is None:
            return None
        if self._registry.supports_settings(reference.authority) and not info.supports_settings:
            return replace(info, flags=info.flags | DocumentFlags.SUPPORTS_SETTINGS)
        return info


__all__ = ["DocumentSource", "FileSystemSource", "ProviderSource"]
