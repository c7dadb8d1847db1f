"""Data models used by docinspect."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum, IntFlag
from pathlib import Path
from typing import Optional
from urllib.parse import quote, unquote, urlsplit

from ..config import (
    ACTION_DOCUMENT_SETTINGS,
    CATEGORY_DEFAULT,
    CONTENT_SCHEME,
    DOCUMENT_PATH_SEGMENT,
    FILE_SCHEME,
    LOCAL_AUTHORITY,
)
from ..errors import InvalidReferenceError


@dataclass(frozen=True, slots=True)
class ResourceReference:
    """Opaque, value-equal identifier of the document being inspected."""

    scheme: str
    authority: str
    path: str = ""

    @classmethod
    def parse(cls, text: str) -> "ResourceReference":
        """Parse ``scheme://authority/path`` into a reference."""

        value = (text or "").strip()
        if not value:
            raise InvalidReferenceError("Document reference is empty")
        parts = urlsplit(value)
        if not parts.scheme:
            raise InvalidReferenceError(f"Document reference has no scheme: {text!r}")
        authority = parts.netloc
        if parts.scheme == FILE_SCHEME and not authority:
            authority = LOCAL_AUTHORITY
        return cls(parts.scheme, authority, parts.path)

    @classmethod
    def for_document(cls, authority: str, document_id: str) -> "ResourceReference":
        """Return the provider document reference for *document_id*."""

        encoded = quote(document_id, safe="")
        return cls(CONTENT_SCHEME, authority, f"/{DOCUMENT_PATH_SEGMENT}/{encoded}")

    @classmethod
    def from_path(cls, path: Path) -> "ResourceReference":
        """Return a ``file`` reference for the local *path*."""

        return cls(FILE_SCHEME, LOCAL_AUTHORITY, quote(path.absolute().as_posix()))

    @property
    def document_id(self) -> Optional[str]:
        """Return the provider document id when the path has the document form."""

        segments = [segment for segment in self.path.split("/") if segment]
        if len(segments) >= 2 and segments[-2] == DOCUMENT_PATH_SEGMENT:
            return unquote(segments[-1])
        return None

    def local_path(self) -> Optional[Path]:
        """Return the filesystem path of a ``file`` reference, if any."""

        if self.scheme != FILE_SCHEME or not self.path:
            return None
        return Path(unquote(self.path))

    def __str__(self) -> str:
        return f"{self.scheme}://{self.authority}{self.path}"


class DocumentFlags(IntFlag):
    """Capability flags a provider reports for a document."""

    NONE = 0
    SUPPORTS_THUMBNAIL = 1
    SUPPORTS_WRITE = 1 << 1
    SUPPORTS_DELETE = 1 << 2
    DIR_SUPPORTS_CREATE = 1 << 3
    SUPPORTS_RENAME = 1 << 6
    VIRTUAL_DOCUMENT = 1 << 9
    SUPPORTS_SETTINGS = 1 << 11


DIRECTORY_MIME_TYPE = "vnd.android.document/directory"


@dataclass(frozen=True, slots=True)
class DocumentInfo:
    """Immutable description of a single document."""

    reference: ResourceReference
    authority: str
    document_id: str
    display_name: str
    mime_type: Optional[str] = None
    size: Optional[int] = None
    last_modified: Optional[datetime] = None
    flags: DocumentFlags = DocumentFlags.NONE
    summary: Optional[str] = None

    @property
    def is_directory(self) -> bool:
        return self.mime_type == DIRECTORY_MIME_TYPE

    @property
    def supports_settings(self) -> bool:
        return bool(self.flags & DocumentFlags.SUPPORTS_SETTINGS)

    @property
    def is_writable(self) -> bool:
        return bool(self.flags & DocumentFlags.SUPPORTS_WRITE)

    @property
    def is_deletable(self) -> bool:
        return bool(self.flags & DocumentFlags.SUPPORTS_DELETE)


@dataclass(frozen=True, slots=True)
class LoadToken:
    """Identity of one in-flight load issued by an inspector controller."""

    generation: int
    reference: ResourceReference


class LoadOutcome(Enum):
    """What happened to a loader completion."""

    DELIVERED = "delivered"
    ABSENT = "absent"
    SUPERSEDED = "superseded"


class InspectorState(Enum):
    IDLE = "idle"
    LOADING = "loading"


@dataclass(frozen=True, slots=True)
class HandoffRequest:
    """One-way request asking *package* to show its settings for *data*."""

    action: str
    package: str
    category: str
    data: ResourceReference

    @classmethod
    def for_settings(cls, package: str, reference: ResourceReference) -> "HandoffRequest":
        return cls(ACTION_DOCUMENT_SETTINGS, package, CATEGORY_DEFAULT, reference)
