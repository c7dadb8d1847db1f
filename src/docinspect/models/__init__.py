"""Data models for docinspect."""

from .types import (
    DIRECTORY_MIME_TYPE,
    DocumentFlags,
    DocumentInfo,
    HandoffRequest,
    InspectorState,
    LoadOutcome,
    LoadToken,
    ResourceReference,
)

__all__ = [
    "DIRECTORY_MIME_TYPE",
    "DocumentFlags",
    "DocumentInfo",
    "HandoffRequest",
    "InspectorState",
    "LoadOutcome",
    "LoadToken",
    "ResourceReference",
]
