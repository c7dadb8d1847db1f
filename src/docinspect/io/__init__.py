"""Metadata sources."""

from .sources import DocumentSource, FileSystemSource, ProviderSource

__all__ = ["DocumentSource", "FileSystemSource", "ProviderSource"]
