"""Background worker helpers for GUI tasks."""

from .document_loader import DocumentInfoJob, DocumentLoader, LoadCallback

__all__ = ["DocumentInfoJob", "DocumentLoader", "LoadCallback"]
