"""Custom exception hierarchy for docinspect."""

from __future__ import annotations


class DocInspectError(Exception):
    """Base class for all custom errors raised by docinspect."""


class InvalidArgumentError(DocInspectError, ValueError):
    """Raised when a required collaborator is missing at construction time."""


class InvalidReferenceError(DocInspectError, ValueError):
    """Raised when a document reference cannot be parsed."""


class ProviderConfigInvalidError(DocInspectError):
    """Raised when a provider registry document fails validation."""
