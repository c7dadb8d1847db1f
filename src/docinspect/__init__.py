"""Document inspector: load a document's metadata and hand off to its provider."""

from __future__ import annotations

__version__ = "0.1.0"
