"""Hashing utilities."""

from __future__ import annotations

from pathlib import Path

import xxhash


def path_xxh3(path: Path) -> str:
    """Return the XXH3 128-bit hash of the absolute form of *path*.

    The digest is used as a stable document id for filesystem documents; it
    depends on the location only, never on the file contents.
    """

    hasher = xxhash.xxh3_128()
    hasher.update(str(path.absolute()).encode("utf-8"))
    return hasher.hexdigest()
