"""Helpers for JSON input."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..errors import ProviderConfigInvalidError


def read_json(path: Path) -> dict[str, Any]:
    """Read JSON from *path* and return a dictionary."""

    try:
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
    except FileNotFoundError as exc:
        raise ProviderConfigInvalidError(f"JSON file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ProviderConfigInvalidError(f"Invalid JSON data in {path}") from exc
