"""Schema validation helpers."""

from __future__ import annotations

import json
from typing import Any

from jsonschema import Draft202012Validator

from ..config import SCHEMA_DIR
from ..errors import ProviderConfigInvalidError

_PROVIDERS_VALIDATOR: Draft202012Validator | None = None


def _load_validator(name: str) -> Draft202012Validator:
    schema_path = SCHEMA_DIR / name
    schema = json.loads(schema_path.read_text(encoding="utf-8"))
    return Draft202012Validator(schema)


def validate_providers(document: dict[str, Any]) -> None:
    """Validate a provider registry and raise :class:`ProviderConfigInvalidError` on failure."""

    global _PROVIDERS_VALIDATOR
    if _PROVIDERS_VALIDATOR is None:
        _PROVIDERS_VALIDATOR = _load_validator("providers.schema.json")
    errors = sorted(
        _PROVIDERS_VALIDATOR.iter_errors(document),
        key=lambda err: [str(part) for part in err.path],
    )
    if errors:
        messages = "; ".join(error.message for error in errors)
        raise ProviderConfigInvalidError(messages)
