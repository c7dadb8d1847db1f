"""Default configuration values for docinspect."""

from __future__ import annotations

from pathlib import Path
from typing import Final

# ---------------------------------------------------------------------------
# Provider handoff
# ---------------------------------------------------------------------------

ACTION_DOCUMENT_SETTINGS: Final[str] = "android.provider.action.DOCUMENT_SETTINGS"
CATEGORY_DEFAULT: Final[str] = "android.intent.category.DEFAULT"

LOCAL_AUTHORITY: Final[str] = "local"
LOCAL_PACKAGE_NAME: Final[str] = "docinspect.local"
LOCAL_PROVIDER_TITLE: Final[str] = "This computer"

CONTENT_SCHEME: Final[str] = "content"
FILE_SCHEME: Final[str] = "file"
DOCUMENT_PATH_SEGMENT: Final[str] = "document"

# ---------------------------------------------------------------------------
# Files and environment
# ---------------------------------------------------------------------------

SCHEMA_DIR: Final[Path] = Path(__file__).resolve().parent / "schemas"
PROVIDERS_FILE_ENV: Final[str] = "DOCINSPECT_PROVIDERS"
LOG_LEVEL_ENV: Final[str] = "DOCINSPECT_LOG_LEVEL"

# ---------------------------------------------------------------------------
# Presentation
# ---------------------------------------------------------------------------

SIZE_UNITS: Final[tuple[str, ...]] = ("B", "KB", "MB", "GB", "TB")
INSPECTOR_MIN_WIDTH: Final[int] = 320
