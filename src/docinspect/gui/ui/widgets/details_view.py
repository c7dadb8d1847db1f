"""Table of document attributes shown below the inspector header."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Tuple

from dateutil.tz import gettz
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFormLayout, QLabel, QWidget

from ....config import SIZE_UNITS
from ....models.types import DocumentFlags, DocumentInfo

_FLAG_LABELS: Tuple[Tuple[DocumentFlags, str], ...] = (
    (DocumentFlags.SUPPORTS_WRITE, "Writable"),
    (DocumentFlags.SUPPORTS_DELETE, "Deletable"),
    (DocumentFlags.SUPPORTS_RENAME, "Renamable"),
    (DocumentFlags.DIR_SUPPORTS_CREATE, "Accepts new files"),
    (DocumentFlags.SUPPORTS_THUMBNAIL, "Thumbnail"),
    (DocumentFlags.VIRTUAL_DOCUMENT, "Virtual"),
    (DocumentFlags.SUPPORTS_SETTINGS, "Provider settings"),
)


def format_size(size: Optional[int]) -> str:
    """Return *size* in bytes as a short human readable string."""

    if size is None:
        return "-"
    value = float(size)
    for unit in SIZE_UNITS:
        if value < 1024 or unit == SIZE_UNITS[-1]:
            if unit == SIZE_UNITS[0]:
                return f"{int(value)} {unit}"
            return f"{value:.1f} {unit}"
        value /= 1024
    return f"{size} B"  # pragma: no cover - loop always returns


def format_timestamp(value: Optional[datetime]) -> str:
    """Render *value* in the local timezone."""

    if value is None:
        return "-"
    local_tz = gettz()
    if value.tzinfo is not None and local_tz is not None:
        value = value.astimezone(local_tz)
    return value.strftime("%Y-%m-%d %H:%M")


def format_flags(flags: DocumentFlags) -> str:
    labels = [label for flag, label in _FLAG_LABELS if flags & flag]
    return ", ".join(labels) if labels else "None"


class DetailsView(QWidget):
    """Show the size, date, type and capabilities of a document."""

    FIELDS = ("Size", "Modified", "Type", "Provider", "Capabilities", "Summary")

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._info: Optional[DocumentInfo] = None
        self._values: dict[str, QLabel] = {}

        layout = QFormLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setLabelAlignment(Qt.AlignRight)
        for field in self.FIELDS:
            value_label = QLabel(self)
            value_label.setTextInteractionFlags(Qt.TextSelectableByMouse)
            value_label.setWordWrap(True)
            self._values[field] = value_label
            layout.addRow(f"{field}:", value_label)

    @property
    def info(self) -> Optional[DocumentInfo]:
        return self._info

    def value(self, field: str) -> str:
        return self._values[field].text()

    def rows(self) -> List[Tuple[str, str]]:
        return [(field, self._values[field].text()) for field in self.FIELDS]

    def accept(self, info: DocumentInfo) -> None:
        self._info = info
        self._values["Size"].setText(format_size(info.size))
        self._values["Modified"].setText(format_timestamp(info.last_modified))
        self._values["Type"].setText(info.mime_type or "Unknown")
        self._values["Provider"].setText(info.authority)
        self._values["Capabilities"].setText(format_flags(info.flags))
        self._values["Summary"].setText(info.summary or "")


__all__ = ["DetailsView", "format_flags", "format_size", "format_timestamp"]
