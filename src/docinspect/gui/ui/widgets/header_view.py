"""Header of the inspector showing the document's identity."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget

from ....models.types import DocumentInfo


class HeaderView(QWidget):
    """Display the document title and type."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._info: Optional[DocumentInfo] = None

        self._title_label = QLabel(self)
        self._title_label.setTextInteractionFlags(Qt.TextSelectableByMouse)
        self._title_label.setWordWrap(True)
        title_font = QFont(self._title_label.font())
        title_font.setBold(True)
        if title_font.pointSizeF() > 0:
            title_font.setPointSizeF(title_font.pointSizeF() * 1.2)
        self._title_label.setFont(title_font)

        self._subtitle_label = QLabel(self)
        self._subtitle_label.setTextInteractionFlags(Qt.TextSelectableByMouse)
        self._subtitle_label.setWordWrap(True)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)
        layout.addWidget(self._title_label)
        layout.addWidget(self._subtitle_label)

    @property
    def info(self) -> Optional[DocumentInfo]:
        return self._info

    def title(self) -> str:
        return self._title_label.text()

    def subtitle(self) -> str:
        return self._subtitle_label.text()

    def accept(self, info: DocumentInfo) -> None:
        self._info = info
        self._title_label.setText(info.display_name)
        if info.is_directory:
            self._subtitle_label.setText("Folder")
        else:
            self._subtitle_label.setText(info.mime_type or "Unknown type")
        self.setToolTip(str(info.reference))


__all__ = ["HeaderView"]
