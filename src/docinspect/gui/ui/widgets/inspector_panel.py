"""Container widget hosting the inspector header, details and handoff button."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QFrame, QPushButton, QVBoxLayout, QWidget

from ....config import INSPECTOR_MIN_WIDTH
from ....models.types import DocumentInfo
from .details_view import DetailsView
from .header_view import HeaderView


class InspectorPanel(QWidget):
    """Lay out the inspector views and expose the "Show in provider" action."""

    showInProviderRequested = Signal(object)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Info")
        self.setMinimumWidth(INSPECTOR_MIN_WIDTH)
        self._info: Optional[DocumentInfo] = None

        self.header_view = HeaderView(self)
        self.details_view = DetailsView(self)

        self.show_in_provider_button = QPushButton("Show in provider", self)
        self.show_in_provider_button.setEnabled(False)
        self.show_in_provider_button.clicked.connect(self._handle_show_in_provider)

        separator = QFrame(self)
        separator.setFrameShape(QFrame.HLine)
        separator.setFrameShadow(QFrame.Sunken)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)
        layout.addWidget(self.header_view)
        layout.addWidget(separator)
        layout.addWidget(self.details_view)
        layout.addStretch(1)
        layout.addWidget(self.show_in_provider_button)

    def accept(self, info: DocumentInfo) -> None:
        """Track the shown document so the handoff button reflects its capabilities."""

        self._info = info
        self.show_in_provider_button.setEnabled(info.supports_settings)

    def _handle_show_in_provider(self) -> None:
        if self._info is None:
            return
        self.showInProviderRequested.emit(self._info.reference)


__all__ = ["InspectorPanel"]
