"""Tests for the inspector header, details and panel widgets."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

pytest.importorskip("PySide6", reason="PySide6 is required for GUI tests", exc_type=ImportError)
pytest.importorskip("PySide6.QtWidgets", reason="Qt widgets not available", exc_type=ImportError)

from docinspect.gui.ui.controllers.inspector_controller import InspectorController
from docinspect.gui.ui.widgets.details_view import (
    DetailsView,
    format_flags,
    format_size,
    format_timestamp,
)
from docinspect.gui.ui.widgets.header_view import HeaderView
from docinspect.gui.ui.widgets.inspector_panel import InspectorPanel
from docinspect.models.types import (
    DIRECTORY_MIME_TYPE,
    DocumentFlags,
    DocumentInfo,
    ResourceReference,
)
from docinspect.providers.registry import ProviderRegistry


def _info(**overrides) -> DocumentInfo:
    values = dict(
        reference=ResourceReference.for_document("com.example.docs", "7"),
        authority="com.example.docs",
        document_id="7",
        display_name="Quarterly.pdf",
        mime_type="application/pdf",
        size=3 * 1024 * 1024,
        last_modified=datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc),
        flags=DocumentFlags.SUPPORTS_WRITE | DocumentFlags.SUPPORTS_SETTINGS,
        summary="Shared with finance",
    )
    values.update(overrides)
    return DocumentInfo(**values)


@pytest.mark.parametrize(
    "size,expected",
    [(None, "-"), (0, "0 B"), (512, "512 B"), (2048, "2.0 KB"), (3 * 1024**3, "3.0 GB")],
)
def test_format_size(size, expected) -> None:
    assert format_size(size) == expected


def test_format_timestamp_handles_missing_and_naive_values() -> None:
    assert format_timestamp(None) == "-"
    assert format_timestamp(datetime(2024, 5, 1, 9, 5)) == "2024-05-01 09:05"


def test_format_flags() -> None:
    assert format_flags(DocumentFlags.NONE) == "None"
    assert format_flags(DocumentFlags.SUPPORTS_WRITE | DocumentFlags.SUPPORTS_SETTINGS) == (
        "Writable, Provider settings"
    )


def test_header_view_shows_identity(qapp) -> None:
    view = HeaderView()
    info = _info()

    view.accept(info)

    assert view.info is info
    assert view.title() == "Quarterly.pdf"
    assert view.subtitle() == "application/pdf"


def test_header_view_labels_folders(qapp) -> None:
    view = HeaderView()
    view.accept(_info(display_name="Reports", mime_type=DIRECTORY_MIME_TYPE, size=None))

    assert view.subtitle() == "Folder"


def test_details_view_shows_attributes(qapp) -> None:
    view = DetailsView()
    info = _info()

    view.accept(info)

    assert view.info is info
    assert view.value("Size") == "3.0 MB"
    assert view.value("Type") == "application/pdf"
    assert view.value("Provider") == "com.example.docs"
    assert view.value("Capabilities") == "Writable, Provider settings"
    assert view.value("Summary") == "Shared with finance"
    assert view.value("Modified") == format_timestamp(info.last_modified)
    assert [field for field, _ in view.rows()] == list(DetailsView.FIELDS)


def test_panel_enables_handoff_for_supported_documents(qapp) -> None:
    panel = InspectorPanel()
    requested: list = []
    panel.showInProviderRequested.connect(requested.append)

    assert not panel.show_in_provider_button.isEnabled()
    panel.show_in_provider_button.click()
    assert requested == []

    info = _info()
    panel.accept(info)
    assert panel.show_in_provider_button.isEnabled()
    panel.show_in_provider_button.click()
    assert requested == [info.reference]

    panel.accept(_info(flags=DocumentFlags.NONE))
    assert not panel.show_in_provider_button.isEnabled()


def test_controller_from_panel_feeds_views(qapp, mocker) -> None:
    panel = InspectorPanel()
    info = _info()

    class _ImmediateLoader:
        def load(self, reference, callback) -> None:
            callback(info)

        def reset(self) -> None:
            pass

    launcher = mocker.Mock()
    controller = InspectorController.from_panel(
        launcher, _ImmediateLoader(), panel, providers=ProviderRegistry()
    )
    panel.showInProviderRequested.connect(controller.show_in_provider)

    controller.load_info(info.reference)
    panel.show_in_provider_button.click()

    assert panel.header_view.title() == "Quarterly.pdf"
    assert panel.details_view.value("Size") == "3.0 MB"
    launcher.launch.assert_called_once_with(None, info.reference)


def test_from_panel_requires_panel(mocker) -> None:
    with pytest.raises(ValueError):
        InspectorController.from_panel(mocker.Mock(), mocker.Mock(), None)
