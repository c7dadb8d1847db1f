"""GUI entry point for the document inspector."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import QApplication

from ..errors import DocInspectError
from ..io.sources import ProviderSource
from ..models.types import ResourceReference
from ..providers.registry import ProviderRegistry
from ..utils.logging import configure_logging, get_logger
from .services.handoff_launcher import DesktopHandoffLauncher
from .ui.controllers.inspector_controller import InspectorController
from .ui.tasks.document_loader import DocumentLoader
from .ui.widgets.inspector_panel import InspectorPanel

LOGGER = get_logger(__name__)


def parse_reference(value: str) -> ResourceReference:
    """Interpret *value* as a URI when it has a scheme, otherwise as a local path."""

    if "://" in value:
        return ResourceReference.parse(value)
    return ResourceReference.from_path(Path(value).expanduser())


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="docinspect-gui", description="Inspect a document.")
    parser.add_argument("reference", nargs="?", help="path or URI of the document to inspect")
    parser.add_argument("--providers", type=Path, help="provider registry JSON file")
    parser.add_argument("--log-level", default=None, help="logging level (default: WARNING)")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Launch the Qt application and return the exit code."""

    arguments = list(sys.argv if argv is None else argv)
    options = _build_parser().parse_args(arguments[1:])
    configure_logging(options.log_level)

    try:
        if options.providers is not None:
            registry = ProviderRegistry.from_file(options.providers)
        else:
            registry = ProviderRegistry.from_environment()
        reference: Optional[ResourceReference] = (
            parse_reference(options.reference) if options.reference else None
        )
    except DocInspectError as exc:
        LOGGER.error("%s", exc)
        return 2

    app = QApplication(arguments[:1])
    panel = InspectorPanel()
    loader = DocumentLoader(ProviderSource(registry), parent=panel)
    controller = InspectorController.from_panel(
        DesktopHandoffLauncher(registry), loader, panel, providers=registry
    )
    panel.showInProviderRequested.connect(controller.show_in_provider)
    app.aboutToQuit.connect(controller.reset)

    panel.show()
    if reference is not None:
        controller.load_info(reference)
    return app.exec()


if __name__ == "__main__":  # pragma: no cover - manual launch
    raise SystemExit(main())
