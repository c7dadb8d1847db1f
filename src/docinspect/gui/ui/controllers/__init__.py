"""Controllers used by the inspector UI."""

from .inspector_controller import InspectorController, Loader, ViewSink

__all__ = ["InspectorController", "Loader", "ViewSink"]
