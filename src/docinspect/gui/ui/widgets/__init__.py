"""Widgets composing the document inspector."""

from .details_view import DetailsView
from .header_view import HeaderView
from .inspector_panel import InspectorPanel

__all__ = ["DetailsView", "HeaderView", "InspectorPanel"]
