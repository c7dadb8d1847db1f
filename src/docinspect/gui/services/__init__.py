"""Service objects used by the GUI layer."""

from .handoff_launcher import DesktopHandoffLauncher, HandoffLauncher

__all__ = ["DesktopHandoffLauncher", "HandoffLauncher"]
