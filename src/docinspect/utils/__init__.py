"""Utility helpers shared across docinspect."""
