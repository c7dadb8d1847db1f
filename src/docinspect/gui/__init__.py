"""GUI layer for docinspect."""
