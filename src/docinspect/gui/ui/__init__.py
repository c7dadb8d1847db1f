"""Qt user interface for the document inspector."""
