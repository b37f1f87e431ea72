"""PySide6 desktop surface for the table engine."""
