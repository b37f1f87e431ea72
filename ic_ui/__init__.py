"""Terminal surface for browsing datasets through the table engine."""
