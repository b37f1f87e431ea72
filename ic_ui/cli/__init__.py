"""CLI entrypoints."""
