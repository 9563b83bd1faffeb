"""CLI entry point package for gridtext."""
