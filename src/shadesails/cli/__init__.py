"""Command-line interface for shade sail quoting."""
