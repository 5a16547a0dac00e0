"""Shade sail measurement, validation and pricing engine."""

__version__ = "1.0.0"
