"""Traction-limited acceleration engine for performance EVs."""

__version__ = "0.1.0"
