"""Minimal git repository layout, discovery and initialization."""

__version__ = "0.1.0"
