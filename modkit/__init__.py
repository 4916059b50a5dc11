"""Pluggable feature registry with per-module JSON persistence."""

__version__ = "1.0.0"
