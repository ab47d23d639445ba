"""Shortie: a minimal in-memory URL shortening service."""

__version__ = "1.0.0"
