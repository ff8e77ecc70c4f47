"""Exact arithmetic, integer geometry, hashing and expression evaluation."""

__version__ = "0.1.0"