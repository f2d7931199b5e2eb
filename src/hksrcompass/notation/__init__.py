"""Compass notation parsing."""

from .parser import NotationError, parse_notation

__all__ = ["NotationError", "parse_notation"]
