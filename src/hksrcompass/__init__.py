"""Navigation compass model and notation tools."""

__version__ = "0.0.0-dev"
