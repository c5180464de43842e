"""Ambient configuration (logging)."""

from src.config.logging import configure_logging

__all__ = [
    "configure_logging",
]
