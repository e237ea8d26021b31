"""Logging setup for the game and its generation backend."""

from .logging import configure_logging

__all__ = ["configure_logging"]
