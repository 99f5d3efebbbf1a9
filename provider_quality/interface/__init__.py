"""Console interface for the award simulator."""

from .cli import main

__all__ = ["main"]
