"""HTTP surface for the journey analysis."""

from .main import app, health

__all__ = ["app", "health"]
