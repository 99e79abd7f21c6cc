"""HTTP backend for schema diagrams."""

from .main import app, run

__all__ = ["app", "run"]
