"""Command line interface for Fireflower."""

from .main import app, main

__all__ = ["app", "main"]
