"""Command line interface for intrange."""

from .main import cli, main

__all__ = ["cli", "main"]
