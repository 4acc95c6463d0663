"""Command line interface for reconeval."""

from .cli import cli

__all__ = ["cli"]
