"""CLI command modules for reconeval."""

from .config import config
from .evaluate import evaluate

__all__ = [
    "config",
    "evaluate",
]
