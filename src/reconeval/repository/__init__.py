"""File repository layer for dependency injection."""

from reconeval.repository.local import LocalFileRepository
from reconeval.repository.protocol import FileRepositoryProtocol

__all__ = [
    "FileRepositoryProtocol",
    "LocalFileRepository",
]
