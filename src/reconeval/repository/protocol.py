"""Abstract protocol for file repository operations."""

from pathlib import Path
from typing import List, Protocol, Union


class FileRepositoryProtocol(Protocol):
    """Protocol defining the file operations used by the evaluation services.

    Dataset reads, reconstructed image writes and the report go through this
    interface so services can be tested against an in-memory implementation.
    """

    def is_dir(self, path: Union[str, Path]) -> bool:
        """Check if path is a directory."""
        ...

    def read_binary(self, path: Union[str, Path]) -> bytes:
        """Read file contents as bytes."""
        ...

    def write_binary(self, path: Union[str, Path], data: bytes) -> None:
        """Write bytes to file, replacing existing content."""
        ...

    def write_text(self, path: Union[str, Path], content: str, encoding: str = "utf-8") -> None:
        """Write text to file, replacing existing content."""
        ...

    def list_files(self, directory: Union[str, Path]) -> List[Path]:
        """List regular files directly inside directory, sorted by name."""
        ...

    def mkdir(self, path: Union[str, Path], parents: bool = True) -> None:
        """Create directory (and parents if needed)."""
        ...
