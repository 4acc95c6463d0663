"""Local filesystem implementation of FileRepositoryProtocol."""

from pathlib import Path
from typing import List, Union


class LocalFileRepository:
    """Implementation of FileRepositoryProtocol using the local filesystem."""

    def is_dir(self, path: Union[str, Path]) -> bool:
        return Path(path).is_dir()

    def read_binary(self, path: Union[str, Path]) -> bytes:
        return Path(path).read_bytes()

    def write_binary(self, path: Union[str, Path], data: bytes) -> None:
        """Write bytes to file, creating parent directories."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_bytes(data)

    def write_text(self, path: Union[str, Path], content: str, encoding: str = "utf-8") -> None:
        """Write text to file, creating parent directories."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps CSV line endings as rendered
        with open(p, "w", encoding=encoding, newline="") as f:
            f.write(content)

    def list_files(self, directory: Union[str, Path]) -> List[Path]:
        """List regular files directly inside directory, sorted by name."""
        dir_path = Path(directory)
        if not dir_path.is_dir():
            return []
        return sorted((p for p in dir_path.iterdir() if p.is_file()), key=lambda p: p.name)

    def mkdir(self, path: Union[str, Path], parents: bool = True) -> None:
        Path(path).mkdir(parents=parents, exist_ok=True)
