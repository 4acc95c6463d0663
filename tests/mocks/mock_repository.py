"""Mock file repository for testing."""

from pathlib import Path
from typing import Dict, List, Set, Union


class MockFileRepository:
    """In-memory implementation of FileRepositoryProtocol.

    Lets service tests run without touching the filesystem. Paths listed in
    ``fail_writes_to`` raise OSError on write, to simulate a full disk or a
    read-only directory.
    """

    def __init__(self) -> None:
        """Initialize mock repository with an empty filesystem."""
        self.files: Dict[str, bytes] = {}
        self.directories: Set[str] = set()
        self.fail_writes_to: Set[str] = set()
        self.write_log: List[str] = []

    def is_dir(self, path: Union[str, Path]) -> bool:
        return str(path) in self.directories

    def read_binary(self, path: Union[str, Path]) -> bytes:
        path_str = str(path)
        if path_str not in self.files:
            raise FileNotFoundError(f"File not found: {path}")
        return self.files[path_str]

    def read_text(self, path: Union[str, Path], encoding: str = "utf-8") -> str:
        """Convenience accessor for assertions."""
        return self.read_binary(path).decode(encoding)

    def write_binary(self, path: Union[str, Path], data: bytes) -> None:
        path_str = str(path)
        if path_str in self.fail_writes_to:
            raise PermissionError(f"Permission denied: {path}")
        self.mkdir(Path(path).parent)
        self.files[path_str] = data
        self.write_log.append(path_str)

    def write_text(self, path: Union[str, Path], content: str, encoding: str = "utf-8") -> None:
        self.write_binary(path, content.encode(encoding))

    def list_files(self, directory: Union[str, Path]) -> List[Path]:
        dir_str = str(directory)
        return sorted(
            (Path(p) for p in self.files if str(Path(p).parent) == dir_str),
            key=lambda p: p.name,
        )

    def mkdir(self, path: Union[str, Path], parents: bool = True) -> None:
        path_str = str(path)
        if path_str in ("", "."):
            return
        self.directories.add(path_str)
        if parents:
            parent = str(Path(path).parent)
            if parent != path_str and parent not in self.directories:
                self.mkdir(parent, parents=True)

    def add_file(self, path: Union[str, Path], data: bytes) -> None:
        """Place a file directly, without going through the write log."""
        self.mkdir(Path(path).parent)
        self.files[str(path)] = data
