# services/dataset.py
"""
Service for discovering labeled samples in a class-folder dataset.

Layout:

    <root>/
        0/  image files of class 0
        1/  image files of class 1
        ...
        9/

Missing class folders are skipped. Files are visited in class order, then by
file name, so repeated runs see the same sequence.
"""

from pathlib import Path
from typing import Iterable, List, Optional

from reconeval.core.exceptions import DatasetNotFoundError
from reconeval.core.logger import get_logger
from reconeval.models.evaluation import Sample
from reconeval.repository.protocol import FileRepositoryProtocol

from .base import BaseService

logger = get_logger(__name__)


def normalize_extensions(extensions: Iterable[str]) -> List[str]:
    """Lower-case extensions with a leading dot, e.g. 'PNG' -> '.png'."""
    return [("." + ext.lower().lstrip(".")) for ext in extensions if ext]


class DatasetService(BaseService):
    """Enumerates samples from the class-folder layout."""

    def __init__(self, file_repository: Optional[FileRepositoryProtocol] = None) -> None:
        super().__init__(file_repository=file_repository)

    def discover(
        self,
        root: str,
        target_class_index: int,
        num_classes: int = 10,
        extensions: Optional[Iterable[str]] = None,
    ) -> List[Sample]:
        """
        List every sample under ``root``.

        Args:
            root: Dataset root directory
            target_class_index: Class index labeled as the positive class
            num_classes: Class folders "0".."num_classes-1" are scanned
            extensions: Accepted file extensions; None accepts every file

        Returns:
            Samples in traversal order

        Raises:
            DatasetNotFoundError: If the root directory does not exist
        """
        if not self.file_repository.is_dir(root):
            raise DatasetNotFoundError(str(root))

        allowed = normalize_extensions(extensions) if extensions is not None else None
        samples: List[Sample] = []

        for class_index in range(num_classes):
            class_dir = Path(root) / str(class_index)
            if not self.file_repository.is_dir(class_dir):
                logger.debug(f"Class folder not found, skipping: {class_dir}")
                continue

            for filepath in self.file_repository.list_files(class_dir):
                if allowed is not None and filepath.suffix.lower() not in allowed:
                    continue
                samples.append(
                    Sample(
                        path=str(filepath),
                        class_index=class_index,
                        is_target_class=class_index == target_class_index,
                    )
                )

        return samples
