# services/base.py
"""
Shared service plumbing: the result envelope, batch progress and BaseService.

Services never print or exit. They return a ServiceResult and the CLI decides
how to present it.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Dict, Generic, List, Optional, TypeVar

if TYPE_CHECKING:
    from reconeval.repository.protocol import FileRepositoryProtocol

T = TypeVar("T")


@dataclass
class ServiceResult(Generic[T]):
    """
    Outcome of a service call.

    Attributes:
        success: Whether the operation completed
        data: Payload of a successful call
        error: Reason of a failed call
        message: Short human readable summary
        warnings: Non-fatal problems, e.g. skipped samples
        metadata: Extra context such as the failing ``stage`` or ``path``
    """

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    message: Optional[str] = None
    warnings: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(
        cls,
        data: T = None,
        message: str = None,
        warnings: List[str] = None,
        **metadata,
    ) -> "ServiceResult[T]":
        return cls(success=True, data=data, message=message, warnings=warnings or [], metadata=metadata)

    @classmethod
    def fail(cls, error: str, warnings: List[str] = None, **metadata) -> "ServiceResult[T]":
        return cls(success=False, error=error, warnings=warnings or [], metadata=metadata)


@dataclass
class BatchProgress:
    """Mutable progress snapshot passed to the progress callback."""

    total: int
    completed: int = 0
    current_file: Optional[str] = None
    errors: List[str] = field(default_factory=list)


ProgressCallback = Callable[[BatchProgress], None]


class BaseService:
    """
    Base class for services that read and write through a file repository.

    Subclasses report batch progress with ``_report_progress``; the callback
    is optional.
    """

    def __init__(self, file_repository: Optional["FileRepositoryProtocol"] = None) -> None:
        """
        Args:
            file_repository: Repository used for all file access. Defaults to
                the local filesystem.
        """
        if file_repository is None:
            from reconeval.repository import LocalFileRepository

            file_repository = LocalFileRepository()
        self.file_repository = file_repository
        self._progress_callback: Optional[ProgressCallback] = None

    def set_progress_callback(self, callback: Optional[ProgressCallback]) -> None:
        """Install a progress callback, or None to remove it."""
        self._progress_callback = callback

    def _report_progress(self, progress: BatchProgress) -> None:
        if self._progress_callback:
            self._progress_callback(progress)
