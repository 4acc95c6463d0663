# services/__init__.py
"""
Services Package
================

Application services that orchestrate between views (CLI) and core logic.

Architecture:
    View (CLI)
        ↓ (settings, paths)
    Service
        ↓ (delegates to)
    Core (normalization, inference, confusion statistics, reporting)

Usage:
    from reconeval.services import EvaluationService

    service = EvaluationService()
    result = service.run(settings)
    if result.success:
        print(result.data.original.accuracy)
"""

from .base import BaseService, BatchProgress, ProgressCallback, ServiceResult
from .dataset import DatasetService
from .evaluation import EvaluationService, restored_file_name
from .factory import ServiceFactory

__all__ = [
    "BaseService",
    "BatchProgress",
    "DatasetService",
    "EvaluationService",
    "ProgressCallback",
    "ServiceFactory",
    "ServiceResult",
    "restored_file_name",
]
