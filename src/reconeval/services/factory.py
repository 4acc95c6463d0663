"""
Service Factory
===============

Reusable factory for instantiating services with their dependencies.

Usage:
    from reconeval.services.factory import ServiceFactory

    factory = ServiceFactory()
    service = factory.create_evaluation_service()

    # Tests inject an in-memory repository and fake models
    factory = ServiceFactory(file_repository=MockFileRepository(), model_loader=fake_loader)
"""

from typing import Optional

from reconeval.core.inference import open_models
from reconeval.repository import LocalFileRepository
from reconeval.repository.protocol import FileRepositoryProtocol

from .evaluation import EvaluationService, ModelLoader


class ServiceFactory:
    """
    Factory for creating service instances with dependency injection.

    Attributes:
        file_repository: File repository shared by the created services
        model_loader: Context manager factory acquiring the inference models
    """

    def __init__(
        self,
        file_repository: Optional[FileRepositoryProtocol] = None,
        model_loader: Optional[ModelLoader] = None,
    ) -> None:
        self.file_repository = file_repository or LocalFileRepository()
        self.model_loader = model_loader or open_models

    def create_evaluation_service(self) -> EvaluationService:
        """Create EvaluationService with file repository and model loader."""
        return EvaluationService(
            file_repository=self.file_repository,
            model_loader=self.model_loader,
        )
