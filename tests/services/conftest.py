"""Shared fixtures for service tests."""

import pytest

from reconeval.models.evaluation import EvaluationSettings
from tests.mocks.fake_models import FakeModelLoader, FakeModels
from tests.mocks.images import BRIGHT, DARK, png_bytes
from tests.mocks.mock_repository import MockFileRepository


@pytest.fixture
def mock_repository() -> MockFileRepository:
    """Create a mock file repository for testing."""
    return MockFileRepository()


@pytest.fixture
def populated_repository(mock_repository) -> MockFileRepository:
    """Mock repository holding the same layout as the on-disk ``dataset_dir``."""
    mock_repository.mkdir("data/5")
    mock_repository.add_file("data/0/a.png", png_bytes(DARK))
    mock_repository.add_file("data/0/b.png", png_bytes(DARK))
    mock_repository.add_file("data/3/e.png", png_bytes(BRIGHT))
    mock_repository.add_file("data/8/c.png", png_bytes(BRIGHT))
    mock_repository.add_file("data/8/d.png", png_bytes(DARK))
    return mock_repository


@pytest.fixture
def fake_models() -> FakeModels:
    return FakeModels()


@pytest.fixture
def fake_loader(fake_models) -> FakeModelLoader:
    return FakeModelLoader(models=fake_models)


@pytest.fixture
def settings() -> EvaluationSettings:
    """Settings pointing at the mock repository layout."""
    return EvaluationSettings(
        autoencoder_path="models/autoencoder_full.onnx",
        discriminator_path="models/bag_discriminator.onnx",
        dataset_root="data",
        restored_dir="out/restored",
        report_path="out/report.csv",
    )
