# tests/conftest.py
"""
Global pytest fixtures for reconeval tests.
"""

from pathlib import Path

import pytest

from reconeval.core.config import reset_config
from tests.mocks.images import BRIGHT, DARK, png_bytes


@pytest.fixture(autouse=True)
def _reset_global_config():
    """Keep the global configuration isolated between tests."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def temp_dir(tmp_path) -> Path:
    """Temporary working directory."""
    return tmp_path


@pytest.fixture
def dataset_dir(tmp_path) -> Path:
    """
    Class-folder dataset on disk with the target class 8.

    - 0/a.png, 0/b.png: dark, not target   -> TN, TN
    - 3/e.png: bright, not target          -> FP
    - 8/c.png: bright, target              -> TP
    - 8/d.png: dark, target                -> FN
    - 5/: empty folder
    """
    root = tmp_path / "dataset"
    layout = {
        "0": {"a.png": DARK, "b.png": DARK},
        "3": {"e.png": BRIGHT},
        "5": {},
        "8": {"c.png": BRIGHT, "d.png": DARK},
    }
    for class_dir, files in layout.items():
        (root / class_dir).mkdir(parents=True)
        for name, value in files.items():
            (root / class_dir / name).write_bytes(png_bytes(value))
    return root
