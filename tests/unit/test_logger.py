"""
Unit tests for reconeval.core.logger module.
"""

import logging

import pytest

from reconeval.core.logger import PACKAGE_NAME, get_logger, set_level


@pytest.fixture(autouse=True)
def _restore_level():
    package_logger = logging.getLogger(PACKAGE_NAME)
    level = package_logger.level
    yield
    package_logger.setLevel(level)


class TestLogger:
    def test_get_logger_is_child_of_package(self):
        logger = get_logger("reconeval.services.evaluation")

        assert logger.name == "reconeval.services.evaluation"
        assert logging.getLogger(PACKAGE_NAME).handlers

    def test_set_level_by_name(self):
        set_level("debug")

        assert logging.getLogger(PACKAGE_NAME).level == logging.DEBUG

    def test_set_level_by_number(self):
        set_level(logging.ERROR)

        assert logging.getLogger(PACKAGE_NAME).level == logging.ERROR

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            set_level("chatty")

    def test_modules_log_through_package_logger(self):
        """Test package modules log under the configured package logger."""
        from reconeval.core import config, inference
        from reconeval.services import dataset, evaluation

        for module in (config, inference, dataset, evaluation):
            assert module.logger.name.startswith(f"{PACKAGE_NAME}.")
        assert logging.getLogger(PACKAGE_NAME).handlers
        assert logging.getLogger(PACKAGE_NAME).propagate is False
