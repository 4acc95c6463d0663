"""Data models for reconeval."""

from reconeval.models.base import ToDictMixin
from reconeval.models.evaluation import (
    PREDICTION_THRESHOLD,
    EvaluationRun,
    EvaluationSettings,
    Prediction,
    ReportLine,
    Sample,
    SampleOutcome,
    SkippedSample,
)

__all__ = [
    "PREDICTION_THRESHOLD",
    "EvaluationRun",
    "EvaluationSettings",
    "Prediction",
    "ReportLine",
    "Sample",
    "SampleOutcome",
    "SkippedSample",
    "ToDictMixin",
]
