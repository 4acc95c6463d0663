"""
Binary Confusion Statistics
===========================

Accumulates binary classification outcomes (target class vs. everything else)
and derives accuracy, precision, recall and F1 on demand.

Metrics whose denominator is zero are undefined and returned as ``None``
rather than coerced to 0.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

import numpy as np


def _ratio(numerator: int, denominator: int) -> Optional[float]:
    if denominator == 0:
        return None
    return numerator / denominator


@dataclass
class ConfusionAccumulator:
    """
    Counters for one evaluation pass.

    Each call to ``update`` increments exactly one counter, so the counters
    always sum to the number of updates.
    """

    true_positives: int = 0
    true_negatives: int = 0
    false_positives: int = 0
    false_negatives: int = 0

    def update(self, is_target_class: bool, predicted_positive: bool) -> None:
        """Record a single classification outcome."""
        if is_target_class:
            if predicted_positive:
                self.true_positives += 1
            else:
                self.false_negatives += 1
        else:
            if predicted_positive:
                self.false_positives += 1
            else:
                self.true_negatives += 1

    @property
    def total(self) -> int:
        return self.true_positives + self.true_negatives + self.false_positives + self.false_negatives

    @property
    def accuracy(self) -> Optional[float]:
        """(TP + TN) / total, or None before any sample was recorded."""
        return _ratio(self.true_positives + self.true_negatives, self.total)

    @property
    def precision(self) -> Optional[float]:
        """TP / (TP + FP), or None when nothing was predicted positive."""
        return _ratio(self.true_positives, self.true_positives + self.false_positives)

    @property
    def recall(self) -> Optional[float]:
        """TP / (TP + FN), or None when no actual positives were seen."""
        return _ratio(self.true_positives, self.true_positives + self.false_negatives)

    @property
    def f1_score(self) -> Optional[float]:
        """Harmonic mean of precision and recall, or None if either is undefined."""
        precision = self.precision
        recall = self.recall
        if precision is None or recall is None or precision + recall == 0:
            return None
        return 2 * precision * recall / (precision + recall)

    def confusion_matrix(self) -> np.ndarray:
        """
        2x2 matrix with actual classes as rows and predictions as columns.

        Row/column 0 is the target class, row/column 1 is "not target":
        ``[[TP, FN], [FP, TN]]``.
        """
        return np.array(
            [
                [self.true_positives, self.false_negatives],
                [self.false_positives, self.true_negatives],
            ],
            dtype=np.int64,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "true_positives": self.true_positives,
            "true_negatives": self.true_negatives,
            "false_positives": self.false_positives,
            "false_negatives": self.false_negatives,
            "total": self.total,
            "accuracy": self.accuracy,
            "precision": self.precision,
            "recall": self.recall,
            "f1_score": self.f1_score,
        }
