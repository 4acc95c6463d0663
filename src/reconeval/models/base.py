"""Shared helpers for evaluation data models."""

from dataclasses import fields, is_dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np


class ToDictMixin:
    """
    Mixin that adds to_dict() to dataclasses.

    Nested models, paths, numpy scalars and arrays are converted to plain
    Python values so the output can go straight to JSON.

    Example:
        @dataclass
        class SkippedSample(ToDictMixin):
            path: str
            reason: str

        SkippedSample(path="0/a.png", reason="bad").to_dict()
        # {"path": "0/a.png", "reason": "bad"}
    """

    def to_dict(self) -> Dict[str, Any]:
        """Convert the dataclass to a dictionary."""
        if not is_dataclass(self):
            raise TypeError(f"{self.__class__.__name__} is not a dataclass")

        result = {f.name: _plain(getattr(self, f.name)) for f in fields(self)}

        extra = self._to_dict_extra()
        if extra:
            result.update(extra)
        return result

    def _to_dict_extra(self) -> Optional[Dict[str, Any]]:
        """Override to add computed fields to dict output."""
        return None


def _plain(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return str(value)
