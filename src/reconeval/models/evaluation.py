"""Data models for the two-pass reconstruction evaluation."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from reconeval.core.confusion import ConfusionAccumulator
from reconeval.models.base import ToDictMixin

if TYPE_CHECKING:
    from reconeval.core.config import Config

# Fixed decision threshold; a probability of exactly 0.5 is negative.
PREDICTION_THRESHOLD = 0.5


@dataclass(frozen=True)
class Sample(ToDictMixin):
    """One labeled image of the dataset."""

    path: str
    class_index: int
    is_target_class: bool

    @property
    def file_name(self) -> str:
        return Path(self.path).name


@dataclass(frozen=True)
class Prediction(ToDictMixin):
    """Discriminator score for one image and the derived decision."""

    probability: float
    positive: bool

    @classmethod
    def from_probability(cls, probability: float) -> "Prediction":
        return cls(probability=float(probability), positive=bool(probability > PREDICTION_THRESHOLD))


@dataclass(frozen=True)
class ReportLine(ToDictMixin):
    """Audit record for one committed sample."""

    path: str
    is_target_class: bool
    original: Prediction
    restored: Prediction


@dataclass(frozen=True)
class SampleOutcome(ToDictMixin):
    """Result of evaluating a single sample on both passes."""

    sample: Sample
    line: ReportLine
    restored_image_path: str


@dataclass(frozen=True)
class SkippedSample(ToDictMixin):
    """A sample that failed and contributed nothing to the statistics."""

    path: str
    reason: str


@dataclass
class EvaluationRun(ToDictMixin):
    """Aggregated result of one evaluation run."""

    target_class_name: str
    original: ConfusionAccumulator = field(default_factory=ConfusionAccumulator)
    restored: ConfusionAccumulator = field(default_factory=ConfusionAccumulator)
    lines: List[ReportLine] = field(default_factory=list)
    skipped: List[SkippedSample] = field(default_factory=list)
    report_path: Optional[str] = None

    @property
    def processed(self) -> int:
        return len(self.lines)

    def commit(self, outcome: SampleOutcome) -> None:
        """Record a successful sample in both accumulators and the report."""
        line = outcome.line
        self.original.update(line.is_target_class, line.original.positive)
        self.restored.update(line.is_target_class, line.restored.positive)
        self.lines.append(line)

    def skip(self, path: str, reason: str) -> None:
        self.skipped.append(SkippedSample(path=path, reason=reason))

    def _to_dict_extra(self) -> Optional[Dict[str, Any]]:
        return {"processed": self.processed}


@dataclass
class EvaluationSettings(ToDictMixin):
    """
    Resolved options for an evaluation run.

    Attributes:
        autoencoder_path: ONNX autoencoder artifact
        discriminator_path: ONNX discriminator artifact
        dataset_root: Directory holding class folders "0".."num_classes-1"
        restored_dir: Directory receiving reconstructed images
        report_path: CSV report destination (overwritten)
        target_class_index: Class folder treated as positive
        target_class_name: Display name of the target class
        num_classes: Number of class folders to scan
        extensions: Image file extensions to include
        providers: onnxruntime execution providers
    """

    autoencoder_path: str
    discriminator_path: str
    dataset_root: str
    restored_dir: str
    report_path: str
    target_class_index: int = 8
    target_class_name: str = "Bag"
    num_classes: int = 10
    extensions: List[str] = field(
        default_factory=lambda: ["png", "jpg", "jpeg", "bmp", "gif", "tif", "tiff"]
    )
    providers: List[str] = field(default_factory=lambda: ["CPUExecutionProvider"])

    def __post_init__(self) -> None:
        if self.num_classes <= 0:
            raise ValueError(f"num_classes must be positive, got {self.num_classes}")
        if not 0 <= self.target_class_index < self.num_classes:
            raise ValueError(
                f"target_class_index must be in [0, {self.num_classes - 1}], "
                f"got {self.target_class_index}"
            )

    @classmethod
    def from_config(cls, config: "Config", **overrides: Any) -> "EvaluationSettings":
        """
        Build settings from a Config, applying non-None keyword overrides.

        Args:
            config: Loaded configuration
            **overrides: Field values that take precedence over the config
        """
        values: Dict[str, Any] = {
            "autoencoder_path": config.get("models", "autoencoder"),
            "discriminator_path": config.get("models", "discriminator"),
            "providers": list(config.get("models", "providers", ["CPUExecutionProvider"])),
            "dataset_root": config.get("dataset", "root"),
            "num_classes": int(config.get("dataset", "num_classes", 10)),
            "extensions": list(config.get("dataset", "extensions", [])),
            "target_class_index": int(config.get("evaluation", "target_class_index", 8)),
            "target_class_name": config.get("evaluation", "target_class_name", "Bag"),
            "restored_dir": config.get("output", "restored_dir"),
            "report_path": config.get("output", "report_path"),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})

        missing = [
            key
            for key in ("autoencoder_path", "discriminator_path", "dataset_root", "restored_dir", "report_path")
            if not values.get(key)
        ]
        if missing:
            raise ValueError(f"Missing required settings: {', '.join(missing)}")

        return cls(**values)
