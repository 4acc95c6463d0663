# services/evaluation.py
"""
Service orchestrating the two-pass reconstruction evaluation.

For every sample the discriminator scores the original image (original pass)
and the autoencoder reconstruction of that image (restored pass). A sample is
committed to both confusion accumulators and to the report only after both
passes succeeded; any sample-level failure is recorded as a skipped sample
and the run continues.
"""

from contextlib import AbstractContextManager
from pathlib import Path
from typing import Callable, List, Optional

from reconeval.core.exceptions import DatasetNotFoundError, ModelLoadError, ReconevalError
from reconeval.core.images import decode_grayscale, encode_grayscale
from reconeval.core.inference import InferenceAdapter, open_models
from reconeval.core.logger import get_logger
from reconeval.core.normalize import (
    from_autoencoder_output,
    to_autoencoder_input,
    to_discriminator_input,
)
from reconeval.core.report import ReportWriter, format_summary
from reconeval.models.evaluation import (
    EvaluationRun,
    EvaluationSettings,
    Prediction,
    ReportLine,
    Sample,
    SampleOutcome,
)
from reconeval.repository.protocol import FileRepositoryProtocol

from .base import BaseService, BatchProgress, ServiceResult
from .dataset import DatasetService

logger = get_logger(__name__)

# (autoencoder_path, discriminator_path, providers) -> context manager yielding the adapter
ModelLoader = Callable[[str, str, Optional[List[str]]], AbstractContextManager]


def restored_file_name(sample: Sample) -> str:
    """File name of a reconstructed image: ``{class_index}_{original_name}``."""
    return f"{sample.class_index}_{sample.file_name}"


class EvaluationService(BaseService):
    """
    Service for the original vs. restored evaluation.

    Provides:
    - Per-sample evaluation returning an explicit success or skip result
    - A sequential run over a whole dataset with progress reporting
    - The end-to-end run: model acquisition, evaluation and report writing
    """

    def __init__(
        self,
        file_repository: Optional[FileRepositoryProtocol] = None,
        model_loader: ModelLoader = open_models,
    ) -> None:
        """
        Initialize the evaluation service.

        Args:
            file_repository: Repository for dataset reads and output writes
            model_loader: Factory for the scoped inference adapter
        """
        super().__init__(file_repository=file_repository)
        self._model_loader = model_loader
        self.dataset = DatasetService(file_repository=self.file_repository)

    # =========================================================================
    # Single Sample
    # =========================================================================

    def evaluate_sample(
        self,
        sample: Sample,
        models: InferenceAdapter,
        restored_dir: str,
    ) -> ServiceResult[SampleOutcome]:
        """
        Evaluate one sample on the original and the restored pass.

        Nothing is recorded here; the caller commits successful outcomes.

        Args:
            sample: Sample to evaluate
            models: Open inference adapter
            restored_dir: Directory receiving the reconstructed image

        Returns:
            Result with the sample outcome, or a failure carrying the reason
        """
        try:
            image = decode_grayscale(self.file_repository.read_binary(sample.path), path=sample.path)

            original = Prediction.from_probability(models.classify(to_discriminator_input(image)))

            restored_image = from_autoencoder_output(models.restore(to_autoencoder_input(image)))
            restored_path = str(Path(restored_dir) / restored_file_name(sample))
            self.file_repository.write_binary(restored_path, encode_grayscale(restored_image, restored_path))

            restored = Prediction.from_probability(models.classify(to_discriminator_input(restored_image)))
        except (ReconevalError, OSError) as e:
            return ServiceResult.fail(str(e), path=sample.path)

        line = ReportLine(
            path=sample.path,
            is_target_class=sample.is_target_class,
            original=original,
            restored=restored,
        )
        return ServiceResult.ok(
            data=SampleOutcome(sample=sample, line=line, restored_image_path=restored_path),
            message=f"Evaluated {sample.path}",
        )

    # =========================================================================
    # Dataset
    # =========================================================================

    def evaluate_samples(
        self,
        samples: List[Sample],
        models: InferenceAdapter,
        restored_dir: str,
        target_class_name: str,
    ) -> EvaluationRun:
        """
        Evaluate samples sequentially and aggregate both passes.

        Args:
            samples: Samples in processing order
            models: Open inference adapter
            restored_dir: Directory receiving reconstructed images
            target_class_name: Display name of the target class

        Returns:
            EvaluationRun with both accumulators, report lines and skipped samples
        """
        evaluation = EvaluationRun(target_class_name=target_class_name)
        progress = BatchProgress(total=len(samples))
        self._report_progress(progress)

        for sample in samples:
            progress.current_file = sample.path
            self._report_progress(progress)

            result = self.evaluate_sample(sample, models, restored_dir)
            if result.success:
                evaluation.commit(result.data)
            else:
                logger.warning(f"Error processing {sample.path}: {result.error}")
                evaluation.skip(sample.path, result.error)
                progress.errors.append(f"{sample.file_name}: {result.error}")

            progress.completed += 1
            self._report_progress(progress)

        return evaluation

    def run(self, settings: EvaluationSettings) -> ServiceResult[EvaluationRun]:
        """
        Run the full evaluation and write the CSV report.

        Startup failures (missing dataset root, unloadable models) and report
        write failures fail the whole run. Sample-level failures only skip the
        affected sample.

        Args:
            settings: Resolved evaluation settings

        Returns:
            Result with the EvaluationRun on success
        """
        try:
            samples = self.dataset.discover(
                settings.dataset_root,
                settings.target_class_index,
                num_classes=settings.num_classes,
                extensions=settings.extensions,
            )
        except DatasetNotFoundError as e:
            return ServiceResult.fail(str(e), stage="dataset")

        try:
            self.file_repository.mkdir(settings.restored_dir)
        except OSError as e:
            return ServiceResult.fail(f"Cannot create output directory {settings.restored_dir}: {e}", stage="output")

        logger.info(f"Evaluating {len(samples)} images from {settings.dataset_root}")

        try:
            with self._model_loader(
                settings.autoencoder_path,
                settings.discriminator_path,
                settings.providers,
            ) as models:
                evaluation = self.evaluate_samples(
                    samples,
                    models,
                    settings.restored_dir,
                    settings.target_class_name,
                )
        except ModelLoadError as e:
            return ServiceResult.fail(str(e), stage="models")

        writer = ReportWriter(settings.target_class_name)
        writer.extend(evaluation.lines)
        try:
            evaluation.report_path = writer.write(self.file_repository, settings.report_path)
        except OSError as e:
            return ServiceResult.fail(f"Cannot write report {settings.report_path}: {e}", stage="report")

        logger.info(
            f"Evaluation complete: {evaluation.processed} processed, "
            f"{len(evaluation.skipped)} skipped, report saved to {evaluation.report_path}"
        )
        logger.debug(format_summary("Original Images Evaluation", evaluation.original, settings.target_class_name))
        logger.debug(format_summary("Restored Images Evaluation", evaluation.restored, settings.target_class_name))

        warnings = [f"Skipped {s.path}: {s.reason}" for s in evaluation.skipped]
        return ServiceResult.ok(
            data=evaluation,
            message=f"Evaluated {evaluation.processed} of {len(samples)} images",
            warnings=warnings,
        )
