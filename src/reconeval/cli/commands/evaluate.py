"""Evaluation command."""

import logging
from typing import Optional

import click


def _print_pass(title: str, stats, class_name: str) -> None:
    from reconeval.cli.progress import console, print_table
    from reconeval.core.report import confusion_rows, metric_rows

    console.print(f"\n[bold]=== {title} ===[/bold]")
    for name, value in metric_rows(stats):
        console.print(f"  {name + ':':<11} {value}")

    columns, rows = confusion_rows(stats, class_name)
    print_table("Confusion Matrix", columns, rows)


@click.command("evaluate")
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), help="Configuration file")
@click.option("--autoencoder", type=click.Path(), help="Autoencoder ONNX model")
@click.option("--discriminator", type=click.Path(), help="Discriminator ONNX model")
@click.option("--dataset", "dataset_root", type=click.Path(), help="Dataset root with class folders 0-9")
@click.option("--restored-dir", type=click.Path(), help="Output directory for reconstructed images")
@click.option("--report", "report_path", type=click.Path(), help="CSV report path (overwritten)")
@click.option("--target-class", "target_class_index", type=int, help="Class index treated as positive")
@click.option("--target-name", "target_class_name", help="Display name of the target class")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.option("--quiet", "-q", is_flag=True, help="Hide the progress bar")
def evaluate(
    config_path: Optional[str],
    autoencoder: Optional[str],
    discriminator: Optional[str],
    dataset_root: Optional[str],
    restored_dir: Optional[str],
    report_path: Optional[str],
    target_class_index: Optional[int],
    target_class_name: Optional[str],
    verbose: bool,
    quiet: bool,
) -> None:
    """Evaluate the discriminator on original and reconstructed images."""
    from reconeval.cli.progress import ProgressBar, console, print_success, print_warning
    from reconeval.cli.service_helpers import exit_with_error, get_factory, handle_result
    from reconeval.core.config import load_config_cascade
    from reconeval.core.logger import set_level
    from reconeval.models.evaluation import EvaluationSettings

    config = load_config_cascade(config_path)

    try:
        set_level(logging.DEBUG if verbose else config.get("logging", "level", "WARNING"))
    except ValueError as e:
        exit_with_error(str(e))

    try:
        settings = EvaluationSettings.from_config(
            config,
            autoencoder_path=autoencoder,
            discriminator_path=discriminator,
            dataset_root=dataset_root,
            restored_dir=restored_dir,
            report_path=report_path,
            target_class_index=target_class_index,
            target_class_name=target_class_name,
        )
    except ValueError as e:
        raise click.BadParameter(str(e))

    service = get_factory().create_evaluation_service()

    with ProgressBar(description="Evaluating", transient=True, disable=quiet) as progress:
        service.set_progress_callback(progress.on_progress)
        try:
            result = service.run(settings)
        finally:
            service.set_progress_callback(None)

    evaluation = handle_result(result)

    for warning in result.warnings:
        print_warning(warning)

    _print_pass("Original Images Evaluation", evaluation.original, settings.target_class_name)
    _print_pass("Restored Images Evaluation", evaluation.restored, settings.target_class_name)

    console.print()
    print_success(result.message)
    print_success(f"Report saved to: {evaluation.report_path}")
