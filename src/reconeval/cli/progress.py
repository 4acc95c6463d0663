"""
Rich-based progress bars and console output utilities for the reconeval CLI.
"""

from pathlib import Path
from typing import TYPE_CHECKING, List, Optional

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
    TimeRemainingColumn,
)
from rich.table import Table

if TYPE_CHECKING:
    from reconeval.services.base import BatchProgress

# Global console instance
console = Console()


class ProgressBar:
    """
    Rich progress bar driven by service progress callbacks.

    Example:
        >>> with ProgressBar(description="Evaluating") as pb:
        ...     service.set_progress_callback(pb.on_progress)
        ...     service.run(settings)
    """

    def __init__(
        self,
        description: str = "Processing",
        transient: bool = False,
        disable: bool = False,
    ) -> None:
        """
        Initialize the progress bar.

        Args:
            description: Description text shown before the bar
            transient: Remove progress bar when complete
            disable: Disable progress bar entirely
        """
        self.description = description
        self.transient = transient
        self.disable = disable
        self._progress: Optional[Progress] = None
        self._task_id: Optional[TaskID] = None

    def _create_progress(self) -> Progress:
        return Progress(
            SpinnerColumn(),
            TextColumn("[bold blue]{task.description}"),
            BarColumn(bar_width=40),
            TaskProgressColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            TimeRemainingColumn(),
            console=console,
            transient=self.transient,
            disable=self.disable,
        )

    def __enter__(self) -> "ProgressBar":
        self._progress = self._create_progress()
        self._progress.start()
        self._task_id = self._progress.add_task(self.description, total=None)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._progress:
            self._progress.stop()

    def on_progress(self, progress: "BatchProgress") -> None:
        """Progress callback for services."""
        if self._progress is None or self._task_id is None:
            return

        description = self.description
        if progress.current_file:
            description = f"{self.description} {Path(progress.current_file).name}"

        self._progress.update(
            self._task_id,
            total=progress.total,
            completed=progress.completed,
            description=description,
        )


def print_success(message: str) -> None:
    """Print a success message in green."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message in red."""
    console.print(f"[red]✗[/red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message in yellow."""
    console.print(f"[yellow]![/yellow] {message}")


def print_table(
    title: Optional[str],
    columns: List[str],
    rows: List[List[str]],
    show_header: bool = True,
) -> None:
    """
    Print a formatted table.

    Args:
        title: Table title
        columns: List of column names
        rows: List of row data (each row is a list of values)
        show_header: Whether to show column headers
    """
    table = Table(title=title, show_header=show_header)

    for i, col in enumerate(columns):
        table.add_column(col, justify="right" if i else "left")

    for row in rows:
        table.add_row(*[str(v) for v in row])

    console.print(table)
