"""
Evaluation Report
=================

CSV audit trail for the two-pass evaluation and human-readable summaries of
the confusion statistics.

CSV columns, in order:

    ImagePath, Is<ClassName>, OriginalPred, OriginalProb, RestoredPred, RestoredProb

Probabilities are written with 4 decimal places. The report is written once,
at the end of a run, and replaces any existing file.
"""

import csv
import io
import re
from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple

from reconeval.core.confusion import ConfusionAccumulator

if TYPE_CHECKING:
    from reconeval.models.evaluation import ReportLine
    from reconeval.repository.protocol import FileRepositoryProtocol

UNDEFINED = "undefined"


def report_header(target_class_name: str) -> List[str]:
    """Column names for the CSV report, e.g. ``IsBag`` for the class "Bag"."""
    flag_column = "Is" + re.sub(r"\s+", "", target_class_name)
    return ["ImagePath", flag_column, "OriginalPred", "OriginalProb", "RestoredPred", "RestoredProb"]


def report_row(line: "ReportLine") -> List[str]:
    return [
        line.path,
        str(line.is_target_class),
        str(line.original.positive),
        f"{line.original.probability:.4f}",
        str(line.restored.positive),
        f"{line.restored.probability:.4f}",
    ]


class ReportWriter:
    """Collects report lines in processing order and writes them once."""

    def __init__(self, target_class_name: str) -> None:
        self.target_class_name = target_class_name
        self.lines: List["ReportLine"] = []

    def append(self, line: "ReportLine") -> None:
        self.lines.append(line)

    def extend(self, lines: Iterable["ReportLine"]) -> None:
        for line in lines:
            self.append(line)

    def render(self) -> str:
        """Render the header and all lines as CSV text."""
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(report_header(self.target_class_name))
        for line in self.lines:
            writer.writerow(report_row(line))
        return buffer.getvalue()

    def write(self, repository: "FileRepositoryProtocol", path: str) -> str:
        """
        Write the full report, overwriting ``path``.

        Raises:
            OSError: If the file cannot be written
        """
        repository.write_text(path, self.render())
        return path


def format_percent(value: Optional[float]) -> str:
    """Format a ratio as a percentage with two decimals, or 'undefined'."""
    if value is None:
        return UNDEFINED
    return f"{value * 100:.2f}%"


def metric_rows(stats: ConfusionAccumulator) -> List[Tuple[str, str]]:
    return [
        ("Accuracy", format_percent(stats.accuracy)),
        ("Precision", format_percent(stats.precision)),
        ("Recall", format_percent(stats.recall)),
    ]


def confusion_rows(stats: ConfusionAccumulator, class_name: str) -> Tuple[List[str], List[List[str]]]:
    """
    Column names and rows of the 2x2 confusion matrix.

    Returns:
        (columns, rows) with actual classes as rows and predictions as columns
    """
    negative = f"Not {class_name}"
    matrix = stats.confusion_matrix()
    columns = ["Actual\\Pred", class_name, negative]
    rows = [
        [class_name, str(matrix[0, 0]), str(matrix[0, 1])],
        [negative, str(matrix[1, 0]), str(matrix[1, 1])],
    ]
    return columns, rows


def format_summary(title: str, stats: ConfusionAccumulator, class_name: str) -> str:
    """
    Format one evaluation pass as a plain-text block.

    Args:
        title: Block title, e.g. "Original Images Evaluation"
        stats: Accumulated counters for the pass
        class_name: Target class display name

    Returns:
        Multi-line summary with metrics and a Markdown-style confusion table
    """
    lines = [f"=== {title} ==="]
    lines.extend(f"{name}: {value}" for name, value in metric_rows(stats))
    lines.extend(["", "Confusion Matrix:"])

    columns, rows = confusion_rows(stats, class_name)
    widths = [max(len(columns[i]), *(len(row[i]) for row in rows)) for i in range(len(columns))]

    def render(cells: List[str]) -> str:
        return "| " + " | ".join(cell.rjust(width) if i else cell.ljust(width)
                                 for i, (cell, width) in enumerate(zip(cells, widths))) + " |"

    lines.append(render(columns))
    lines.append("|" + "|".join("-" * (width + 2) for width in widths) + "|")
    lines.extend(render(row) for row in rows)

    return "\n".join(lines)
