"""
Unit tests for reconeval.core.report module.
"""

import csv
import io

import pytest

from reconeval.core.confusion import ConfusionAccumulator
from reconeval.core.report import (
    ReportWriter,
    confusion_rows,
    format_percent,
    format_summary,
    metric_rows,
    report_header,
    report_row,
)
from reconeval.models.evaluation import Prediction, ReportLine
from tests.mocks.mock_repository import MockFileRepository


def make_line(path="data/8/c.png", is_target=True, original=0.91234, restored=0.4):
    return ReportLine(
        path=path,
        is_target_class=is_target,
        original=Prediction.from_probability(original),
        restored=Prediction.from_probability(restored),
    )


class TestReportHeader:
    def test_default_class_name(self):
        assert report_header("Bag") == [
            "ImagePath",
            "IsBag",
            "OriginalPred",
            "OriginalProb",
            "RestoredPred",
            "RestoredProb",
        ]

    def test_whitespace_removed_from_flag_column(self):
        assert report_header("Ankle Boot")[1] == "IsAnkleBoot"


class TestReportRow:
    def test_probabilities_have_four_decimals(self):
        row = report_row(make_line())

        assert row == ["data/8/c.png", "True", "True", "0.9123", "False", "0.4000"]

    def test_threshold_probability_is_negative(self):
        row = report_row(make_line(original=0.5, restored=0.50001))

        assert row[2] == "False"
        assert row[3] == "0.5000"
        assert row[4] == "True"


class TestReportWriter:
    """Tests for ReportWriter."""

    def test_render_header_only(self):
        writer = ReportWriter("Bag")

        assert writer.render() == "ImagePath,IsBag,OriginalPred,OriginalProb,RestoredPred,RestoredProb\n"

    def test_render_preserves_order(self):
        writer = ReportWriter("Bag")
        writer.extend([make_line(path="b.png"), make_line(path="a.png", is_target=False)])

        rows = list(csv.reader(io.StringIO(writer.render())))

        assert [row[0] for row in rows[1:]] == ["b.png", "a.png"]
        assert rows[2][1] == "False"
        assert all(len(row) == 6 for row in rows)

    def test_paths_with_commas_are_quoted(self):
        writer = ReportWriter("Bag")
        writer.append(make_line(path="data/8/a,b.png"))

        rows = list(csv.reader(io.StringIO(writer.render())))

        assert rows[1][0] == "data/8/a,b.png"

    def test_write_replaces_existing_report(self):
        repository = MockFileRepository()
        repository.add_file("out/report.csv", b"stale")
        writer = ReportWriter("Bag")
        writer.append(make_line())

        result = writer.write(repository, "out/report.csv")

        assert result == "out/report.csv"
        content = repository.read_text("out/report.csv")
        assert content.startswith("ImagePath,IsBag")
        assert "stale" not in content

    def test_write_failure_raises_oserror(self):
        repository = MockFileRepository()
        repository.fail_writes_to.add("report.csv")

        with pytest.raises(OSError):
            ReportWriter("Bag").write(repository, "report.csv")


class TestFormatting:
    """Tests for summary formatting."""

    @pytest.mark.parametrize(
        "value,expected",
        [(None, "undefined"), (0.0, "0.00%"), (0.5, "50.00%"), (1.0, "100.00%"), (2 / 3, "66.67%")],
    )
    def test_format_percent(self, value, expected):
        assert format_percent(value) == expected

    def test_metric_rows_undefined(self):
        rows = dict(metric_rows(ConfusionAccumulator()))

        assert rows == {"Accuracy": "undefined", "Precision": "undefined", "Recall": "undefined"}

    def test_confusion_rows(self):
        stats = ConfusionAccumulator(true_positives=1, false_negatives=2, false_positives=3, true_negatives=4)

        columns, rows = confusion_rows(stats, "Bag")

        assert columns == ["Actual\\Pred", "Bag", "Not Bag"]
        assert rows == [["Bag", "1", "2"], ["Not Bag", "3", "4"]]

    def test_format_summary(self):
        stats = ConfusionAccumulator(true_positives=1, false_positives=1)

        text = format_summary("Original Images Evaluation", stats, "Bag")
        lines = text.splitlines()

        assert lines[0] == "=== Original Images Evaluation ==="
        assert "Accuracy: 50.00%" in lines
        assert "Precision: 50.00%" in lines
        assert "Recall: 100.00%" in lines
        assert "Confusion Matrix:" in lines
        table = [line for line in lines if line.startswith("|")]
        assert len(table) == 4
        assert "Not Bag" in table[3]
