import re
from datetime import datetime, timezone
from pathlib import Path

from writing_editor.models import Change
from writing_editor.tracking import (
    group_changes_by_category,
    render_tracking_report,
    save_tracking_report,
)

CHANGES = [
    Change("Passive Voice", "clarity", "A was done by B.", "B did A.", "Active voice"),
    Change("Tense Correction", "style", "It will run.", "It runs.", "Present tense"),
    Change("Passive Voice", "clarity", "C was seen by D.", "D saw C.", "Active voice"),
]


def test_group_changes_by_category_keeps_first_seen_order():
    """Categories appear in the order their first change was recorded."""
    grouped = group_changes_by_category(CHANGES)
    assert list(grouped) == ["clarity", "style"]
    assert len(grouped["clarity"]) == 2


def test_render_tracking_report_sections():
    """The report carries summary, grouped changes, comparison and rule counts."""
    generated = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    report = render_tracking_report("A was done by B.", "B did A.", CHANGES, generated)
    assert report.startswith("# Writing Edits Tracking Document\n")
    assert "**Generated:** 2024-01-02T03:04:05+00:00" in report
    assert "| Total Words | 5 | 3 | -2 |" in report
    assert "| Total Edits | - | - | 3 |" in report
    assert "### Clarity Changes (2)" in report
    assert "### Style Changes (1)" in report
    assert "#### 2. Passive Voice" in report
    assert "**Reason:** Present tense" in report
    assert "<details>" in report and "</details>" in report
    assert "The following 2 rules were applied:" in report
    assert "- **Passive Voice**: 2 changes" in report
    assert "- **Tense Correction**: 1 change\n" in report


def test_render_tracking_report_without_changes():
    """An empty change list still renders a complete report."""
    report = render_tracking_report("Same.", "Same.", [])
    assert "| Total Edits | - | - | 0 |" in report
    assert "The following 0 rules were applied:" in report


def test_save_tracking_report_writes_timestamped_file(tmp_path: Path):
    """Reports are written as edits_<epoch-ms>.md, creating the directory."""
    output_dir = tmp_path / "reports" / "nested"
    path = save_tracking_report("# Report\n", output_dir)
    assert path.parent == output_dir
    assert re.fullmatch(r"edits_\d+\.md", path.name)
    assert path.read_text(encoding="utf-8") == "# Report\n"
