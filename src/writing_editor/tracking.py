from __future__ import annotations

import logging
import time
from collections import Counter
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List

from .models import Change
from .scoring import flesch_reading_ease
from .textutils import count_words

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = "./edits"


def group_changes_by_category(changes: List[Change]) -> Dict[str, List[Change]]:
    """Group changes by category, keeping first-seen category order."""
    grouped: Dict[str, List[Change]] = {}
    for change in changes:
        grouped.setdefault(change.category, []).append(change)
    return grouped


def render_tracking_report(
    original: str,
    edited: str,
    changes: List[Change],
    generated_at: datetime | None = None,
) -> str:
    """Render the Markdown tracking document for one edit run."""
    timestamp = (generated_at or datetime.now(timezone.utc)).isoformat()
    original_words = count_words(original)
    edited_words = count_words(edited)
    readability_before = flesch_reading_ease(original)
    readability_after = flesch_reading_ease(edited)

    lines: List[str] = [
        "# Writing Edits Tracking Document",
        "",
        f"**Generated:** {timestamp}",
        "",
        "## Summary Statistics",
        "",
        "| Metric | Before | After | Change |",
        "|--------|--------|-------|--------|",
        f"| Total Words | {original_words} | {edited_words} | {edited_words - original_words} |",
        f"| Readability Score | {readability_before:.1f} | {readability_after:.1f} "
        f"| {readability_after - readability_before:.1f} |",
        f"| Total Edits | - | - | {len(changes)} |",
        f"| Characters | {len(original)} | {len(edited)} | {len(edited) - len(original)} |",
        "",
        "## Changes by Category",
        "",
    ]

    for category, category_changes in group_changes_by_category(changes).items():
        lines.append(f"### {category.capitalize()} Changes ({len(category_changes)})")
        lines.append("")
        for idx, change in enumerate(category_changes, start=1):
            lines.extend(
                [
                    f"#### {idx}. {change.rule}",
                    "",
                    "**Before:**",
                    "```",
                    change.before,
                    "```",
                    "",
                    "**After:**",
                    "```",
                    change.after,
                    "```",
                    "",
                    f"**Reason:** {change.reason}",
                    "",
                ]
            )

    lines.extend(
        [
            "## Full Document Comparison",
            "",
            "<details>",
            "<summary>Click to expand full comparison</summary>",
            "",
            "### Original Version",
            "```",
            original,
            "```",
            "",
            "### Edited Version",
            "```",
            edited,
            "```",
            "</details>",
            "",
            "## Applied Rules Summary",
            "",
        ]
    )

    rule_counts = Counter(change.rule for change in changes)
    lines.append(f"The following {len(rule_counts)} rules were applied:")
    lines.append("")
    for rule, count in rule_counts.items():
        plural = "s" if count > 1 else ""
        lines.append(f"- **{rule}**: {count} change{plural}")

    return "\n".join(lines) + "\n"


def save_tracking_report(markdown: str, output_dir: str | Path = DEFAULT_OUTPUT_DIR) -> Path:
    """Write the report to ``output_dir/edits_{epoch-ms}.md`` and return its path."""
    directory = Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"edits_{int(time.time() * 1000)}.md"
    path.write_text(markdown, encoding="utf-8")
    logger.info("Saved tracking report to %s", path)
    return path
