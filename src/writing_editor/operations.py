from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, cast

from .config import EditorConfig
from .models import (
    DocumentType,
    EditMetrics,
    EditResult,
    OptimizationResult,
    OutputFormat,
    TextStats,
)
from .pipeline import DocumentProcessor
from .scoring import clarity_score, flesch_reading_ease
from .textutils import count_words
from .tracking import save_tracking_report

logger = logging.getLogger(__name__)

DOCUMENT_TYPES = ("full_paper", "section", "paragraph", "abstract")
OUTPUT_FORMATS = ("tracked_changes", "clean", "both")

# Section types map onto the document type whose rules suit them best.
SECTION_DOCUMENT_TYPES: Mapping[str, DocumentType] = {
    "introduction": "full_paper",
    "abstract": "abstract",
    "overview": "section",
    "conclusion": "section",
    "technical": "section",
    "results": "section",
}


class InvalidArgumentError(ValueError):
    """Raised when an operation receives missing or unsupported arguments."""


def _require_text(text: Any) -> str:
    if not isinstance(text, str):
        raise InvalidArgumentError("'text' is required and must be a string.")
    return text


def _require_choice(name: str, value: Any, choices: tuple[str, ...]) -> str:
    if value not in choices:
        raise InvalidArgumentError(
            f"Unsupported {name} '{value}'. Expected one of: {', '.join(choices)}."
        )
    return cast(str, value)


def persist_report(markdown: str, output_dir: str | Path) -> str | None:
    """Save a tracking report; failures are logged and reported as ``None``."""
    try:
        return str(save_tracking_report(markdown, output_dir))
    except OSError as exc:
        logger.warning("Failed to save tracking document to %s: %s", output_dir, exc)
        return None


def edit_document(
    text: str,
    document_type: str = "section",
    output_format: str = "tracked_changes",
    config: EditorConfig | None = None,
) -> EditResult:
    """Edit text with every rule and return the edited text plus its tracking data."""
    text = _require_text(text)
    doc_type = cast(
        DocumentType, _require_choice("documentType", document_type, DOCUMENT_TYPES)
    )
    fmt = cast(
        OutputFormat, _require_choice("outputFormat", output_format, OUTPUT_FORMATS)
    )
    cfg = config or EditorConfig()

    processed = DocumentProcessor(cfg.long_sentence_words).process(text, doc_type)

    report_path = None
    if fmt != "clean" and cfg.save_reports:
        report_path = persist_report(processed.tracking_report, cfg.output_dir)

    logger.info(
        "Edited %s document with %d changes (clarity %.0f)",
        doc_type,
        len(processed.changes),
        processed.metrics.clarity,
    )
    return EditResult(
        edited=processed.edited,
        metrics=EditMetrics(
            clarity_score=processed.metrics.clarity,
            changes=len(processed.changes),
            word_delta=processed.metrics.word_delta,
            readability_improvement=processed.metrics.readability_gain,
        ),
        suggestions=processed.suggestions,
        tracking=processed.tracking_report if fmt in ("tracked_changes", "both") else None,
        report_path=report_path,
    )


def text_stats(text: str) -> TextStats:
    return TextStats(
        words=count_words(text),
        clarity_score=clarity_score(text),
        readability=flesch_reading_ease(text),
    )


def optimize_section(
    text: str, section_type: str, config: EditorConfig | None = None
) -> OptimizationResult:
    """Edit a single section using the document type mapped from its section type."""
    text = _require_text(text)
    if not isinstance(section_type, str) or not section_type:
        raise InvalidArgumentError("'sectionType' is required and must be a string.")
    document_type = SECTION_DOCUMENT_TYPES.get(section_type.lower(), "section")
    result = edit_document(text, document_type, "both", config)
    return OptimizationResult(
        section_type=section_type,
        optimized=result.edited,
        before=text_stats(text),
        after=text_stats(result.edited),
        metrics=result.metrics,
        improvements=list(result.suggestions),
    )
