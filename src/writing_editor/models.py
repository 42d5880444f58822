from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Literal

ChangeCategory = Literal["clarity", "style", "structure", "vocabulary"]
DocumentType = Literal["full_paper", "section", "paragraph", "abstract"]
OutputFormat = Literal["tracked_changes", "clean", "both"]
Severity = Literal["low", "medium", "high"]


@dataclass(frozen=True, slots=True)
class Change:
    """A single recorded edit produced by a rule."""

    rule: str
    category: ChangeCategory
    before: str
    after: str
    reason: str
    section: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class Section:
    """A titled span of a document processed as a unit."""

    title: str
    content: str
    edited: str | None = None
    changes: list[Change] = field(default_factory=list)

    @property
    def text(self) -> str:
        """Edited content when available, otherwise the original content."""
        return self.edited if self.edited is not None else self.content

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "content": self.content,
            "edited": self.edited,
            "changes": [change.to_dict() for change in self.changes],
        }


@dataclass(slots=True)
class Metrics:
    """Document-level scores derived fresh on every run."""

    clarity: float
    word_delta: int
    readability_gain: float
    sentence_complexity: float
    passive_voice_count: int
    long_sentence_count: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class ValidationResult:
    """Outcome of a structure check plus its auto-fixed text."""

    valid: bool
    fixed_text: str
    issues: list[str] = field(default_factory=list)
    changes: list[Change] = field(default_factory=list)


@dataclass(slots=True)
class ProcessedDocument:
    """Top-level result of running the rewriting pipeline over a document."""

    document_type: DocumentType
    original: str
    edited: str
    sections: list[Section]
    metrics: Metrics
    tracking_report: str
    changes: list[Change]
    suggestions: list[str]


@dataclass(slots=True)
class EditMetrics:
    clarity_score: float
    changes: int
    word_delta: int
    readability_improvement: float


@dataclass(slots=True)
class EditResult:
    """Payload returned by the edit_document operation."""

    edited: str
    metrics: EditMetrics
    suggestions: list[str]
    tracking: str | None = None
    report_path: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class SectionPresence:
    name: str
    present: bool
    issues: list[str] = field(default_factory=list)


@dataclass(slots=True)
class StructureAnalysis:
    """Payload returned by the analyze_structure operation."""

    valid: bool
    sections: list[SectionPresence]
    suggestions: list[str]
    fixed_version: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class ClarityIssue:
    category: str
    severity: Severity
    count: int
    examples: list[str]


@dataclass(slots=True)
class ClarityStatistics:
    average_sentence_length: float
    passive_voice_percentage: int
    complex_word_percentage: int
    readability_score: int
    jargon_density: float


@dataclass(slots=True)
class ClarityReport:
    """Payload returned by the check_clarity_metrics operation."""

    score: int
    issues: list[ClarityIssue]
    statistics: ClarityStatistics
    recommendations: list[str]

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class TextStats:
    words: int
    clarity_score: float
    readability: float


@dataclass(slots=True)
class OptimizationResult:
    """Payload returned by the optimize_section operation."""

    section_type: str
    optimized: str
    before: TextStats
    after: TextStats
    metrics: EditMetrics
    improvements: list[str]

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
